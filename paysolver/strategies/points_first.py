"""Points-first strategy - spend the points wallet on the largest orders."""

from __future__ import annotations

from paysolver.ledger import Ledger
from paysolver.models.problem import Order, PaymentProblem
from paysolver.strategies.base import OrderPayment
from paysolver.strategies.payments import try_best_card, try_full_points
from paysolver.strategies.scenario import ScenarioStrategy


class PointsFirstStrategy(ScenarioStrategy):
    """Pay orders fully with points while the wallet lasts.

    Orders are visited by gross value, descending. Each is paid in full with
    points if the remaining points limit covers the points-discounted value,
    otherwise in full with the best promotion-eligible card that can absorb
    it. Orders neither can pay go to the fallback allocator.
    """

    name = "points_first"

    def _allocate_orders(self, problem: PaymentProblem, ledger: Ledger) -> list[OrderPayment]:
        points = self._points_method(problem)
        cards = self._cards(problem)
        payments: list[OrderPayment] = []
        unresolved: list[Order] = []

        for order in sorted(problem.orders, key=lambda o: o.value, reverse=True):
            payment = try_full_points(ledger, order, points) or try_best_card(ledger, order, cards)
            if payment is None:
                unresolved.append(order)
            else:
                payments.append(payment)

        payments.extend(self._settle_leftovers(problem, ledger, unresolved))
        return payments
