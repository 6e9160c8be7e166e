"""Mixed strategy - spread points thinly to trigger the partial-points discount."""

from __future__ import annotations

from collections.abc import Sequence

from paysolver.ledger import Ledger
from paysolver.models.problem import Order, PaymentMethod, PaymentProblem
from paysolver.strategies.base import OrderPayment, PaymentKind
from paysolver.strategies.payments import (
    best_promoted_card,
    can_pay_full,
    full_payment_cost,
    pay_full,
    try_partial_points,
)
from paysolver.strategies.scenario import ScenarioStrategy


class MixedPointsStrategy(ScenarioStrategy):
    """Prefer points+card splits over full payments.

    Paying the configured share (10%) of an order with points and the rest
    with one card earns a flat order-wide discount (10%). A points wallet can
    unlock that discount on many orders instead of paying one order outright,
    which no card-first or points-first ordering ever tries.

    1. Orders in source order: split whenever the points share is affordable
       and some card can carry the card share.
    2. Remaining orders: full payment with the cheaper of points and the best
       promotion-eligible card (the card on a tie).
    3. Anything left goes to the fallback allocator.
    """

    name = "mixed_points"

    def _allocate_orders(self, problem: PaymentProblem, ledger: Ledger) -> list[OrderPayment]:
        points = self._points_method(problem)
        cards = self._cards(problem)
        payments: list[OrderPayment] = []

        remaining: list[Order] = []
        for order in problem.orders:
            payment = try_partial_points(ledger, order, points, cards, self.config)
            if payment is None:
                remaining.append(order)
            else:
                payments.append(payment)

        unresolved: list[Order] = []
        for order in remaining:
            payment = self._cheapest_full_payment(ledger, order, points, cards)
            if payment is None:
                unresolved.append(order)
            else:
                payments.append(payment)

        payments.extend(self._settle_leftovers(problem, ledger, unresolved))
        return payments

    @staticmethod
    def _cheapest_full_payment(
        ledger: Ledger,
        order: Order,
        points: PaymentMethod | None,
        cards: Sequence[PaymentMethod],
    ) -> OrderPayment | None:
        card = best_promoted_card(ledger, order, cards)
        points_ok = points is not None and can_pay_full(ledger, order, points)

        if points_ok and (
            card is None or full_payment_cost(order, points) < full_payment_cost(order, card)
        ):
            return pay_full(ledger, order, points, PaymentKind.POINTS)
        if card is not None:
            return pay_full(ledger, order, card, PaymentKind.CARD)
        return None
