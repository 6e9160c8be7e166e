"""Card-first strategy - let each card absorb the most order value it can."""

from __future__ import annotations

import structlog

from paysolver.ledger import Ledger
from paysolver.models.problem import PaymentProblem
from paysolver.strategies.base import OrderPayment, PaymentKind
from paysolver.strategies.knapsack import select_max_subset
from paysolver.strategies.payments import pay_full, try_full_points
from paysolver.strategies.scenario import ScenarioStrategy

logger = structlog.get_logger()


class CardFirstStrategy(ScenarioStrategy):
    """Spend card promotions first, highest discount first.

    1. Cards are visited by discount, descending. For each card, the Subset
       Selector picks among the unpaid orders promoted with it the subset of
       maximum gross value that fits the card's remaining limit; each picked
       order is paid in full at the card's discount.
    2. Unpaid orders, largest first, are paid in full with points whenever the
       points limit covers the points-discounted value.
    3. Anything left goes to the fallback allocator.

    Selecting on gross values is conservative: the discounted amounts charged
    always fit the limit the selection was made against.
    """

    name = "card_first"

    def _allocate_orders(self, problem: PaymentProblem, ledger: Ledger) -> list[OrderPayment]:
        points = self._points_method(problem)
        payments: list[OrderPayment] = []
        unpaid = list(problem.orders)

        for card in sorted(self._cards(problem), key=lambda m: m.discount, reverse=True):
            candidates = [o for o in unpaid if o.is_promoted_with(card.id)]
            if not candidates:
                continue

            selected = select_max_subset(candidates, ledger.remaining(card.id))
            for order in selected:
                payments.append(pay_full(ledger, order, card, PaymentKind.CARD))

            if selected:
                logger.debug(
                    "card_absorbed_orders",
                    card=card.id,
                    order_ids=[o.id for o in selected],
                    remaining=str(ledger.remaining(card.id)),
                )
                selected_ids = {o.id for o in selected}
                unpaid = [o for o in unpaid if o.id not in selected_ids]

        leftovers = []
        for order in sorted(unpaid, key=lambda o: o.value, reverse=True):
            payment = try_full_points(ledger, order, points)
            if payment is None:
                leftovers.append(order)
            else:
                payments.append(payment)

        # Fallback keeps source order
        leftover_ids = {o.id for o in leftovers}
        leftovers = [o for o in unpaid if o.id in leftover_ids]
        payments.extend(self._settle_leftovers(problem, ledger, leftovers))
        return payments
