"""Fallback allocator - settles orders the primary passes of a strategy left unpaid."""

from __future__ import annotations

from decimal import Decimal

import structlog

from paysolver.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from paysolver.errors import UnresolvedOrder
from paysolver.ledger import Ledger
from paysolver.math.money import CENTS, apply_discount, reverse_discount
from paysolver.models.problem import Order, PaymentMethod, PaymentProblem
from paysolver.strategies.base import OrderPayment, PaymentKind
from paysolver.strategies.payments import try_best_card, try_full_points, try_partial_points

logger = structlog.get_logger()


class FallbackAllocator:
    """Pays a single order with whatever the ledger still allows.

    Compositions are tried from most to least structured:
    1. Partial points plus one card (flat order-wide discount)
    2. Full points payment
    3. Best promotion-eligible card
    4. Proration across every method with positive remaining limit, highest
       discount first, each method paying its own discount on the slice of
       gross value it covers

    The proration is a heuristic: methods are consumed strictly in discount
    order with no attempt at a globally optimal split.

    Args:
        config: Allocation rule configuration
    """

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or DEFAULT_SOLVER_CONFIG

    def allocate(self, ledger: Ledger, problem: PaymentProblem, order: Order) -> OrderPayment:
        """Pay ``order`` from the ledger's remaining limits.

        Args:
            ledger: The ledger of the running scenario
            problem: The frozen problem (for method definitions)
            order: The order to pay

        Returns:
            The payment composition that was charged

        Raises:
            UnresolvedOrder: If all remaining limits together cannot cover the order
        """
        points = problem.method(self.config.points_method_id)
        cards = problem.cards(self.config.points_method_id)

        payment = (
            try_partial_points(ledger, order, points, cards, self.config)
            or try_full_points(ledger, order, points)
            or try_best_card(ledger, order, cards)
        )
        if payment is not None:
            return payment

        return self._split_across_methods(ledger, problem, order)

    def _split_across_methods(
        self, ledger: Ledger, problem: PaymentProblem, order: Order
    ) -> OrderPayment:
        """Prorate the order's gross value across all methods with remaining limit.

        The plan is computed in full before anything is charged, so an order
        that cannot be covered leaves the ledger unchanged.
        """
        methods = sorted(
            (m for m in problem.payment_methods if ledger.remaining(m.id) > 0),
            key=lambda m: m.discount,
            reverse=True,
        )

        remainder = order.value
        plan: list[tuple[PaymentMethod, Decimal]] = []
        for method in methods:
            if remainder <= 0:
                break
            gross, cost = self._coverable_slice(ledger.remaining(method.id), method, remainder)
            if gross <= 0:
                continue
            plan.append((method, cost))
            remainder -= gross

        if remainder > 0:
            logger.warning(
                "order_unresolved",
                order_id=order.id,
                order_value=str(order.value),
                remainder=str(remainder),
                methods_tried=[m.id for m in methods],
            )
            raise UnresolvedOrder(order.id, remainder)

        parts: dict[str, Decimal] = {}
        for method, cost in plan:
            ledger.apply_payment(method.id, cost)
            parts[method.id] = cost

        logger.debug(
            "fallback_split_applied",
            order_id=order.id,
            parts={method_id: str(cost) for method_id, cost in parts.items()},
        )
        return OrderPayment(order=order, parts=parts, kind=PaymentKind.SPLIT)

    @staticmethod
    def _coverable_slice(
        available: Decimal, method: PaymentMethod, remainder: Decimal
    ) -> tuple[Decimal, Decimal]:
        """Gross slice of ``remainder`` a method can cover, and what it costs.

        Returns:
            Tuple of (gross_slice, discounted_cost) with cost <= available
        """
        if method.discount == 100:
            # Everything is free; the limit never binds
            return remainder, apply_discount(remainder, method.discount)

        gross = min(reverse_discount(available, method.discount), remainder)
        cost = apply_discount(gross, method.discount)
        # Rounding of the reverse conversion can overshoot the limit by a cent or two
        while gross > 0 and cost > available:
            gross -= CENTS
            cost = apply_discount(gross, method.discount)
        return gross, cost
