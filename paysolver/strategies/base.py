"""Base protocol and data structures for scenario strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Protocol

from paysolver.ledger import total_spent
from paysolver.models.problem import Order, PaymentProblem


class PaymentKind(str, Enum):
    """How an order ended up being paid."""

    CARD = "card"  # Full payment with one card
    POINTS = "points"  # Full payment with points
    PARTIAL_POINTS = "partial_points"  # Points share plus one card
    SPLIT = "split"  # Prorated across several methods


@dataclass
class OrderPayment:
    """Record of how one order was paid.

    Attributes:
        order: The order being paid
        parts: Amount charged per payment method id
        kind: How the composition came about
    """

    order: Order
    parts: dict[str, Decimal]
    kind: PaymentKind

    @property
    def amount(self) -> Decimal:
        """Total charged for the order across all methods."""
        return sum(self.parts.values(), Decimal("0.00"))

    @property
    def method_ids(self) -> list[str]:
        """Methods used to pay the order."""
        return list(self.parts)

    @property
    def is_split(self) -> bool:
        """True if more than one method was charged."""
        return len(self.parts) > 1


@dataclass
class ScenarioResult:
    """Finished allocation of one scenario strategy.

    Attributes:
        strategy: Name of the strategy that produced the allocation
        spent: Amount spent per payment method id, in definition order
        payments: How each order was paid, in the order they were settled
    """

    strategy: str
    spent: dict[str, Decimal] = field(default_factory=dict)
    payments: list[OrderPayment] = field(default_factory=list)

    @property
    def total_spent(self) -> Decimal:
        """Sum of everything spent; the quantity scenarios are compared by."""
        return total_spent(self.spent)

    def payment_for(self, order_id: str) -> OrderPayment | None:
        """Return the payment record of an order, or None."""
        for payment in self.payments:
            if payment.order.id == order_id:
                return payment
        return None


class AllocationStrategy(Protocol):
    """Protocol for scenario strategies.

    A strategy allocates every order of the problem using only its own
    ledger, so strategies can be evaluated independently and compared.
    """

    name: str

    def allocate(self, problem: PaymentProblem) -> ScenarioResult:
        """Allocate payment methods to every order.

        Raises:
            UnresolvedOrder: If some order cannot be paid
        """
        ...
