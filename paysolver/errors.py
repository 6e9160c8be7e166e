"""Errors raised by the payment allocation solver.

The hierarchy separates three very different conditions:
- InvalidArgument: malformed input to a pure arithmetic, ledger or knapsack call
- LimitExceeded: a ledger update that would drive a remaining limit negative
- UnresolvedOrder: no combination of remaining capacities can pay an order
"""

from __future__ import annotations

from decimal import Decimal


class PaymentSolverError(Exception):
    """Base class for payment solver errors."""

    pass


class InvalidArgument(PaymentSolverError, ValueError):
    """Malformed input: absent amount, out-of-range percent, unknown method, negative amount."""

    pass


class LimitExceeded(PaymentSolverError):
    """A ledger update would drive a method's remaining limit negative.

    Strategies pre-check availability before paying, so this is a contract
    violation of the calling strategy rather than a business outcome.

    Attributes:
        method_id: Payment method being charged
        amount: Amount the caller tried to charge
        remaining: Remaining limit at the time of the call
    """

    def __init__(self, method_id: str, amount: Decimal, remaining: Decimal) -> None:
        self.method_id = method_id
        self.amount = amount
        self.remaining = remaining
        super().__init__(
            f"Limit exceeded for {method_id}: charging {amount} against remaining {remaining}"
        )


class UnresolvedOrder(PaymentSolverError):
    """An order could not be paid by any combination of remaining limits.

    Fatal for the scenario that raised it; other scenarios are unaffected.

    Attributes:
        order_id: The order that could not be paid
        remainder: Gross value left unpaid after exhausting every method
        strategy: Name of the scenario strategy, when known
    """

    def __init__(self, order_id: str, remainder: Decimal, strategy: str | None = None) -> None:
        self.order_id = order_id
        self.remainder = remainder
        self.strategy = strategy
        super().__init__(f"Order {order_id} cannot be paid: {remainder} left unpaid")
