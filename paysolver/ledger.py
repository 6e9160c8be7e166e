"""Allocation ledger: per-scenario spent and remaining-limit tracking.

A ledger is created fresh for each scenario run from the frozen payment
method definitions and discarded afterwards. For every method m it keeps

    spent[m] + remaining[m] == original_limit[m]

and never lets remaining[m] go negative: a payment that would do so raises
LimitExceeded before anything is changed.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal

import structlog

from paysolver.errors import InvalidArgument, LimitExceeded
from paysolver.math.money import quantize_money
from paysolver.models.problem import PaymentMethod

logger = structlog.get_logger()

ZERO = Decimal("0.00")


def initialize_limits(methods: Iterable[PaymentMethod]) -> dict[str, Decimal]:
    """Build a fresh method-id -> remaining-limit map from method definitions."""
    if methods is None:
        raise InvalidArgument("Payment methods cannot be None")
    return {method.id: method.limit for method in methods}


def initialize_spent(methods: Iterable[PaymentMethod]) -> dict[str, Decimal]:
    """Build a fresh method-id -> spent map with every method at zero."""
    if methods is None:
        raise InvalidArgument("Payment methods cannot be None")
    return {method.id: ZERO for method in methods}


def total_spent(spent: Mapping[str, Decimal]) -> Decimal:
    """Sum the amounts of a spent map."""
    if spent is None:
        raise InvalidArgument("Spent map cannot be None")
    return quantize_money(sum(spent.values(), ZERO))


class Ledger:
    """Mutable spent/remaining-limit tracker owned by a single scenario run.

    Args:
        methods: Frozen payment method definitions; their limits seed the ledger
    """

    def __init__(self, methods: Iterable[PaymentMethod]) -> None:
        if methods is None:
            raise InvalidArgument("Payment methods cannot be None")
        methods = tuple(methods)
        self._remaining = initialize_limits(methods)
        self._spent = initialize_spent(methods)
        self._original = dict(self._remaining)

    def __repr__(self) -> str:
        return f"Ledger(spent={self._spent!r}, remaining={self._remaining!r})"

    def _check_method(self, method_id: str) -> None:
        if method_id is None:
            raise InvalidArgument("Payment method id cannot be None")
        if method_id not in self._remaining:
            raise InvalidArgument(f"Payment method not found: {method_id}")

    @property
    def method_ids(self) -> list[str]:
        """Method ids tracked by this ledger, in definition order."""
        return list(self._remaining)

    def remaining(self, method_id: str) -> Decimal:
        """Remaining limit of a payment method."""
        self._check_method(method_id)
        return self._remaining[method_id]

    def spent_on(self, method_id: str) -> Decimal:
        """Amount spent so far with a payment method."""
        self._check_method(method_id)
        return self._spent[method_id]

    def original_limit(self, method_id: str) -> Decimal:
        """Limit the payment method started the run with."""
        self._check_method(method_id)
        return self._original[method_id]

    def can_cover(self, method_id: str, amount: Decimal) -> bool:
        """Return True if ``amount`` fits in the method's remaining limit."""
        return self.remaining(method_id) >= amount

    def apply_payment(self, method_id: str, amount: Decimal) -> None:
        """Charge ``amount`` to a payment method.

        Args:
            method_id: Payment method to charge
            amount: Non-negative amount to charge

        Raises:
            InvalidArgument: If an argument is None, amount is negative, or the
                method is unknown
            LimitExceeded: If the charge would drive the remaining limit negative
        """
        self._check_method(method_id)
        if amount is None:
            raise InvalidArgument("Amount cannot be None")
        if amount < 0:
            raise InvalidArgument(f"Amount cannot be negative: {amount}")

        remaining = self._remaining[method_id]
        if remaining - amount < 0:
            raise LimitExceeded(method_id, amount, remaining)

        self._remaining[method_id] = remaining - amount
        self._spent[method_id] = self._spent[method_id] + amount
        logger.debug(
            "ledger_payment_applied",
            method_id=method_id,
            amount=str(amount),
            remaining=str(self._remaining[method_id]),
        )

    def total_spent(self) -> Decimal:
        """Sum of everything spent in this run."""
        return total_spent(self._spent)

    def spent_snapshot(self) -> dict[str, Decimal]:
        """Copy of the spent map, two fraction digits, definition order."""
        return {method_id: quantize_money(amount) for method_id, amount in self._spent.items()}

    def remaining_snapshot(self) -> dict[str, Decimal]:
        """Copy of the remaining-limit map, definition order."""
        return dict(self._remaining)
