"""Fixed-point money arithmetic.

All monetary results carry exactly two fraction digits, rounded half-up.
Discount factors are computed at 8-digit scale before the final rounding,
so that repeated conversions stay stable.

Subset selection works on whole cents instead of Decimal amounts; to_cents
and from_cents convert between the two representations without drift.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

from paysolver.errors import InvalidArgument

__all__ = [
    "CENTS",
    "CALCULATION_SCALE",
    "apply_discount",
    "reverse_discount",
    "quantize_money",
    "to_cents",
    "floor_cents",
    "from_cents",
]

CENTS = Decimal("0.01")

# Intermediate precision for discount factors and reverse conversion
CALCULATION_SCALE = Decimal("1E-8")

_HUNDRED = Decimal(100)


def _check_amount(amount: Decimal | None, name: str = "Amount") -> Decimal:
    if amount is None:
        raise InvalidArgument(f"{name} cannot be None")
    if not isinstance(amount, Decimal):
        if isinstance(amount, bool) or not isinstance(amount, int | str):
            raise InvalidArgument(f"{name} must be Decimal, got {type(amount).__name__}")
        amount = Decimal(amount)
    return amount


def _check_percent(pct: int, *, allow_full: bool) -> int:
    if isinstance(pct, bool) or not isinstance(pct, int):
        raise InvalidArgument(f"Discount percentage must be an integer, got {pct!r}")
    upper_ok = pct <= 100 if allow_full else pct < 100
    if pct < 0 or not upper_ok:
        bound = "[0, 100]" if allow_full else "[0, 100)"
        raise InvalidArgument(f"Discount percentage must be in {bound}, got {pct}")
    return pct


def _discount_factor(pct: int) -> Decimal:
    return Decimal(1) - (Decimal(pct) / _HUNDRED).quantize(CALCULATION_SCALE, ROUND_HALF_UP)


def quantize_money(amount: Decimal) -> Decimal:
    """Round an amount half-up to two fraction digits."""
    return _check_amount(amount).quantize(CENTS, ROUND_HALF_UP)


def apply_discount(amount: Decimal, pct: int) -> Decimal:
    """Return ``amount`` reduced by ``pct`` percent.

    Args:
        amount: Gross amount
        pct: Discount percent, integer in [0, 100]

    Returns:
        Discounted amount rounded half-up to cents

    Raises:
        InvalidArgument: If amount is None or pct is out of range
    """
    amount = _check_amount(amount)
    pct = _check_percent(pct, allow_full=True)
    return (amount * _discount_factor(pct)).quantize(CENTS, ROUND_HALF_UP)


def reverse_discount(discounted_amount: Decimal, pct: int) -> Decimal:
    """Return the gross amount that ``pct`` percent off would reduce to ``discounted_amount``.

    A 100% discount maps every gross amount to zero and has no inverse.

    Args:
        discounted_amount: Amount after discount
        pct: Discount percent, integer in [0, 100)

    Returns:
        Gross amount rounded half-up to cents

    Raises:
        InvalidArgument: If discounted_amount is None or pct is out of range
    """
    discounted_amount = _check_amount(discounted_amount, "Discounted amount")
    pct = _check_percent(pct, allow_full=False)
    gross = (discounted_amount / _discount_factor(pct)).quantize(CALCULATION_SCALE, ROUND_HALF_UP)
    return gross.quantize(CENTS, ROUND_HALF_UP)


def to_cents(amount: Decimal) -> int:
    """Convert a money amount to integer cents.

    Raises:
        InvalidArgument: If the amount is not a whole number of cents
    """
    amount = _check_amount(amount)
    cents = amount * 100
    if cents != cents.to_integral_value():
        raise InvalidArgument(f"Amount {amount} is not a whole number of cents")
    return int(cents)


def floor_cents(amount: Decimal) -> int:
    """Convert a money amount to integer cents, dropping any fraction of a cent."""
    amount = _check_amount(amount)
    return int((amount * 100).to_integral_value(rounding=ROUND_FLOOR))


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-digit money amount."""
    return (Decimal(cents) / 100).quantize(CENTS)
