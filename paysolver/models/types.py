"""Shared type definitions for payment solver models."""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from paysolver.math.money import CENTS


def validate_money(value: Any) -> Decimal:
    """Validate that a value is a non-negative amount with at most two fraction digits.

    Args:
        value: Value to validate (Decimal, string, int or JSON float)

    Returns:
        The amount as a Decimal with exactly two fraction digits

    Raises:
        ValueError: If the value is not a number, is negative or too large to hold in cents,
            or has sub-cent precision
    """
    if isinstance(value, bool):
        raise ValueError(f"Money must be a number, got {value!r}")
    if isinstance(value, float):
        # JSON numbers arrive as floats; their shortest repr is the written literal
        value = str(value)
    if not isinstance(value, Decimal | int | str):
        raise ValueError(f"Money must be a number, got {type(value).__name__}")

    try:
        amount = Decimal(value)
    except InvalidOperation as err:
        raise ValueError(f"Money must be a decimal number: '{value}'") from err

    if not amount.is_finite():
        raise ValueError(f"Money must be finite: {value}")
    if amount < 0:
        raise ValueError(f"Money cannot be negative: {value}")

    try:
        quantized = amount.quantize(CENTS)
    except InvalidOperation as err:
        raise ValueError(f"Money out of range: {value}") from err
    if quantized != amount:
        raise ValueError(f"Money cannot have more than two fraction digits: {value}")
    return quantized


def validate_promotions(value: Any) -> Any:
    """Treat a missing or null promotions list as empty."""
    if value is None:
        return ()
    return value


# Non-negative amount with exactly two fraction digits
Money = Annotated[
    Decimal,
    BeforeValidator(validate_money),
    Field(description="Monetary amount with two fraction digits"),
]

# Integer discount percent
DiscountPercent = Annotated[int, Field(ge=0, le=100, description="Discount percent (0-100)")]

# Payment method ids an order is promotion-eligible with
Promotions = Annotated[tuple[str, ...], BeforeValidator(validate_promotions)]
