"""Mathematical utilities for the payment solver.

This package provides the fixed-point money primitives:
- apply_discount / reverse_discount: discount arithmetic at a fixed rounding discipline
- to_cents / from_cents: exact conversion between money and integer cents
"""

from paysolver.math.money import (
    CENTS,
    apply_discount,
    from_cents,
    quantize_money,
    reverse_discount,
    to_cents,
)

__all__ = [
    "CENTS",
    "apply_discount",
    "reverse_discount",
    "quantize_money",
    "to_cents",
    "from_cents",
]
