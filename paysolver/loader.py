"""Load orders and payment methods from JSON files.

Expected formats:

    orders.json          [{"id": "ORDER1", "value": "150.00", "promotions": ["mZysk"]}, ...]
    paymentmethods.json  [{"id": "PUNKTY", "discount": "15", "limit": "100.00"}, ...]
"""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from paysolver.models.problem import Order, PaymentMethod, PaymentProblem

_ORDERS = TypeAdapter(list[Order])
_PAYMENT_METHODS = TypeAdapter(list[PaymentMethod])


def load_orders(path: Path | str) -> list[Order]:
    """Parse a JSON list of orders.

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the content is not a valid order list
    """
    return _ORDERS.validate_json(Path(path).read_bytes())


def load_payment_methods(path: Path | str) -> list[PaymentMethod]:
    """Parse a JSON list of payment methods.

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the content is not a valid payment method list
    """
    return _PAYMENT_METHODS.validate_json(Path(path).read_bytes())


def load_problem(orders_path: Path | str, methods_path: Path | str) -> PaymentProblem:
    """Load both files into a frozen PaymentProblem."""
    return PaymentProblem(
        orders=load_orders(orders_path),
        payment_methods=load_payment_methods(methods_path),
    )
