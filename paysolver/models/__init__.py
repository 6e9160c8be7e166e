"""Pydantic models for payment solver data structures."""

from paysolver.models.problem import Order, PaymentMethod, PaymentProblem
from paysolver.models.response import SolveResponse
from paysolver.models.types import DiscountPercent, Money, Promotions

__all__ = [
    # Types
    "Money",
    "DiscountPercent",
    "Promotions",
    # Input models
    "Order",
    "PaymentMethod",
    "PaymentProblem",
    # Response models
    "SolveResponse",
]
