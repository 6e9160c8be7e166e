"""Pydantic models for the payment allocation input.

Orders and payment methods are frozen once validated; every scenario run
works on its own ledger and never mutates them.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from paysolver.models.types import DiscountPercent, Money, Promotions


class Order(BaseModel):
    """An order to be paid."""

    id: str = Field(min_length=1, description="Unique identifier for the order.")
    value: Money = Field(description="Gross order value.")
    promotions: Promotions = Field(
        default=(),
        description="Payment method ids the order gets a full-card discount with.",
    )

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def _value_positive(cls, value: Decimal) -> Decimal:
        if value <= 0:
            raise ValueError(f"Order value must be positive: {value}")
        return value

    def is_promoted_with(self, method_id: str) -> bool:
        """Return True if paying fully with ``method_id`` earns its discount."""
        return method_id in self.promotions


class PaymentMethod(BaseModel):
    """A discount-bearing payment instrument (card or points wallet)."""

    id: str = Field(min_length=1, description="Unique identifier for the payment method.")
    discount: DiscountPercent
    limit: Money = Field(description="Maximum amount that can be spent with this method.")

    model_config = {"frozen": True}


class PaymentProblem(BaseModel):
    """The batch handed to the solver: orders and the payment methods to pay them with."""

    orders: tuple[Order, ...] = Field(
        default=(),
        description="Orders to pay, in source order.",
    )
    payment_methods: tuple[PaymentMethod, ...] = Field(
        default=(),
        alias="paymentMethods",
        description="Available payment methods, in definition order.",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="after")
    def _ids_unique(self) -> "PaymentProblem":
        for label, ids in (
            ("order", [o.id for o in self.orders]),
            ("payment method", [m.id for m in self.payment_methods]),
        ):
            seen: set[str] = set()
            for item_id in ids:
                if item_id in seen:
                    raise ValueError(f"Duplicate {label} id: {item_id}")
                seen.add(item_id)
        return self

    @property
    def order_count(self) -> int:
        """Return the number of orders in this batch."""
        return len(self.orders)

    @property
    def method_ids(self) -> list[str]:
        """Payment method ids in definition order."""
        return [m.id for m in self.payment_methods]

    def method(self, method_id: str) -> PaymentMethod | None:
        """Return the payment method with the given id, or None."""
        for method in self.payment_methods:
            if method.id == method_id:
                return method
        return None

    def cards(self, points_method_id: str) -> list[PaymentMethod]:
        """Return every payment method except the points wallet, in definition order."""
        return [m for m in self.payment_methods if m.id != points_method_id]
