"""Pydantic models for solver responses."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer


class SolveResponse(BaseModel):
    """Spent amount per payment method for the cheapest scenario found."""

    spent: dict[str, Decimal] = Field(
        description="Amount spent per payment method id, zero for unused methods."
    )
    total: Decimal = Field(description="Sum of all spent amounts.")
    strategy: str | None = Field(
        default=None,
        description="Name of the scenario strategy that produced the allocation.",
    )

    @field_serializer("spent")
    def _serialize_spent(self, spent: dict[str, Decimal]) -> dict[str, str]:
        return {method_id: str(amount) for method_id, amount in spent.items()}

    @field_serializer("total")
    def _serialize_total(self, total: Decimal) -> str:
        return str(total)
