"""Solver configuration."""

from dataclasses import dataclass
from decimal import Decimal

# Identifier of the loyalty-points wallet among the payment methods
POINTS_METHOD_ID = "PUNKTY"


@dataclass(frozen=True)
class SolverConfig:
    """Centralized configuration for the allocation rules.

    Attributes:
        points_method_id: Payment method id that denotes the points wallet
            (default: "PUNKTY")
        partial_points_share: Share of an order's gross value paid with points
            to unlock the order-wide partial-points discount (default: 0.10)
        partial_points_discount: Discount percent applied to the whole order when
            it is split between points and one card (default: 10)
    """

    points_method_id: str = POINTS_METHOD_ID
    partial_points_share: Decimal = Decimal("0.10")
    partial_points_discount: int = 10


# Default configuration instance
DEFAULT_SOLVER_CONFIG = SolverConfig()
