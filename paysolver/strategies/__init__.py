"""Scenario strategies for the payment solver.

Each strategy allocates every order of a problem against its own ledger and
returns a ScenarioResult. The Solver evaluates them independently and keeps
the cheapest.

**Default Chain (evaluation order, which also breaks ties):**
    1. CardFirstStrategy - card promotions via subset selection, then points
    2. PointsFirstStrategy - full points payments on the largest orders
    3. MixedPointsStrategy - partial-points splits, then full payments

Orders a strategy cannot place are settled by the FallbackAllocator.
"""

from paysolver.strategies.base import (
    AllocationStrategy,
    OrderPayment,
    PaymentKind,
    ScenarioResult,
)
from paysolver.strategies.card_first import CardFirstStrategy
from paysolver.strategies.fallback import FallbackAllocator
from paysolver.strategies.knapsack import select_max_subset
from paysolver.strategies.mixed_points import MixedPointsStrategy
from paysolver.strategies.points_first import PointsFirstStrategy
from paysolver.strategies.scenario import ScenarioStrategy

__all__ = [
    # === Base Protocol ===
    "AllocationStrategy",
    "ScenarioStrategy",
    "ScenarioResult",
    "OrderPayment",
    "PaymentKind",
    # === Strategies ===
    "CardFirstStrategy",
    "PointsFirstStrategy",
    "MixedPointsStrategy",
    # === Building Blocks ===
    "FallbackAllocator",
    "select_max_subset",
]
