"""Test helpers module for shared test utilities.

- constants: Payment method ids
- factories: Order, payment method and problem factory functions
"""

from tests.helpers.constants import BOS, CARD10, CARD20, MZYSK, POINTS
from tests.helpers.factories import (
    make_example_problem,
    make_method,
    make_order,
    make_problem,
)

__all__ = [
    # Constants
    "POINTS",
    "CARD20",
    "CARD10",
    "MZYSK",
    "BOS",
    # Factories
    "make_order",
    "make_method",
    "make_problem",
    "make_example_problem",
]
