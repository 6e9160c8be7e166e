"""Subset selection: 0/1 knapsack over order values.

Chooses which orders a payment method should fully cover within its limit.
Amounts are scaled to whole cents so the reachability table can be indexed
by integer capacity without floating-point drift.

Each table row is stored as a Python int used as a bitset: bit j of
``rows[i]`` is set iff some subset of the first i orders sums to exactly j
cents. Shifting a row by an order's value adds that order to every subset
the row already reaches.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

import structlog

from paysolver.errors import InvalidArgument
from paysolver.math.money import floor_cents, from_cents, to_cents
from paysolver.models.problem import Order

logger = structlog.get_logger()


def _build_reachability(values: Sequence[int], capacity: int) -> list[int]:
    """Build the (len(values)+1) x (capacity+1) reachability table."""
    mask = (1 << (capacity + 1)) - 1
    rows = [1]  # only the empty sum is reachable with no orders
    for value in values:
        previous = rows[-1]
        rows.append((previous | (previous << value)) & mask)
    return rows


def _backtrack(rows: list[int], values: Sequence[int], target: int) -> list[int]:
    """Recover the indices of one subset reaching ``target``.

    Walks from the last order to the first, taking an order only when the
    remaining sum is unreachable without it, so earlier orders win ties.
    """
    chosen: list[int] = []
    remaining = target
    for i in range(len(values), 0, -1):
        if remaining == 0:
            break
        if (rows[i - 1] >> remaining) & 1:
            continue
        chosen.append(i - 1)
        remaining -= values[i - 1]
    chosen.reverse()
    return chosen


def select_max_subset(orders: Sequence[Order], capacity: Decimal) -> list[Order]:
    """Select the subset of orders with maximum total value not exceeding capacity.

    Args:
        orders: Candidate orders, in the order ties should be resolved
        capacity: Maximum total gross value (e.g. a method's remaining limit)

    Returns:
        The selected orders in source order (empty if nothing fits)

    Raises:
        InvalidArgument: If capacity is None or negative, or an order value is
            not a whole number of cents
    """
    if capacity is None:
        raise InvalidArgument("Capacity cannot be None")
    if capacity < 0:
        raise InvalidArgument(f"Capacity cannot be negative: {capacity}")
    if not orders:
        return []

    values = [to_cents(order.value) for order in orders]
    # Sums above the total candidate value are unreachable, so cells beyond it are dropped
    capacity_cents = min(floor_cents(capacity), sum(values))

    rows = _build_reachability(values, capacity_cents)
    best = rows[-1].bit_length() - 1

    chosen = _backtrack(rows, values, best)
    logger.debug(
        "subset_selected",
        candidates=len(orders),
        capacity=str(from_cents(capacity_cents)),
        selected=len(chosen),
        selected_value=str(from_cents(best)),
    )
    return [orders[i] for i in chosen]
