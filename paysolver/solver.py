"""Main solver that orchestrates scenario strategies.

The Solver class is the entry point for allocating payment methods to a
batch of orders. No single greedy ordering is cheapest on every batch, so it
runs several independent strategies and keeps the allocation with the lowest
total spend.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING

import structlog

from paysolver.config import DEFAULT_SOLVER_CONFIG, POINTS_METHOD_ID, SolverConfig
from paysolver.errors import UnresolvedOrder
from paysolver.ledger import initialize_spent, total_spent
from paysolver.models.problem import PaymentProblem
from paysolver.models.response import SolveResponse

if TYPE_CHECKING:
    from paysolver.strategies.base import AllocationStrategy, ScenarioResult

logger = structlog.get_logger()


class Solver:
    """Runs every strategy in isolation and returns the cheapest allocation.

    Strategies are pure functions of the frozen problem plus their own
    ledger, so their relative order never affects correctness; it only
    decides ties, where the earlier strategy wins.

    Default strategies (in evaluation order):
    1. CardFirstStrategy - card promotions via subset selection
    2. PointsFirstStrategy - full points payments on the largest orders
    3. MixedPointsStrategy - partial-points splits

    Args:
        strategies: Strategies to evaluate. If None, uses the defaults.
        config: Allocation rule configuration for the default strategies.
    """

    def __init__(
        self,
        strategies: list[AllocationStrategy] | None = None,
        config: SolverConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_SOLVER_CONFIG

        if strategies is not None:
            self.strategies = strategies
        else:
            from paysolver.strategies import (
                CardFirstStrategy,
                MixedPointsStrategy,
                PointsFirstStrategy,
            )

            self.strategies = [
                CardFirstStrategy(self.config),
                PointsFirstStrategy(self.config),
                MixedPointsStrategy(self.config),
            ]

    def run_scenarios(self, problem: PaymentProblem) -> list[ScenarioResult]:
        """Evaluate every strategy on the problem.

        A strategy that cannot pay some order is skipped; the others are
        unaffected.

        Args:
            problem: The frozen batch to allocate

        Returns:
            Results of the strategies that succeeded, in evaluation order

        Raises:
            UnresolvedOrder: The first strategy's failure, if every strategy failed
        """
        results: list[ScenarioResult] = []
        failures: list[UnresolvedOrder] = []

        for strategy in self.strategies:
            name = getattr(strategy, "name", type(strategy).__name__)
            try:
                result = strategy.allocate(problem)
            except UnresolvedOrder as err:
                err.strategy = name
                failures.append(err)
                logger.warning(
                    "scenario_unresolved",
                    strategy=name,
                    order_id=err.order_id,
                    remainder=str(err.remainder),
                )
                continue

            logger.info(
                "scenario_completed",
                strategy=name,
                order_count=problem.order_count,
                total_spent=str(result.total_spent),
            )
            results.append(result)

        if not results and failures:
            raise failures[0]
        return results

    def best_scenario(self, problem: PaymentProblem) -> ScenarioResult | None:
        """Return the cheapest scenario result.

        Ties go to the strategy evaluated first. Returns None only when the
        solver has no strategies.

        Raises:
            UnresolvedOrder: If every strategy failed to pay some order
        """
        best: ScenarioResult | None = None
        for result in self.run_scenarios(problem):
            if best is None or result.total_spent < best.total_spent:
                best = result

        if best is not None:
            logger.info(
                "scenario_selected",
                strategy=best.strategy,
                total_spent=str(best.total_spent),
            )
        return best

    def solve(self, problem: PaymentProblem) -> dict[str, Decimal]:
        """Allocate the batch and return the amount spent per payment method.

        Every configured method appears in the result, in definition order,
        with zero for methods the winning scenario never used.

        Args:
            problem: The frozen batch to allocate

        Returns:
            Mapping of payment method id to amount spent (two fraction digits)

        Raises:
            UnresolvedOrder: If no strategy could pay every order
        """
        spent, _ = self._allocate(problem)
        return spent

    def solve_response(self, problem: PaymentProblem) -> SolveResponse:
        """Like solve, wrapped in the API response model."""
        spent, best = self._allocate(problem)
        return SolveResponse(
            spent=spent,
            total=total_spent(spent),
            strategy=best.strategy if best is not None else None,
        )

    def _allocate(
        self, problem: PaymentProblem
    ) -> tuple[dict[str, Decimal], ScenarioResult | None]:
        spent = initialize_spent(problem.payment_methods)
        if problem.order_count == 0:
            return spent, None

        best = self.best_scenario(problem)
        if best is None:
            logger.debug(
                "no_strategy_configured",
                order_count=problem.order_count,
            )
            return spent, None

        spent.update(best.spent)
        return spent, best


@lru_cache(maxsize=8)
def get_default_solver(points_method_id: str = POINTS_METHOD_ID) -> Solver:
    """Return the shared solver with the default strategies.

    One instance is kept per points wallet id; the rest of the config is the default.
    """
    return Solver(config=replace(DEFAULT_SOLVER_CONFIG, points_method_id=points_method_id))
