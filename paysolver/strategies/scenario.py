"""Shared plumbing for the built-in scenario strategies."""

from __future__ import annotations

import structlog

from paysolver.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from paysolver.ledger import Ledger
from paysolver.models.problem import Order, PaymentMethod, PaymentProblem
from paysolver.strategies.base import OrderPayment, ScenarioResult
from paysolver.strategies.fallback import FallbackAllocator

logger = structlog.get_logger()


class ScenarioStrategy:
    """Base class for strategies that allocate against a private ledger.

    Subclasses implement ``_allocate_orders``; ``allocate`` creates the fresh
    ledger and wraps the payments into a ScenarioResult. Orders a subclass
    cannot place are handed to the fallback allocator through ``_settle_leftovers``.

    Args:
        config: Allocation rule configuration
        fallback: Injected fallback allocator for testing. Defaults to a
            FallbackAllocator with the same config.
    """

    name = "scenario"

    def __init__(
        self,
        config: SolverConfig | None = None,
        fallback: FallbackAllocator | None = None,
    ) -> None:
        self.config = config or DEFAULT_SOLVER_CONFIG
        self.fallback = fallback or FallbackAllocator(self.config)

    def allocate(self, problem: PaymentProblem) -> ScenarioResult:
        """Allocate every order of ``problem`` using a fresh ledger.

        Raises:
            UnresolvedOrder: If some order cannot be paid
        """
        ledger = Ledger(problem.payment_methods)
        payments = self._allocate_orders(problem, ledger)

        result = ScenarioResult(
            strategy=self.name,
            spent=ledger.spent_snapshot(),
            payments=payments,
        )
        logger.debug(
            "scenario_allocated",
            strategy=self.name,
            order_count=problem.order_count,
            total_spent=str(result.total_spent),
        )
        return result

    def _allocate_orders(self, problem: PaymentProblem, ledger: Ledger) -> list[OrderPayment]:
        raise NotImplementedError

    def _settle_leftovers(
        self, problem: PaymentProblem, ledger: Ledger, orders: list[Order]
    ) -> list[OrderPayment]:
        if orders:
            logger.debug(
                "fallback_invoked",
                strategy=self.name,
                order_ids=[o.id for o in orders],
            )
        return [self.fallback.allocate(ledger, problem, order) for order in orders]

    def _points_method(self, problem: PaymentProblem) -> PaymentMethod | None:
        return problem.method(self.config.points_method_id)

    def _cards(self, problem: PaymentProblem) -> list[PaymentMethod]:
        return problem.cards(self.config.points_method_id)
