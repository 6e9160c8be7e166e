"""API endpoints for the payment solver."""

import asyncio
import os

import structlog
from fastapi import APIRouter, Depends, HTTPException

from paysolver.config import POINTS_METHOD_ID
from paysolver.errors import UnresolvedOrder
from paysolver.models.problem import PaymentProblem
from paysolver.models.response import SolveResponse
from paysolver.solver import Solver, get_default_solver

logger = structlog.get_logger()

router = APIRouter()

# Id of the loyalty-points wallet among the submitted payment methods
POINTS_METHOD = os.environ.get("PAYSOLVER_POINTS_METHOD", POINTS_METHOD_ID)


def get_solver() -> Solver:
    """Solver used by the /solve route.

    Resolves to the shared default solver for the configured points wallet.
    Tests swap it out through ``app.dependency_overrides``.
    """
    return get_default_solver(POINTS_METHOD)


@router.post("/solve")
async def solve(
    problem: PaymentProblem,
    solver_instance: Solver = Depends(get_solver),
) -> SolveResponse:
    """Allocate payment methods to the submitted orders.

    Args:
        problem: Orders and payment methods to allocate
        solver_instance: Injected solver (via FastAPI Depends)

    Returns:
        SolveResponse with the amount spent per payment method.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Unpayable order: Returns 422 with the order id and unpaid remainder
    """
    logger.info(
        "solve_request_received",
        order_count=problem.order_count,
        method_count=len(problem.payment_methods),
    )

    loop = asyncio.get_running_loop()
    try:
        response = await loop.run_in_executor(None, solver_instance.solve_response, problem)
    except UnresolvedOrder as err:
        logger.warning(
            "solve_request_unresolved",
            order_id=err.order_id,
            remainder=str(err.remainder),
        )
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(err),
                "orderId": err.order_id,
                "remainder": str(err.remainder),
            },
        ) from err

    logger.info(
        "returning_allocation",
        strategy=response.strategy,
        total=str(response.total),
    )
    return response
