"""Command-line entry point.

Usage:
    paysolver orders.json paymentmethods.json
    paysolver orders.json paymentmethods.json --verbose

Prints one ``<methodId> <amount>`` line per payment method.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping, Sequence
from decimal import Decimal
from pathlib import Path

import structlog
from pydantic import ValidationError

from paysolver.config import POINTS_METHOD_ID
from paysolver.errors import PaymentSolverError
from paysolver.loader import load_problem
from paysolver.math.money import quantize_money
from paysolver.solver import get_default_solver

logger = structlog.get_logger()


def format_allocation(spent: Mapping[str, Decimal]) -> str:
    """Render a spent map as ``<methodId> <amount>`` lines."""
    return "\n".join(f"{method_id} {quantize_money(amount)}" for method_id, amount in spent.items())


def configure_logging(verbose: bool) -> None:
    """Send structured logs to stderr so stdout carries only the result."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paysolver",
        description="Assign payment methods to orders at minimum total cost",
    )
    parser.add_argument("orders", type=Path, help="JSON file with the orders")
    parser.add_argument("payment_methods", type=Path, help="JSON file with the payment methods")
    parser.add_argument(
        "--points-method",
        default=POINTS_METHOD_ID,
        help=f"Id of the loyalty-points payment method (default: {POINTS_METHOD_ID})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        problem = load_problem(args.orders, args.payment_methods)
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    except ValidationError as err:
        print(f"Error: invalid input: {err}", file=sys.stderr)
        return 1

    solver = get_default_solver(args.points_method)
    try:
        spent = solver.solve(problem)
    except PaymentSolverError as err:
        logger.error("solve_failed", error=str(err))
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(format_allocation(spent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
