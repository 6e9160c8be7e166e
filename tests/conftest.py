"""Pytest configuration and fixtures."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from paysolver.loader import load_problem
from paysolver.models import PaymentMethod, PaymentProblem
from tests.helpers import CARD10, CARD20, POINTS, make_method

FIXTURES_DIR = Path(__file__).parent / "fixtures"
PROBLEMS_DIR = FIXTURES_DIR / "problems"


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


def load_problem_fixture(name: str) -> tuple[PaymentProblem, dict[str, str]]:
    """Load a problem fixture and its expected allocation.

    Args:
        name: Fixture directory name under fixtures/problems

    Returns:
        Tuple of (problem, expected spent per method as strings)
    """
    path = PROBLEMS_DIR / name
    problem = load_problem(path / "orders.json", path / "paymentmethods.json")
    with open(path / "expected.json") as f:
        expected = json.load(f)
    return problem, expected


def iter_problem_fixture_names() -> list[str]:
    """Names of all problem fixtures, sorted."""
    if not PROBLEMS_DIR.exists():
        return []
    return sorted(p.name for p in PROBLEMS_DIR.iterdir() if p.is_dir())


# =============================================================================
# Payment method fixtures
# =============================================================================


@pytest.fixture
def card20() -> PaymentMethod:
    """Card with 20% discount, limit 100."""
    return make_method(CARD20, 20, "100.00")


@pytest.fixture
def card10() -> PaymentMethod:
    """Card with 10% discount, limit 100."""
    return make_method(CARD10, 10, "100.00")


@pytest.fixture
def points50() -> PaymentMethod:
    """Loyalty points with 50% discount, limit 100."""
    return make_method(POINTS, 50, "100.00")
