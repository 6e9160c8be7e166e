"""Tests for the shared payment primitives."""

from decimal import Decimal

from paysolver.config import DEFAULT_SOLVER_CONFIG
from paysolver.ledger import Ledger
from paysolver.strategies.base import PaymentKind
from paysolver.strategies.payments import (
    best_promoted_card,
    partial_points_shares,
    split_card,
    try_best_card,
    try_full_points,
    try_partial_points,
)
from tests.helpers import CARD10, CARD20, POINTS, make_method, make_order


class TestPartialPointsShares:
    """Tests for partial_points_shares."""

    def test_hundred(self):
        points, card = partial_points_shares(make_order(value="100.00"), DEFAULT_SOLVER_CONFIG)
        assert points == Decimal("10.00")
        assert card == Decimal("80.00")

    def test_share_rounds_half_up(self):
        # 10% of 0.05 is 0.005
        points, card = partial_points_shares(make_order(value="0.05"), DEFAULT_SOLVER_CONFIG)
        assert points == Decimal("0.01")
        assert card == Decimal("0.04")

    def test_shares_sum_to_discounted_value(self):
        order = make_order(value="123.45")
        points, card = partial_points_shares(order, DEFAULT_SOLVER_CONFIG)
        assert points + card == Decimal("111.11")


class TestCardSelection:
    """Tests for best_promoted_card and split_card."""

    def test_best_card_is_highest_discount(self, card20, card10):
        ledger = Ledger([card10, card20])
        order = make_order(promotions=[CARD10, CARD20])
        assert best_promoted_card(ledger, order, [card10, card20]) == card20

    def test_best_card_requires_promotion(self, card20, card10):
        ledger = Ledger([card20, card10])
        order = make_order(promotions=[CARD10])
        assert best_promoted_card(ledger, order, [card20, card10]) == card10

    def test_best_card_tie_goes_to_first_defined(self):
        first = make_method("FIRST", 10, "100.00")
        second = make_method("SECOND", 10, "100.00")
        ledger = Ledger([first, second])
        order = make_order(promotions=["SECOND", "FIRST"])
        assert best_promoted_card(ledger, order, [first, second]) == first

    def test_best_card_skips_unaffordable(self, card10):
        card20 = make_method(CARD20, 20, "79.99")
        ledger = Ledger([card20, card10])
        order = make_order(promotions=[CARD20, CARD10])
        assert best_promoted_card(ledger, order, [card20, card10]) == card10

    def test_split_card_prefers_lowest_discount(self, card20, card10):
        ledger = Ledger([card20, card10])
        assert split_card(ledger, [card20, card10], Decimal("80.00")) == card10

    def test_split_card_none_when_nothing_covers(self, card20, card10):
        ledger = Ledger([card20, card10])
        assert split_card(ledger, [card20, card10], Decimal("100.01")) is None


class TestTryPayments:
    """Tests for the try_* payment functions."""

    def test_partial_points_charges_both_methods(self, card20, card10, points50):
        ledger = Ledger([card20, card10, points50])

        payment = try_partial_points(
            ledger, make_order(), points50, [card20, card10], DEFAULT_SOLVER_CONFIG
        )

        assert payment is not None
        assert payment.kind == PaymentKind.PARTIAL_POINTS
        assert payment.parts == {POINTS: Decimal("10.00"), CARD10: Decimal("80.00")}
        assert payment.is_split
        assert payment.amount == Decimal("90.00")
        assert ledger.spent_on(POINTS) == Decimal("10.00")
        assert ledger.spent_on(CARD10) == Decimal("80.00")

    def test_partial_points_needs_points_method(self, card20):
        ledger = Ledger([card20])
        assert try_partial_points(ledger, make_order(), None, [card20], DEFAULT_SOLVER_CONFIG) is None

    def test_partial_points_unaffordable_leaves_ledger(self, card20):
        points = make_method(POINTS, 50, "9.99")
        ledger = Ledger([card20, points])

        payment = try_partial_points(ledger, make_order(), points, [card20], DEFAULT_SOLVER_CONFIG)

        assert payment is None
        assert ledger.total_spent() == Decimal("0.00")

    def test_partial_points_without_card_leaves_ledger(self, points50):
        small = make_method("SMALL", 0, "79.99")
        ledger = Ledger([small, points50])

        assert try_partial_points(ledger, make_order(), points50, [small], DEFAULT_SOLVER_CONFIG) is None
        assert ledger.spent_on(POINTS) == Decimal("0.00")

    def test_full_points(self, points50):
        ledger = Ledger([points50])
        payment = try_full_points(ledger, make_order(), points50)

        assert payment is not None
        assert payment.kind == PaymentKind.POINTS
        assert payment.parts == {POINTS: Decimal("50.00")}
        assert not payment.is_split

    def test_full_points_does_not_need_promotion(self, points50):
        ledger = Ledger([points50])
        order = make_order(promotions=[CARD20])
        assert try_full_points(ledger, order, points50) is not None

    def test_best_card(self, card20, card10):
        ledger = Ledger([card20, card10])
        payment = try_best_card(ledger, make_order(promotions=[CARD20]), [card20, card10])

        assert payment is not None
        assert payment.kind == PaymentKind.CARD
        assert payment.method_ids == [CARD20]
        assert ledger.remaining(CARD20) == Decimal("20.00")

    def test_best_card_none_without_promotion(self, card20):
        ledger = Ledger([card20])
        assert try_best_card(ledger, make_order(), [card20]) is None
