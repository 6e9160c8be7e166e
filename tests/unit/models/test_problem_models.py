"""Tests for the input and response models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from paysolver.models import Order, PaymentMethod, PaymentProblem, SolveResponse
from tests.helpers import CARD20, POINTS, make_method, make_order, make_problem


class TestOrder:
    """Tests for Order validation."""

    def test_parses_string_value(self):
        order = Order(id="O1", value="150.00", promotions=["mZysk"])
        assert order.value == Decimal("150.00")
        assert order.promotions == ("mZysk",)

    def test_parses_json_number(self):
        order = Order.model_validate_json('{"id": "O1", "value": 150.5}')
        assert str(order.value) == "150.50"

    def test_missing_promotions_is_empty(self):
        assert Order(id="O1", value="10").promotions == ()

    def test_null_promotions_is_empty(self):
        assert Order(id="O1", value="10", promotions=None).promotions == ()

    @pytest.mark.parametrize("value", ["0", "0.00", "-5.00"])
    def test_non_positive_value_rejected(self, value):
        with pytest.raises(ValidationError):
            Order(id="O1", value=value)

    @pytest.mark.parametrize("value", ["1.005", "abc", "NaN", "Infinity", True])
    def test_malformed_value_rejected(self, value):
        with pytest.raises(ValidationError):
            Order(id="O1", value=value)

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            Order(id="", value="10")

    def test_is_frozen(self):
        order = make_order()
        with pytest.raises(ValidationError):
            order.value = Decimal("1")  # type: ignore[misc]

    def test_is_promoted_with(self):
        order = make_order(promotions=[CARD20])
        assert order.is_promoted_with(CARD20)
        assert not order.is_promoted_with(POINTS)


class TestPaymentMethod:
    """Tests for PaymentMethod validation."""

    def test_discount_string_coerced(self):
        method = PaymentMethod.model_validate({"id": "PUNKTY", "discount": "15", "limit": "100.00"})
        assert method.discount == 15
        assert method.limit == Decimal("100.00")

    def test_zero_limit_allowed(self):
        assert make_method("C", 5, "0").limit == Decimal("0.00")

    @pytest.mark.parametrize("discount", [-1, 101])
    def test_discount_out_of_range_rejected(self, discount):
        with pytest.raises(ValidationError):
            PaymentMethod(id="C", discount=discount, limit="10")

    def test_negative_limit_rejected(self):
        with pytest.raises(ValidationError):
            PaymentMethod(id="C", discount=5, limit="-1")

    @pytest.mark.parametrize("limit", ["1e30", 1e30])
    def test_limit_too_large_for_cents_rejected(self, limit):
        """Amounts beyond decimal precision once scaled to cents are invalid input."""
        with pytest.raises(ValidationError, match="out of range"):
            PaymentMethod(id="C", discount=10, limit=limit)


class TestPaymentProblem:
    """Tests for PaymentProblem."""

    def test_accepts_camel_case_alias(self):
        problem = PaymentProblem.model_validate(
            {
                "orders": [{"id": "O1", "value": "10.00"}],
                "paymentMethods": [{"id": "C", "discount": 5, "limit": "10.00"}],
            }
        )
        assert problem.order_count == 1
        assert problem.method_ids == ["C"]

    def test_duplicate_order_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate order id"):
            make_problem([make_order("O1"), make_order("O1")], [])

    def test_duplicate_method_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate payment method id"):
            make_problem([], [make_method("C", 1, "1"), make_method("C", 2, "2")])

    def test_method_lookup_and_cards(self, card20, points50):
        problem = make_problem([], [points50, card20])
        assert problem.method(POINTS) == points50
        assert problem.method("MISSING") is None
        assert problem.cards(POINTS) == [card20]


class TestSolveResponse:
    """Tests for response serialization."""

    def test_amounts_serialize_as_strings(self):
        response = SolveResponse(
            spent={"A": Decimal("80.00"), "B": Decimal("0.00")},
            total=Decimal("80.00"),
            strategy="card_first",
        )
        assert response.model_dump(mode="json") == {
            "spent": {"A": "80.00", "B": "0.00"},
            "total": "80.00",
            "strategy": "card_first",
        }
