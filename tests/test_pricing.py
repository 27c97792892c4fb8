# tests/test_pricing.py
"""
Pricing Tests - Unit Tests for the Pricing Engine

This module tests the tiered discount, tax application and the formatted
euro price.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- dojo.application.pricing (functions under test)
- dojo.domain.models (Percentage for tax rates)
"""
import pytest  # Testing framework for writing and running tests

from dojo import calculate_price_formated
from dojo.application.pricing import (
    apply_discount,
    calculate_price,
    calculate_price_formatted,
)
from dojo.domain.errors import InvalidQuantityError
from dojo.domain.models import Percentage


class TestApplyDiscount:
    @pytest.mark.parametrize("subtotal", [0.0, 1.0, 999.99, 1000.0])
    def test_no_discount_up_to_1000(self, subtotal):
        assert apply_discount(subtotal) == subtotal

    @pytest.mark.parametrize("subtotal", [1000.01, 1725.0, 4999.99, 5000.0])
    def test_three_percent_above_1000(self, subtotal):
        assert apply_discount(subtotal) == pytest.approx(subtotal * 0.97)

    @pytest.mark.parametrize("subtotal", [5000.01, 6495.0, 100000.0])
    def test_five_percent_above_5000(self, subtotal):
        assert apply_discount(subtotal) == pytest.approx(subtotal * 0.95)


class TestCalculatePrice:
    def test_without_tax(self):
        assert calculate_price(3, 1.21) == pytest.approx(3.63)
        assert calculate_price(3, 1.21, None) == pytest.approx(3.63)

    def test_with_tax(self):
        assert calculate_price(3, 1.21, Percentage(20.0)) == pytest.approx(3.63 * 1.2)

    def test_discount_applies_before_tax(self):
        # 5 * 345 = 1725 -> 3% off -> +10% tax
        assert calculate_price(5, 345, Percentage(10.0)) == pytest.approx(1725 * 0.97 * 1.1)

    def test_top_tier_with_tax(self):
        assert calculate_price(5, 1299, Percentage(10.0)) == pytest.approx(6495 * 0.95 * 1.1)

    def test_zero_tax_equals_no_tax(self):
        assert calculate_price(10, 150, Percentage(0)) == calculate_price(10, 150)

    def test_full_tax_doubles_price(self):
        assert calculate_price(2, 10, Percentage(100)) == pytest.approx(40.0)

    def test_zero_quantity(self):
        assert calculate_price(0, 1299, Percentage(10.0)) == 0.0

    def test_negative_quantity_rejected(self):
        with pytest.raises(InvalidQuantityError):
            calculate_price(-1, 10.0)

    @pytest.mark.parametrize("quantity", [2.5, 3.0, True, "3", None])
    def test_non_integer_quantity_rejected(self, quantity):
        with pytest.raises(InvalidQuantityError, match="whole number"):
            calculate_price(quantity, 10.0)


class TestCalculatePriceFormatted:
    @pytest.mark.parametrize(
        "quantity, unit_price, tax_rate, expected",
        [
            (3, 1.21, None, "3.63 €"),
            (3, 1.21, Percentage(20.0), "4.36 €"),
            (5, 345, Percentage(10.0), "1840.58 €"),
            (5, 1299, Percentage(10.0), "6787.28 €"),
        ],
    )
    def test_known_prices(self, quantity, unit_price, tax_rate, expected):
        assert calculate_price_formatted(quantity, unit_price, tax_rate) == expected

    def test_always_two_decimals(self):
        assert calculate_price_formatted(2, 5) == "10.00 €"
        assert calculate_price_formatted(1, 0.5) == "0.50 €"

    def test_historical_spelling(self):
        assert calculate_price_formated is calculate_price_formatted
        assert calculate_price_formated(3, 1.21) == "3.63 €"
