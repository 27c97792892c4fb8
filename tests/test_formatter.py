# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Amount Formatting Functions

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- dojo.adapters.formatting.formatter (formatter functions for testing)
- dojo.domain.models (Currency)
"""
import pytest  # Testing framework for writing and running tests

from dojo.adapters.formatting.formatter import (
    currency_suffix,  # Suffix for a target currency
    format_amount,  # Two decimals plus suffix
    format_currency,  # Convert and format
    format_euros,  # Euro amounts
)
from dojo.domain.models import Currency


class TestFormatAmount:
    def test_pads_to_two_decimals(self):
        assert format_amount(40, "Krupnic") == "40.00 Krupnic"
        assert format_amount(1.5, "€") == "1.50 €"

    def test_rounds_to_two_decimals(self):
        assert format_amount(4.356, "€") == "4.36 €"
        assert format_amount(3.6299999999, "€") == "3.63 €"

    def test_zero(self):
        assert format_amount(0.0, "$") == "0.00 $"


class TestFormatEuros:
    def test_euro_suffix(self):
        assert format_euros(1840.575000000001) == "1840.58 €"


class TestFormatCurrency:
    @pytest.mark.parametrize(
        "currency, suffix",
        [(Currency.KRUPNIC, "Krupnic"), (Currency.ZORGLUB, "Zorglub"), (Currency.USD, "$")],
    )
    def test_suffixes(self, currency, suffix):
        assert currency_suffix(currency) == suffix

    def test_multiplies_by_rate(self):
        assert format_currency(20.0, Currency.USD, 1.2) == "24.00 $"
        assert format_currency(20.0, Currency.ZORGLUB, 3.0) == "60.00 Zorglub"
