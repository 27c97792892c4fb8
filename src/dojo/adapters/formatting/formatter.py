# src/dojo/adapters/formatting/formatter.py
"""
Amount Formatter - Monetary Text Formatting

This module renders amounts as ``<amount with two decimals> <suffix>``,
e.g. "1840.58 €" or "40.00 Krupnic".

Files that USE this module:
- dojo.application.pricing (format_euros for formatted prices)
- dojo.application.converter (format_currency for conversions)
- tests.test_formatter (unit tests)

Files that this module USES:
- dojo.domain.models (Currency for suffix lookup)
"""
from __future__ import annotations

from dojo.domain.models import Currency

EURO_SUFFIX = "€"

CURRENCY_SUFFIXES = {
    Currency.KRUPNIC: "Krupnic",
    Currency.ZORGLUB: "Zorglub",
    Currency.USD: "$",
}


def format_amount(value: float, suffix: str) -> str:
    """
    Format an amount with exactly two decimals followed by a suffix.

    Args:
        value: Amount to format
        suffix: Text appended after a single space

    Returns:
        Formatted string, e.g. "3.60 €"
    """
    return f"{value:.2f} {suffix}"


def format_euros(value: float) -> str:
    """Format a euro amount, e.g. "1840.58 €"."""
    return format_amount(value, EURO_SUFFIX)


def currency_suffix(currency: Currency) -> str:
    return CURRENCY_SUFFIXES[currency]


def format_currency(amount_in_euros: float, currency: Currency, rate: float) -> str:
    """
    Convert a euro amount with the given rate and format it.

    Args:
        amount_in_euros: Amount in euros
        currency: Target currency (selects the suffix)
        rate: Units of the target currency per 1 EUR

    Returns:
        Formatted converted amount, e.g. "24.00 $"
    """
    return format_amount(amount_in_euros * rate, currency_suffix(currency))
