# src/dojo/adapters/formatting/__init__.py
"""
Formatting Adapters - Output Formatting

This package contains formatters for rendering monetary amounts.
"""

from dojo.adapters.formatting.formatter import (
    currency_suffix,
    format_amount,
    format_currency,
    format_euros,
)

__all__ = [
    "format_amount",
    "format_euros",
    "format_currency",
    "currency_suffix",
]
