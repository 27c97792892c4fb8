# src/dojo/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the pricing and conversion use cases.
No direct I/O dependencies - uses adapters through interfaces.
"""

from dojo.application.pricing import (
    apply_discount,
    calculate_price,
    calculate_price_formated,
    calculate_price_formatted,
)
from dojo.application.converter import convert_currency

__all__ = [
    "apply_discount",
    "calculate_price",
    "calculate_price_formatted",
    "calculate_price_formated",
    "convert_currency",
]
