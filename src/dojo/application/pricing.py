# src/dojo/application/pricing.py
"""
Pricing Engine - Discounted and Taxed Prices

This module computes the price of an order line: the subtotal
(quantity x unit price) gets a tiered discount, then tax is applied.

Discount tiers, on the subtotal before tax (thresholds exclusive):
- above 5000: 5% off
- above 1000: 3% off
- otherwise: no discount

Files that USE this module:
- dojo.app (prints a formatted price)
- tests.test_pricing (unit tests)

Files that this module USES:
- dojo.domain.models (Percentage for the tax rate)
- dojo.adapters.formatting.formatter (format_euros)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import numbers
from typing import Optional

from dojo.domain.errors import InvalidQuantityError
from dojo.domain.models import Percentage
from dojo.adapters.formatting.formatter import format_euros

# (threshold, multiplier) from the highest tier down
DISCOUNT_TIERS = (
    (5000.0, 0.95),
    (1000.0, 0.97),
)


def apply_discount(subtotal: float) -> float:
    """
    Apply the tiered discount to a subtotal.

    Args:
        subtotal: Quantity times unit price, before tax

    Returns:
        Discounted subtotal
    """
    for threshold, multiplier in DISCOUNT_TIERS:
        if subtotal > threshold:
            return subtotal * multiplier
    return subtotal


def calculate_price(quantity: int, unit_price: float, tax_rate: Optional[Percentage] = None) -> float:
    """
    Compute the discounted, taxed price of ``quantity`` items.

    Args:
        quantity: Number of items (a non-negative int)
        unit_price: Price of one item in euros
        tax_rate: Optional tax rate; no tax when None

    Returns:
        Price in euros

    Raises:
        InvalidQuantityError: If quantity is not a whole number or is negative
    """
    # bool is an Integral subclass but never a quantity
    if isinstance(quantity, bool) or not isinstance(quantity, numbers.Integral):
        raise InvalidQuantityError(f"Quantity must be a whole number, got {quantity!r}")
    if quantity < 0:
        raise InvalidQuantityError(f"Quantity must not be negative, got {quantity}")
    tax = tax_rate.as_fraction() if tax_rate is not None else 0.0
    subtotal = quantity * unit_price
    return apply_discount(subtotal) * (1 + tax)


def calculate_price_formatted(quantity: int, unit_price: float, tax_rate: Optional[Percentage] = None) -> str:
    """Same as calculate_price, rendered as e.g. "1840.58 €"."""
    return format_euros(calculate_price(quantity, unit_price, tax_rate))


# Historical spelling kept for existing callers
calculate_price_formated = calculate_price_formatted
