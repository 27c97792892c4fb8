# src/dojo/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains the value objects and error taxonomy.
No dependencies on infrastructure or external systems.
"""

from dojo.domain.models import Currency, Percentage
from dojo.domain.errors import (
    ConversionError,
    DomainError,
    InvalidPercentageError,
    InvalidQuantityError,
    RequestFailedError,
    ResponseParsingError,
    ValueNotFoundError,
)

__all__ = [
    "Currency",
    "Percentage",
    "DomainError",
    "InvalidPercentageError",
    "InvalidQuantityError",
    "ConversionError",
    "RequestFailedError",
    "ValueNotFoundError",
    "ResponseParsingError",
]
