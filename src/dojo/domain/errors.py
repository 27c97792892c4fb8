# src/dojo/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines the exceptions raised by pricing and currency
conversion. Conversion failures share the ConversionError base so callers
can handle all of them in one place.
"""

from typing import Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidPercentageError(DomainError, ValueError):
    """Raised when a percentage is outside [0, 100] or not a number."""
    pass


class InvalidQuantityError(DomainError, ValueError):
    """Raised when a negative quantity is priced."""
    pass


class ConversionError(DomainError):
    """Base exception for failures while converting a euro amount."""
    pass


class RequestFailedError(ConversionError):
    """Raised when the exchange-rate source cannot be reached."""
    pass


class ValueNotFoundError(ConversionError):
    """Raised when the response has no numeric ``rates.USD`` field."""
    pass


class ResponseParsingError(ConversionError):
    """
    Raised when the response body is not valid JSON.

    Attributes:
        cause: The underlying decode error
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
