# src/dojo/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the value objects used by pricing and conversion:
- Percentage (validated ratio in [0, 100])
- Currency (the supported target currencies)

Files that USE this module:
- dojo.application.* (pricing and conversion)
- dojo.adapters.formatting.formatter (currency suffixes)
- tests.* (tests build domain objects for test data)

Files that this module USES:
- dojo.domain.errors (InvalidPercentageError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Closed set of currencies

from dojo.domain.errors import InvalidPercentageError

PERCENTAGE_MIN = 0.0
PERCENTAGE_MAX = 100.0


@dataclass(frozen=True)
class Percentage:
    """
    A ratio expressed in percent, always within [0, 100].

    Construction raises InvalidPercentageError for anything out of range
    (NaN included) or not a number. Strings and booleans are rejected even
    though float() would accept them. Both bounds are valid.

    Attributes:
        value: The stored percentage, as float
    """
    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, (bool, str, bytes)):
            raise InvalidPercentageError(f"Percentage must be a number, got {self.value!r}")
        try:
            value = float(self.value)
        except (TypeError, ValueError) as e:
            raise InvalidPercentageError(
                f"Percentage must be a number, got {self.value!r}"
            ) from e
        if not PERCENTAGE_MIN <= value <= PERCENTAGE_MAX:
            raise InvalidPercentageError(
                f"Percentage must be between {PERCENTAGE_MIN:g} and {PERCENTAGE_MAX:g}, got {value}"
            )
        # frozen dataclass: normalise ints to float in place
        object.__setattr__(self, "value", value)

    def get(self) -> float:
        """Return the stored percentage unchanged."""
        return self.value

    def as_fraction(self) -> float:
        """Return the percentage divided by 100 (e.g. 20.0 -> 0.2)."""
        return self.value / 100.0


class Currency(Enum):
    """Currencies a euro amount can be converted into."""
    KRUPNIC = "Krupnic"
    ZORGLUB = "Zorglub"
    USD = "USD"
