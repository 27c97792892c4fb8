# src/dojo/__init__.py
"""
Dojo - Price Calculator and Currency Converter

Computes discounted, taxed prices from a quantity and unit price, and
converts euro amounts into Krupnic, Zorglub or US dollars (the latter
through a live exchange-rate source).
"""

from dojo.domain.models import Currency, Percentage
from dojo.domain.errors import (
    ConversionError,
    RequestFailedError,
    ResponseParsingError,
    ValueNotFoundError,
)
from dojo.application.pricing import (
    calculate_price,
    calculate_price_formated,
    calculate_price_formatted,
)
from dojo.application.converter import convert_currency
from dojo.adapters.providers import (
    ExchangeRateClient,
    FakeExchangeRateClient,
    LiveExchangeRateClient,
)

__version__ = "0.3.0"

__all__ = [
    "Currency",
    "Percentage",
    "ConversionError",
    "RequestFailedError",
    "ResponseParsingError",
    "ValueNotFoundError",
    "calculate_price",
    "calculate_price_formatted",
    "calculate_price_formated",
    "convert_currency",
    "ExchangeRateClient",
    "FakeExchangeRateClient",
    "LiveExchangeRateClient",
]
