# src/dojo/adapters/providers/__init__.py
"""
Provider Adapters - Exchange-Rate Clients

This package contains the clients that supply the USD-per-EUR rate.
All clients implement the ExchangeRateClient interface.
"""

from dojo.adapters.providers.base import ExchangeRateClient
from dojo.adapters.providers.fake import FakeExchangeRateClient
from dojo.adapters.providers.open_er_api import LiveExchangeRateClient

__all__ = [
    "ExchangeRateClient",
    "FakeExchangeRateClient",
    "LiveExchangeRateClient",
]
