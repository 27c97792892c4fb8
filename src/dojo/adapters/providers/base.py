# src/dojo/adapters/providers/base.py
"""
Base Client Interface for Exchange-Rate Sources

This module defines the abstract base class for all exchange-rate clients.
It establishes the contract that all client implementations must follow.

Files that USE this module:
- dojo.adapters.providers.fake (FakeExchangeRateClient implements ExchangeRateClient)
- dojo.adapters.providers.open_er_api (LiveExchangeRateClient implements ExchangeRateClient)
- dojo.application.converter (convert_currency takes an ExchangeRateClient)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod

class ExchangeRateClient(ABC):
    @abstractmethod
    def get_usd_rate(self) -> float:
        """
        Return the USD-per-1-EUR rate as float.

        Raises:
            ConversionError: If the rate cannot be obtained
        """
        raise NotImplementedError
