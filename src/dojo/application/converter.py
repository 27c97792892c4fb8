# src/dojo/application/converter.py
"""
Currency Converter - Euro to Target Currency

Krupnic and Zorglub use fixed rates; USD asks the exchange-rate client on
every call. Client errors propagate to the caller unchanged.

Files that USE this module:
- dojo.app (command-line conversions)
- tests.test_converter (unit tests)

Files that this module USES:
- dojo.adapters.providers.base (ExchangeRateClient interface)
- dojo.adapters.formatting.formatter (format_currency)
- dojo.domain.models (Currency)
"""
from __future__ import annotations

import logging

from dojo.adapters.formatting.formatter import format_currency
from dojo.adapters.providers.base import ExchangeRateClient
from dojo.domain.models import Currency

log = logging.getLogger(__name__)

# Units per 1 EUR
FIXED_RATES = {
    Currency.KRUPNIC: 2.0,
    Currency.ZORGLUB: 3.0,
}


def convert_currency(amount_in_euros: float, currency: Currency, exchange_client: ExchangeRateClient) -> str:
    """
    Convert a euro amount into ``currency`` and format it.

    Args:
        amount_in_euros: Amount in euros
        currency: Target currency
        exchange_client: Source of the USD rate (only used for Currency.USD)

    Returns:
        Formatted amount, e.g. "40.00 Krupnic" or "24.00 $"

    Raises:
        ConversionError: If the USD rate cannot be fetched
    """
    if currency is Currency.USD:
        rate = exchange_client.get_usd_rate()
    else:
        rate = FIXED_RATES[currency]
    log.debug("Converting %s EUR to %s at rate %s", amount_in_euros, currency.value, rate)
    return format_currency(amount_in_euros, currency, rate)
