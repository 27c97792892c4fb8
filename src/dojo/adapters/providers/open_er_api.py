# src/dojo/adapters/providers/open_er_api.py
"""
Live Exchange-Rate Client (open.er-api.com style endpoints)

This module implements the network-backed client that fetches the
USD-per-EUR rate. The source must answer a GET with a JSON body shaped
``{"rates": {"USD": <number>, ...}}``. Every call performs a fresh request;
nothing is cached and nothing is retried.

Files that USE this module:
- dojo.app (LiveExchangeRateClient for command-line conversions)
- tests.test_providers (unit tests)

Files that this module USES:
- dojo.adapters.providers.base (ExchangeRateClient interface)
- dojo.config (settings for the default source URL)
- dojo.domain.errors (conversion error taxonomy)
- dojo.shared.validators (validate_url)
"""
import logging
import math
import requests
from typing import Any, Optional

from dojo.adapters.providers.base import ExchangeRateClient
from dojo.config import settings
from dojo.domain.errors import RequestFailedError, ResponseParsingError, ValueNotFoundError
from dojo.shared.validators import validate_url

log = logging.getLogger(__name__)


def _extract_usd_rate(data: Any) -> float:
    """
    Pull ``rates.USD`` out of a decoded response body.

    Args:
        data: Decoded JSON body

    Returns:
        The USD rate as float

    Raises:
        ValueNotFoundError: If the field is missing or not a number
    """
    rates = data.get("rates") if isinstance(data, dict) else None
    if not isinstance(rates, dict):
        raise ValueNotFoundError("Response missing 'rates' object")
    usd = rates.get("USD")
    # bool is an int subclass but never a rate
    if isinstance(usd, bool) or not isinstance(usd, (int, float)) or not math.isfinite(usd):
        raise ValueNotFoundError(f"Response has no finite numeric 'rates.USD' field (got {usd!r})")
    return float(usd)


class LiveExchangeRateClient(ExchangeRateClient):
    def __init__(self, url: Optional[str] = None):
        """
        Initialize the live client.

        Args:
            url: Optional source URL (defaults to settings.exchange_rate_url)

        Raises:
            ValueError: If the URL is not an absolute http(s) URL
        """
        self.url = settings.exchange_rate_url if url is None else url
        if not validate_url(self.url):
            raise ValueError(f"Invalid exchange-rate URL: {self.url!r}")

    def get_usd_rate(self) -> float:
        """
        Fetch the USD-per-EUR rate from the configured source.

        Returns:
            USD per 1 EUR as float

        Raises:
            RequestFailedError: Connection, DNS, timeout or HTTP status failure
            ResponseParsingError: Body is not valid JSON
            ValueNotFoundError: Body has no numeric ``rates.USD``
        """
        log.debug("Fetching USD rate from %s", self.url)
        try:
            resp = requests.get(self.url)
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise RequestFailedError(f"Exchange-rate request to {self.url} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ResponseParsingError(f"Exchange-rate source returned invalid JSON: {e}", cause=e) from e

        rate = _extract_usd_rate(data)
        log.debug("Received USD rate %s from %s", rate, self.url)
        return rate
