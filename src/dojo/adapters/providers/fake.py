# src/dojo/adapters/providers/fake.py
"""
Fake Exchange-Rate Client

Returns a fixed USD rate without any network access, for deterministic
tests and offline runs.

Files that USE this module:
- tests.test_converter (deterministic USD conversions)
"""
from dojo.adapters.providers.base import ExchangeRateClient

FAKE_USD_RATE = 1.2


class FakeExchangeRateClient(ExchangeRateClient):
    def __init__(self, rate: float = FAKE_USD_RATE):
        self.rate = rate

    def get_usd_rate(self) -> float:
        return self.rate
