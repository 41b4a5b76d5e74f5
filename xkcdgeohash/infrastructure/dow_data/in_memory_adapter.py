"""
Infrastructure adapter: fixed date → price table → IDowPriceProvider.
Used for offline runs and as the deterministic provider in tests.
"""

from collections.abc import Mapping
from datetime import date, datetime

from xkcdgeohash.domain.errors import PriceUnavailable
from xkcdgeohash.domain.ports.dow_price_port import IDowPriceProvider


class InMemoryDowPriceProvider(IDowPriceProvider):
    """Serves prices from an in-memory mapping; unmapped dates are unavailable."""

    def __init__(self, prices: Mapping[date, float]) -> None:
        self._prices = {
            (day.date() if isinstance(day, datetime) else day): price
            for day, price in prices.items()
        }

    def get_price(self, day: date) -> float:
        try:
            return self._prices[day]
        except KeyError:
            raise PriceUnavailable(f"no price data for {day:%Y-%m-%d}") from None

    def __repr__(self) -> str:
        return f"InMemoryDowPriceProvider({len(self._prices)} dates)"
