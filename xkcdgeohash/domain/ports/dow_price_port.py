"""
Port (interface) for Dow Jones opening price providers.
Infrastructure adapters (e.g. HttpDowPriceProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from datetime import date


class IDowPriceProvider(ABC):
    @abstractmethod
    def get_price(self, day: date) -> float:
        """Return the DJIA opening price for *day*.

        Raises:
            PriceUnavailable: if no price can be supplied for *day*.
        """
        ...
