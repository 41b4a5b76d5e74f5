"""
Use-cases: compute the geohash of a graticule, or the global geohash, for a date.
Depends only on Domain ports, entities and services; no infrastructure imports.
"""

import logging
from datetime import date, datetime
from functools import total_ordering

from xkcdgeohash.domain.entities.geohash_result import GeohashResult
from xkcdgeohash.domain.entities.graticule import Graticule
from xkcdgeohash.domain.errors import InvalidInput
from xkcdgeohash.domain.ports.dow_price_port import IDowPriceProvider
from xkcdgeohash.domain.services.coordinates import compose_global, compose_local
from xkcdgeohash.domain.services.hash_engine import build_hash_input, hash_to_offsets
from xkcdgeohash.domain.services.thirty_west_rule import (
    applicable_dow_date,
    applicable_dow_date_global,
)

logger = logging.getLogger(__name__)


def as_calendar_date(day: date) -> date:
    """Reduce *day* to a plain calendar date (``datetime`` is a ``date`` subclass)."""
    if isinstance(day, datetime):
        return day.date()
    if not isinstance(day, date):
        raise InvalidInput(f"expected a date, got {day!r}")
    return day


@total_ordering
class Geohasher:
    """Computes geohashes for one graticule, fetching prices from *provider*."""

    def __init__(self, graticule: Graticule, provider: IDowPriceProvider) -> None:
        self._graticule = graticule
        self._provider = provider

    @property
    def graticule(self) -> Graticule:
        return self._graticule

    @property
    def provider(self) -> IDowPriceProvider:
        return self._provider

    def hash(self, day: date) -> GeohashResult:
        """Compute the geohash of the bound graticule for *day*.

        Raises:
            PriceUnavailable: propagated unchanged from the provider.
        """
        day = as_calendar_date(day)
        dow_date = applicable_dow_date(self._graticule, day)
        logger.debug("Graticule %s on %s uses the %s opening", self._graticule, day, dow_date)
        price = self._provider.get_price(dow_date)
        lat_offset, lon_offset = hash_to_offsets(build_hash_input(day, price))
        latitude, longitude = compose_local(self._graticule, lat_offset, lon_offset)
        return GeohashResult(
            latitude=latitude,
            longitude=longitude,
            used_dow_date=dow_date,
            used_date=day,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Geohasher):
            return NotImplemented
        return self._graticule == other._graticule and self._provider is other._provider

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Geohasher):
            return NotImplemented
        return self._graticule < other._graticule

    def __hash__(self) -> int:
        return hash((self._graticule, id(self._provider)))

    def __repr__(self) -> str:
        return f"Geohasher(graticule={self._graticule!r}, provider={self._provider!r})"


class GlobalGeohasher:
    """Computes the single worldwide geohash of a date."""

    def __init__(self, provider: IDowPriceProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> IDowPriceProvider:
        return self._provider

    def hash(self, day: date) -> GeohashResult:
        """Compute the global geohash for *day* (always the previous trading day's opening).

        Raises:
            PriceUnavailable: propagated unchanged from the provider.
        """
        day = as_calendar_date(day)
        dow_date = applicable_dow_date_global(day)
        logger.debug("Global hash on %s uses the %s opening", day, dow_date)
        price = self._provider.get_price(dow_date)
        lat_offset, lon_offset = hash_to_offsets(build_hash_input(day, price))
        latitude, longitude = compose_global(lat_offset, lon_offset)
        return GeohashResult(
            latitude=latitude,
            longitude=longitude,
            used_dow_date=dow_date,
            used_date=day,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GlobalGeohasher):
            return NotImplemented
        return self._provider is other._provider

    def __hash__(self) -> int:
        return hash(id(self._provider))

    def __repr__(self) -> str:
        return f"GlobalGeohasher(provider={self._provider!r})"
