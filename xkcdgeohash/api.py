"""
Library composition root: the public, one-call geohashing API.

    from datetime import date
    from xkcdgeohash.api import xkcdgeohash

    result = xkcdgeohash(68.2, -30.7, date(2008, 5, 21))
    print(result.latitude, result.longitude)

Every function takes an optional *provider*; without one the default HTTP
provider (four mirrored DJIA sources) is used.
"""

from datetime import date

from xkcdgeohash.application.use_cases.geohasher import Geohasher, GlobalGeohasher
from xkcdgeohash.domain.entities.geohash_result import GeohashResult
from xkcdgeohash.domain.entities.graticule import Graticule
from xkcdgeohash.domain.ports.dow_price_port import IDowPriceProvider
from xkcdgeohash.infrastructure.dow_data.http_adapter import (
    DEFAULT_DOW_SOURCES,
    HttpDowPriceProvider,
)

__version__ = "0.1.0"


def get_default_price_provider() -> HttpDowPriceProvider:
    """Return a fresh HTTP provider preloaded with the default sources, in priority order."""
    return HttpDowPriceProvider(sources=DEFAULT_DOW_SOURCES)


def new_geohasher(lat: int, lon: int, provider: IDowPriceProvider | None = None) -> Geohasher:
    """Build a reusable Geohasher bound to graticule (*lat*, *lon*).

    Raises:
        InvalidInput: if the graticule is out of range.
    """
    return Geohasher(Graticule(lat=lat, lon=lon), _resolve(provider))


def new_global_geohasher(provider: IDowPriceProvider | None = None) -> GlobalGeohasher:
    return GlobalGeohasher(_resolve(provider))


def xkcdgeohash(
    lat: float,
    lon: float,
    day: date,
    provider: IDowPriceProvider | None = None,
) -> GeohashResult:
    """One-shot geohash for the graticule containing (*lat*, *lon*) on *day*.

    Coordinates are truncated toward zero, so -0.5 falls in graticule 0.

    Raises:
        InvalidInput: if the coordinates are out of range or not finite.
        PriceUnavailable: if no Dow opening price can be fetched.
    """
    graticule = Graticule.from_coordinates(lat, lon)
    return Geohasher(graticule, _resolve(provider)).hash(day)


def xkcdglobalgeohash(day: date, provider: IDowPriceProvider | None = None) -> GeohashResult:
    """One-shot global geohash for *day*.

    Raises:
        PriceUnavailable: if no Dow opening price can be fetched.
    """
    return new_global_geohasher(provider).hash(day)


def _resolve(provider: IDowPriceProvider | None) -> IDowPriceProvider:
    return provider if provider is not None else get_default_price_provider()
