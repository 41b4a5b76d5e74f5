"""
FastAPI entry point for the HTTP geohash service.

This module is the Composition Root for server runs: it wires one configured
HttpDowPriceProvider at startup and shares it between requests, so the
provider's last-good-source memo survives across calls. Endpoints are plain
``def`` functions and run in FastAPI's threadpool.

Run locally:
    uvicorn xkcdgeohash.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import datetime as dt

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

load_dotenv()

from xkcdgeohash.api import __version__  # noqa: E402
from xkcdgeohash.application.use_cases.geohasher import Geohasher, GlobalGeohasher  # noqa: E402
from xkcdgeohash.domain.entities.geohash_result import GeohashResult  # noqa: E402
from xkcdgeohash.domain.entities.graticule import Graticule  # noqa: E402
from xkcdgeohash.domain.errors import InvalidInput, PriceUnavailable  # noqa: E402
from xkcdgeohash.domain.ports.dow_price_port import IDowPriceProvider  # noqa: E402
from xkcdgeohash.infrastructure.config import (  # noqa: E402
    Settings,
    build_price_provider,
    configure_logging,
)

# ---------------------------------------------------------------------------
# Composition Root: wire dependencies once at startup
# ---------------------------------------------------------------------------
_settings = Settings.from_env()
configure_logging(_settings.log_level)
_price_provider = build_price_provider(_settings)


def get_price_provider() -> IDowPriceProvider:
    """FastAPI dependency: the process-wide Dow price provider."""
    return _price_provider


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(title="xkcd Geohash API", version=__version__)


class GeohashResponse(BaseModel):
    latitude: float
    longitude: float
    date: dt.date
    used_dow_date: dt.date

    @classmethod
    def from_result(cls, result: GeohashResult) -> "GeohashResponse":
        return cls(
            latitude=result.latitude,
            longitude=result.longitude,
            date=result.used_date,
            used_dow_date=result.used_dow_date,
        )


@app.get("/geohash", response_model=GeohashResponse)
def geohash(
    lat: float = Query(..., ge=-90, le=90, description="Latitude inside the graticule"),
    lon: float = Query(..., gt=-180, lt=180, description="Longitude inside the graticule"),
    day: dt.date | None = Query(None, alias="date", description="Target date (default: today)"),
    provider: IDowPriceProvider = Depends(get_price_provider),
):
    """Geohash of the graticule containing (*lat*, *lon*)."""
    try:
        graticule = Graticule.from_coordinates(lat, lon)
    except InvalidInput as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _run(Geohasher(graticule, provider), day)


@app.get("/global", response_model=GeohashResponse)
def global_geohash(
    day: dt.date | None = Query(None, alias="date", description="Target date (default: today)"),
    provider: IDowPriceProvider = Depends(get_price_provider),
):
    """The worldwide geohash of the day."""
    return _run(GlobalGeohasher(provider), day)


@app.get("/health")
def health():
    return {"status": "ok"}


def _run(hasher: Geohasher | GlobalGeohasher, day: dt.date | None) -> GeohashResponse:
    try:
        result = hasher.hash(day or dt.date.today())
    except PriceUnavailable as exc:
        raise HTTPException(status_code=502, detail=exc.reason) from exc
    return GeohashResponse.from_result(result)
