"""
Environment-driven configuration for the entrypoints.

Entrypoints call python-dotenv's ``load_dotenv()`` first, so any of these
variables may also come from a local ``.env`` file:

    XKCDGEOHASH_DOW_SOURCES   comma-separated base URLs (default: the four mirrors)
    XKCDGEOHASH_HTTP_TIMEOUT  per-request timeout in seconds (default: 10)
    XKCDGEOHASH_LOG_LEVEL     logging level name (default: WARNING)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from xkcdgeohash.domain.errors import InvalidInput
from xkcdgeohash.infrastructure.dow_data.http_adapter import (
    DEFAULT_DOW_SOURCES,
    DEFAULT_TIMEOUT_SECONDS,
    HttpDowPriceProvider,
)

SOURCES_ENV = "XKCDGEOHASH_DOW_SOURCES"
TIMEOUT_ENV = "XKCDGEOHASH_HTTP_TIMEOUT"
LOG_LEVEL_ENV = "XKCDGEOHASH_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    dow_sources: tuple[str, ...] = DEFAULT_DOW_SOURCES
    http_timeout: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from *environ* (defaults to ``os.environ``).

        Raises:
            InvalidInput: if a variable is set to an unusable value.
        """
        env = os.environ if environ is None else environ
        return cls(
            dow_sources=_parse_sources(env.get(SOURCES_ENV)),
            http_timeout=_parse_timeout(env.get(TIMEOUT_ENV)),
            log_level=_parse_log_level(env.get(LOG_LEVEL_ENV)),
        )


def build_price_provider(settings: Settings) -> HttpDowPriceProvider:
    return HttpDowPriceProvider(
        sources=settings.dow_sources,
        timeout=settings.http_timeout,
    )


def configure_logging(level: str | int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def _parse_sources(raw: str | None) -> tuple[str, ...]:
    if raw is None or not raw.strip():
        return DEFAULT_DOW_SOURCES
    sources = []
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        if not entry.startswith(("http://", "https://")):
            raise InvalidInput(f"{SOURCES_ENV}: not an http(s) URL: {entry!r}")
        sources.append(entry if entry.endswith("/") else entry + "/")
    return tuple(sources)


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise InvalidInput(f"{TIMEOUT_ENV}: not a number: {raw!r}") from exc
    if not timeout > 0:
        raise InvalidInput(f"{TIMEOUT_ENV}: must be positive, got {raw!r}")
    return timeout


def _parse_log_level(raw: str | None) -> str:
    if raw is None or not raw.strip():
        return "WARNING"
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidInput(f"{LOG_LEVEL_ENV}: unknown logging level {raw!r}")
    return level
