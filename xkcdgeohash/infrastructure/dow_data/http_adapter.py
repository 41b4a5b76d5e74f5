"""
Infrastructure adapter: mirrored DJIA HTTP sources → IDowPriceProvider.

Each source is a base URL queried as ``GET {base}{yyyy}/{MM}/{dd}`` and
answering with the opening price as plain text. Sources are tried in order,
starting from the last one that answered, with wrap-around; every source is
tried at most once per call. All requests/HTTP details are confined here.
"""

import logging
import re
import threading
from collections.abc import Sequence
from datetime import date

import requests

from xkcdgeohash.domain.errors import PriceUnavailable
from xkcdgeohash.domain.ports.dow_price_port import IDowPriceProvider

logger = logging.getLogger(__name__)

DEFAULT_DOW_SOURCES: tuple[str, ...] = (
    "http://carabiner.peeron.com/xkcd/map/data/",
    "http://geo.crox.net/djia/",
    "http://www1.geo.crox.net/djia/",
    "http://www2.geo.crox.net/djia/",
)

DEFAULT_TIMEOUT_SECONDS = 10.0

_PRICE_PATTERN = re.compile(r"\d+(?:\.\d+)?")


class HttpDowPriceProvider(IDowPriceProvider):
    """Fetches DJIA opening prices from mirrored HTTP sources with failover."""

    def __init__(
        self,
        sources: Sequence[str] = DEFAULT_DOW_SOURCES,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._sources = tuple(sources)
        self._timeout = timeout
        self._session = session or requests.Session()
        self._last_good_index = 0
        self._lock = threading.Lock()

    @property
    def sources(self) -> tuple[str, ...]:
        return self._sources

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def last_good_index(self) -> int:
        return self._last_good_index

    def get_price(self, day: date) -> float:
        """Return the opening price for *day* from the first source that answers.

        Raises:
            PriceUnavailable: if the source list is empty or every source fails.
                The last source's failure is chained as ``__cause__``.
        """
        if not self._sources:
            raise PriceUnavailable("no Dow Jones price sources configured")

        start = self._last_good_index
        last_error: Exception | None = None
        for attempt in range(len(self._sources)):
            index = (start + attempt) % len(self._sources)
            url = self.url_for(self._sources[index], day)
            try:
                price = self._fetch(url)
            except (requests.RequestException, ValueError) as exc:
                last_error = exc
                logger.warning("Dow source %s failed for %s: %s", url, day, exc)
                continue
            with self._lock:
                self._last_good_index = index
            logger.debug("Dow opening for %s is %.2f (from %s)", day, price, url)
            return price

        raise PriceUnavailable(
            f"no source could supply the Dow Jones opening for {day:%Y-%m-%d}: {last_error}"
        ) from last_error

    @staticmethod
    def url_for(base_url: str, day: date) -> str:
        return f"{base_url}{day:%Y/%m/%d}"

    def _fetch(self, url: str) -> float:
        response = self._session.get(url, timeout=self._timeout)
        if response.status_code != 200:
            raise requests.HTTPError(
                f"HTTP {response.status_code} from {url}", response=response
            )
        body = response.text.strip()
        if not _PRICE_PATTERN.fullmatch(body):
            raise ValueError(f"response is not a price: {body[:40]!r}")
        return float(body)

    def __repr__(self) -> str:
        return f"HttpDowPriceProvider(sources={list(self._sources)!r}, timeout={self._timeout})"
