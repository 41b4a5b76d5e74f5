"""
Domain error taxonomy.
Zero external dependencies. Entrypoints map these onto exit codes / HTTP statuses.
"""


class GeohashError(Exception):
    """Base class for every error raised by the geohash core."""


class InvalidInput(GeohashError, ValueError):
    """Malformed coordinates, dates or options supplied by a caller."""


class InvalidHexFormat(GeohashError, ValueError):
    """A hex fraction was not exactly 16 hexadecimal characters."""


class PriceUnavailable(GeohashError):
    """No configured source could supply a Dow Jones opening price.

    The last underlying failure is available both as ``reason`` (its message)
    and as ``__cause__`` when raised by a provider.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
