"""
Domain entity for a computed geohash.
Zero external dependencies, pure Python dataclass only.
"""

from dataclasses import dataclass
from datetime import date
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class GeohashResult:
    latitude: float
    longitude: float
    used_dow_date: date
    used_date: date

    def _sort_key(self) -> tuple:
        return (self.used_date, self.latitude, self.longitude, self.used_dow_date)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GeohashResult):
            return NotImplemented
        return self._sort_key() < other._sort_key()
