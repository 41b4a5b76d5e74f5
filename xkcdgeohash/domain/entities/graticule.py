"""
Domain entity for a 1°x1° graticule.
Zero external dependencies, pure Python dataclass only.
"""

from dataclasses import dataclass

from xkcdgeohash.domain.errors import InvalidInput

LAT_RANGE = (-90, 90)
LON_RANGE = (-179, 179)


@dataclass(frozen=True, order=True)
class Graticule:
    """Integer cell identity. The ±0 cells are not distinguished."""

    lat: int
    lon: int

    def __post_init__(self) -> None:
        for name, value, (low, high) in (
            ("lat", self.lat, LAT_RANGE),
            ("lon", self.lon, LON_RANGE),
        ):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInput(f"graticule {name} must be an integer, got {value!r}")
            if not low <= value <= high:
                raise InvalidInput(
                    f"graticule {name} must be within [{low}, {high}], got {value}"
                )

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float) -> "Graticule":
        """Truncate decimal coordinates toward zero to find their graticule."""
        try:
            return cls(lat=int(latitude), lon=int(longitude))
        except (OverflowError, ValueError) as exc:
            if isinstance(exc, InvalidInput):
                raise
            raise InvalidInput(
                f"coordinates must be finite numbers, got {latitude!r}, {longitude!r}"
            ) from exc
