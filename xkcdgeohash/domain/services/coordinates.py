"""
Coordinate composer.

Offsets are appended to the graticule *as text*: graticule -1 with offset
0.8577 becomes "-1.8577", so the fraction always grows the magnitude away
from zero. Offsets are rendered in fixed-point notation; a shortest-repr
rendering such as "4.7e-05" is the historical "scientific notation bug".
"""

from xkcdgeohash.domain.entities.graticule import Graticule

FRACTION_DIGITS = 20

_GLOBAL_ORIGIN = Graticule(lat=0, lon=0)


def fraction_digits(offset: float) -> str:
    """Return the fractional digits of *offset* (in [0, 1)) without the leading "0."."""
    rendered = f"{offset:.{FRACTION_DIGITS}f}"
    integer_part, _, digits = rendered.partition(".")
    if integer_part != "0":
        raise ValueError(f"offset must be within [0, 1), got {offset!r}")
    return digits


def append_offset(degrees: int, offset: float) -> float:
    return float(f"{degrees}.{fraction_digits(offset)}")


def compose_local(
    graticule: Graticule, lat_offset: float, lon_offset: float
) -> tuple[float, float]:
    """Append the offsets to the graticule's integer coordinates."""
    return (
        append_offset(graticule.lat, lat_offset),
        append_offset(graticule.lon, lon_offset),
    )


def compose_global(lat_offset: float, lon_offset: float) -> tuple[float, float]:
    """Scale the offsets onto the whole globe: lat in [-90, 90), lon in [-180, 180)."""
    lat_fraction, lon_fraction = compose_local(_GLOBAL_ORIGIN, lat_offset, lon_offset)
    return lat_fraction * 180 - 90, lon_fraction * 360 - 180
