"""
Presentation helpers shared by the CLI and the HTTP API.
Render a GeohashResult as text, as a JSON-ready dict, or as a map link.
"""

from xkcdgeohash.domain.entities.geohash_result import GeohashResult
from xkcdgeohash.domain.errors import InvalidInput

OUTPUT_FORMATS = ("decimal", "dms", "coordinates")
MAP_SERVICES = ("google", "osm", "bing", "waymarked")
DEFAULT_ZOOM = 15

_MAP_URL_TEMPLATES = {
    "google": "https://maps.google.com/?q={lat},{lon}&z={zoom}",
    "osm": "https://www.openstreetmap.org/?mlat={lat}&mlon={lon}&zoom={zoom}",
    "bing": "https://www.bing.com/maps/?cp={lat}~{lon}&lvl={zoom}&sp=point.{lat}_{lon}",
    "waymarked": "https://hiking.waymarkedtrails.org/#?map={zoom}/{lat}/{lon}",
}


def format_decimal(result: GeohashResult) -> str:
    return f"{result.latitude:.6f}, {result.longitude:.6f}"


def format_coordinates(result: GeohashResult) -> str:
    return f"{result.latitude:.6f},{result.longitude:.6f}"


def format_dms(result: GeohashResult) -> str:
    """Render as degrees/minutes/seconds, e.g. ``68°51'27.77"N, 30°32'40.36"W``."""
    latitude = _to_dms(result.latitude, "N", "S")
    longitude = _to_dms(result.longitude, "E", "W")
    return f"{latitude}, {longitude}"


def format_result(result: GeohashResult, output_format: str = "decimal") -> str:
    """Render *result* in one of OUTPUT_FORMATS.

    Raises:
        InvalidInput: for an unknown *output_format*.
    """
    if output_format == "decimal":
        return format_decimal(result)
    if output_format == "dms":
        return format_dms(result)
    if output_format == "coordinates":
        return format_coordinates(result)
    raise InvalidInput(
        f"Invalid format: {output_format!r} (choose from {', '.join(OUTPUT_FORMATS)})"
    )


def result_to_dict(result: GeohashResult) -> dict:
    return {
        "latitude": result.latitude,
        "longitude": result.longitude,
        "date": result.used_date.isoformat(),
        "used_dow_date": result.used_dow_date.isoformat(),
    }


def map_url(result: GeohashResult, service: str, zoom: int = DEFAULT_ZOOM) -> str:
    """Return a link to *result* on a third-party map service.

    Raises:
        InvalidInput: for an unknown *service*.
    """
    template = _MAP_URL_TEMPLATES.get(service)
    if template is None:
        raise InvalidInput(
            f"Invalid service: {service!r} (choose from {', '.join(MAP_SERVICES)})"
        )
    return template.format(
        lat=f"{result.latitude:.6f}",
        lon=f"{result.longitude:.6f}",
        zoom=zoom,
    )


def _to_dms(value: float, positive: str, negative: str) -> str:
    hemisphere = positive if value >= 0 else negative
    # Work in hundredths of an arc-second so rounding never yields 60.00".
    total = round(abs(value) * 360000)
    degrees, remainder = divmod(total, 360000)
    minutes, centiseconds = divmod(remainder, 6000)
    return f"{degrees}°{minutes:02d}'{centiseconds / 100:05.2f}\"{hemisphere}"
