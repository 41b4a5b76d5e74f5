"""
CLI entry point: composition root for command-line runs.

Wires the configured HTTP price provider to the Geohasher use-cases and
renders the results. Exit codes:

    0  success (or usage shown because no coordinates were given)
    1  invalid input (coordinates, date, format, map service, configuration)
    2  no Dow Jones price could be fetched
    3  any other geohash failure
    4  unexpected error

Run:
    xkcdgeohash --lat=68.2 --lon=-30.7 --date=2008-05-21
    python -m xkcdgeohash.infrastructure.entrypoints.cli --global
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from datetime import date, timedelta

from dotenv import load_dotenv

from xkcdgeohash.api import __version__
from xkcdgeohash.application.use_cases.geohasher import Geohasher, GlobalGeohasher
from xkcdgeohash.domain.entities.geohash_result import GeohashResult
from xkcdgeohash.domain.entities.graticule import Graticule
from xkcdgeohash.domain.errors import GeohashError, InvalidInput, PriceUnavailable
from xkcdgeohash.domain.ports.dow_price_port import IDowPriceProvider
from xkcdgeohash.infrastructure.config import Settings, build_price_provider, configure_logging
from xkcdgeohash.infrastructure.entrypoints.formatters import (
    DEFAULT_ZOOM,
    MAP_SERVICES,
    OUTPUT_FORMATS,
    format_result,
    map_url,
    result_to_dict,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_PRICE_UNAVAILABLE = 2
EXIT_GEOHASH_ERROR = 3
EXIT_UNEXPECTED = 4

EPILOG = """\
Examples:
  xkcdgeohash --lat=68.2 --lon=-30.7
  xkcdgeohash --lat=52.5 --lon=13.4 --date=2012-05-21 --format=dms
  xkcdgeohash --lat=45.0 --lon=-93.0 --days=7 --json
  xkcdgeohash --global --url=osm --zoom=4
"""


class _ArgumentParser(argparse.ArgumentParser):
    """argparse reports bad options as invalid input (exit 1), not exit 2."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_INVALID_INPUT, f"Invalid input: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="xkcdgeohash",
        description="XKCD Geohash Calculator (https://xkcd.com/426/)",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--lat", help="latitude inside the graticule (truncated toward zero)")
    parser.add_argument("--lon", help="longitude inside the graticule (truncated toward zero)")
    parser.add_argument(
        "--global", dest="global_hash", action="store_true", help="compute the global geohash"
    )
    parser.add_argument("--date", help="target date as YYYY-MM-DD (default: today)")
    parser.add_argument("--days", default="1", help="number of days ending at --date (default: 1)")
    parser.add_argument(
        "--format",
        dest="output_format",
        default="decimal",
        help=f"output format: {', '.join(OUTPUT_FORMATS)} (default: decimal)",
    )
    parser.add_argument("--json", action="store_true", help="print results as a JSON array")
    parser.add_argument("--url", help=f"also print a map link: {', '.join(MAP_SERVICES)}")
    parser.add_argument(
        "--zoom", default=str(DEFAULT_ZOOM), help=f"map zoom level (default: {DEFAULT_ZOOM})"
    )
    parser.add_argument("--verbose", action="store_true", help="show used dates and debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None, provider: IDowPriceProvider | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.global_hash and (args.lat is None or args.lon is None):
        parser.print_help()
        return EXIT_OK

    if args.output_format not in OUTPUT_FORMATS:
        return _fail(
            f"Invalid format: {args.output_format!r} (choose from {', '.join(OUTPUT_FORMATS)})",
            EXIT_INVALID_INPUT,
        )
    if args.url is not None and args.url not in MAP_SERVICES:
        return _fail(
            f"Invalid service: {args.url!r} (choose from {', '.join(MAP_SERVICES)})",
            EXIT_INVALID_INPUT,
        )

    try:
        dates = _parse_dates(args.date, args.days)
        zoom = _parse_positive_int("--zoom", args.zoom)
        graticule = None if args.global_hash else _parse_graticule(args.lat, args.lon)
        if provider is None:
            load_dotenv()
            settings = Settings.from_env()
            configure_logging("DEBUG" if args.verbose else settings.log_level)
            provider = build_price_provider(settings)
    except InvalidInput as exc:
        return _fail(f"Invalid input: {exc}", EXIT_INVALID_INPUT)

    hasher = GlobalGeohasher(provider) if graticule is None else Geohasher(graticule, provider)
    try:
        results = [hasher.hash(day) for day in dates]
    except PriceUnavailable as exc:
        return _fail(f"Could not fetch the Dow Jones opening price: {exc}", EXIT_PRICE_UNAVAILABLE)
    except GeohashError as exc:
        return _fail(f"Geohash failed: {exc}", EXIT_GEOHASH_ERROR)
    except Exception as exc:
        logger.exception("Unexpected failure")
        return _fail(f"Unexpected error: {exc}", EXIT_UNEXPECTED)

    if args.json:
        print(json.dumps([result_to_dict(result) for result in results], indent=2))
        return EXIT_OK

    for result in results:
        for line in _render(result, args, zoom, with_date=len(results) > 1):
            print(line)
    return EXIT_OK


def _render(result: GeohashResult, args: argparse.Namespace, zoom: int, with_date: bool) -> list[str]:
    coordinates = format_result(result, args.output_format)
    lines = [f"{result.used_date.isoformat()}: {coordinates}" if with_date else coordinates]
    if args.verbose:
        lines.append(
            f"  target: {result.used_date.isoformat()}, used Dow: {result.used_dow_date.isoformat()}"
        )
    if args.url is not None:
        url = map_url(result, args.url, zoom)
        lines.append(f"  Map: {url}" if args.verbose else url)
    return lines


def _parse_graticule(raw_lat: str, raw_lon: str) -> Graticule:
    try:
        latitude, longitude = float(raw_lat), float(raw_lon)
    except ValueError as exc:
        raise InvalidInput(f"coordinates must be numbers, got {raw_lat!r}, {raw_lon!r}") from exc
    return Graticule.from_coordinates(latitude, longitude)


def _parse_dates(raw_date: str | None, raw_days: str) -> list[date]:
    if raw_date is None:
        end = date.today()
    else:
        try:
            end = date.fromisoformat(raw_date)
        except ValueError as exc:
            raise InvalidInput(f"date must be YYYY-MM-DD, got {raw_date!r}") from exc
    days = _parse_positive_int("--days", raw_days)
    return [end - timedelta(days=offset) for offset in reversed(range(days))]


def _parse_positive_int(option: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise InvalidInput(f"{option} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise InvalidInput(f"{option} must be at least 1, got {value}")
    return value


def _fail(message: str, exit_code: int) -> int:
    print(message, file=sys.stderr)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
