"""
Hash engine: "YYYY-MM-DD-PPPP.PP" → MD5 → two fractional offsets.
Zero external dependencies (hashlib only).
"""

import hashlib
from datetime import date

from xkcdgeohash.domain.services.hex_fraction import HEX_DIGITS, decode_hex_fraction


def build_hash_input(day: date, price: float) -> str:
    """Join *day* (ISO) and *price* (exactly two decimals) with a dash.

    >>> build_hash_input(date(2005, 5, 26), 10458.68)
    '2005-05-26-10458.68'
    """
    return f"{day:%Y-%m-%d}-{price:.2f}"


def hash_to_offsets(hash_input: str) -> tuple[float, float]:
    """Return ``(lat_offset, lon_offset)`` decoded from the MD5 of *hash_input*.

    The first half of the hex digest feeds latitude, the second longitude.
    """
    digest = hashlib.md5(hash_input.encode("utf-8")).hexdigest()
    return (
        decode_hex_fraction(digest[:HEX_DIGITS]),
        decode_hex_fraction(digest[HEX_DIGITS:]),
    )
