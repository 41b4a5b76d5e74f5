"""
Hex fraction codec: 16 hex digits → float in [0, 1).
Zero external dependencies.
"""

import math
import re

from xkcdgeohash.domain.errors import InvalidHexFormat

HEX_DIGITS = 16

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{16}")
_DENOMINATOR = 16**HEX_DIGITS
# (16**16 - 1) / 16**16 rounds to 1.0 as a float.
_LARGEST_BELOW_ONE = math.nextafter(1.0, 0.0)


def decode_hex_fraction(hex16: str) -> float:
    """Read *hex16* as the digits of the base-16 fraction ``0.hhhh...``.

    Case-insensitive. All zeros decode to exactly ``0.0``; the result never
    reaches ``1.0``.

    Raises:
        InvalidHexFormat: if *hex16* is not exactly 16 hex characters.
    """
    if not isinstance(hex16, str) or not _HEX_PATTERN.fullmatch(hex16):
        raise InvalidHexFormat(
            f"expected {HEX_DIGITS} hexadecimal characters, got {hex16!r}"
        )
    return min(int(hex16, 16) / _DENOMINATOR, _LARGEST_BELOW_ONE)
