"""Tests for the 16-digit hex fraction codec."""
import pytest

from xkcdgeohash.domain.errors import InvalidHexFormat
from xkcdgeohash.domain.services.hex_fraction import decode_hex_fraction


def test_decodes_known_digest_half():
    assert decode_hex_fraction("db9318c2259923d0") == pytest.approx(0.8577132677070023, abs=1e-15)


def test_all_zeros_is_exactly_zero():
    assert decode_hex_fraction("0" * 16) == 0.0


def test_all_f_is_just_below_one():
    result = decode_hex_fraction("f" * 16)
    assert 0.999999 < result < 1.0


def test_smallest_nonzero_value():
    result = decode_hex_fraction("0000000000000001")
    assert 0.0 < result < 0.000001


def test_case_insensitive():
    assert decode_hex_fraction("AbCdEf1234567890") == decode_hex_fraction("abcdef1234567890")
    assert decode_hex_fraction("DB9318C2259923D0") == decode_hex_fraction("db9318c2259923d0")


@pytest.mark.parametrize(
    "bad",
    [
        "invalid",
        "GGGGGGGGGGGGGGGG",
        "db9318c2259923d",
        "db9318c2259923d00",
        "0xdb9318c2259923",
        "db93_18c2259923d",
        " db9318c2259923d",
        "",
    ],
)
def test_rejects_malformed_input(bad):
    with pytest.raises(InvalidHexFormat):
        decode_hex_fraction(bad)


def test_invalid_hex_is_a_value_error():
    with pytest.raises(ValueError):
        decode_hex_fraction("0.GGGG")
