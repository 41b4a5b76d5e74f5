from datetime import date

import pytest

from xkcdgeohash.domain.services.hash_engine import build_hash_input, hash_to_offsets


def test_hash_input_pads_price_to_two_decimals():
    assert build_hash_input(date(2025, 8, 18), 12345.6) == "2025-08-18-12345.60"


def test_hash_input_keeps_two_decimals():
    assert build_hash_input(date(2005, 5, 26), 10458.68) == "2005-05-26-10458.68"


def test_hash_input_zero_pads_month_and_day():
    assert build_hash_input(date(2000, 2, 2), 10980.77) == "2000-02-02-10980.77"


def test_offsets_of_the_comic_example():
    lat_offset, lon_offset = hash_to_offsets("2005-05-26-10458.68")
    assert lat_offset == pytest.approx(0.85771326770700234438, abs=1e-11)
    assert lon_offset == pytest.approx(0.54454306955928210562, abs=1e-11)


def test_offsets_are_fractions():
    for text in ("2008-05-20-13026.04", "2012-02-26-12981.20", ""):
        lat_offset, lon_offset = hash_to_offsets(text)
        assert 0.0 <= lat_offset < 1.0
        assert 0.0 <= lon_offset < 1.0


def test_offsets_are_deterministic():
    assert hash_to_offsets("2008-05-27-12479.63") == hash_to_offsets("2008-05-27-12479.63")
