"""Tests for the 30W time zone rule (Dow Jones opening date selection)."""
from datetime import date, timedelta

import pytest

from xkcdgeohash.domain.entities.graticule import Graticule
from xkcdgeohash.domain.services.thirty_west_rule import (
    THIRTY_WEST_CUTOFF,
    applicable_dow_date,
    applicable_dow_date_global,
    is_east_of_thirty_west,
)
from xkcdgeohash.domain.services.trading_days import latest_trading_day_on_or_before

WEST = Graticule(68, -30)
EAST = Graticule(68, -29)


def test_thirty_west_itself_counts_as_west():
    assert not is_east_of_thirty_west(WEST)
    assert is_east_of_thirty_west(EAST)
    assert not is_east_of_thirty_west(Graticule(45, -179))
    assert is_east_of_thirty_west(Graticule(52, 13))


def test_west_uses_same_trading_day_for_any_date():
    start = date(2008, 5, 15)
    for offset in range(30):
        day = start + timedelta(days=offset)
        assert applicable_dow_date(WEST, day) == latest_trading_day_on_or_before(day)


def test_west_friday_uses_same_day():
    friday = date(2012, 2, 24)
    assert applicable_dow_date(WEST, friday) == friday


def test_east_after_cutoff_uses_previous_day():
    friday = date(2012, 2, 24)
    assert applicable_dow_date(EAST, friday) == friday - timedelta(days=1)


def test_east_after_cutoff_monday_rolls_back_to_friday():
    monday = date(2012, 5, 21)
    assert applicable_dow_date(EAST, monday) == date(2012, 5, 18)


@pytest.mark.parametrize("graticule", [WEST, EAST])
def test_before_cutoff_both_sides_use_same_day(graticule):
    friday = date(2007, 4, 13)
    assert applicable_dow_date(graticule, friday) == friday


def test_cutoff_day_itself_still_uses_same_day_in_the_east():
    assert applicable_dow_date(EAST, THIRTY_WEST_CUTOFF) == THIRTY_WEST_CUTOFF


def test_first_day_of_the_rule():
    first = THIRTY_WEST_CUTOFF + timedelta(days=1)
    assert applicable_dow_date(EAST, first) == THIRTY_WEST_CUTOFF
    assert applicable_dow_date(WEST, first) == first


def test_global_uses_previous_trading_day():
    assert applicable_dow_date_global(date(2025, 8, 19)) == date(2025, 8, 18)
    assert applicable_dow_date_global(date(2025, 8, 18)) == date(2025, 8, 15)


def test_global_ignores_the_cutoff():
    assert applicable_dow_date_global(date(2007, 4, 13)) == date(2007, 4, 12)
