"""
The 30W time zone rule: which day's Dow opening feeds a given geohash.

Graticules east of 30°W use the previous day's opening for dates after
2008-05-26 (the rule took effect on 2008-05-27). Before that every graticule
used the same day's opening. Global hashes always use the previous day.
"""

from datetime import date, timedelta

from xkcdgeohash.domain.entities.graticule import Graticule
from xkcdgeohash.domain.services.trading_days import latest_trading_day_on_or_before

THIRTY_WEST_LONGITUDE = -30
THIRTY_WEST_CUTOFF = date(2008, 5, 26)

_ONE_DAY = timedelta(days=1)


def is_east_of_thirty_west(graticule: Graticule) -> bool:
    return graticule.lon > THIRTY_WEST_LONGITUDE


def applicable_dow_date(graticule: Graticule, target: date) -> date:
    """Return the Dow Jones opening date (DJOD) for *graticule* on *target*."""
    if is_east_of_thirty_west(graticule) and target > THIRTY_WEST_CUTOFF:
        return latest_trading_day_on_or_before(target - _ONE_DAY)
    return latest_trading_day_on_or_before(target)


def applicable_dow_date_global(target: date) -> date:
    """Return the DJOD for the global hash on *target*, regardless of the cutoff."""
    return latest_trading_day_on_or_before(target - _ONE_DAY)
