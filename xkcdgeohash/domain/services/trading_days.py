"""
Trading-day resolver.

Approximates "the market was open" as "not a weekend". Market holidays are
not modelled: a holiday resolves to itself and the price source decides.
"""

from datetime import date, timedelta

SATURDAY = 5
SUNDAY = 6


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def latest_trading_day_on_or_before(day: date) -> date:
    """Return the latest non-weekend date that is not after *day*."""
    candidate = day
    while is_weekend(candidate):
        candidate -= timedelta(days=1)
    return candidate
