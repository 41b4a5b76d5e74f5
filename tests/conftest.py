"""Shared fixtures: deterministic Dow Jones opening prices (no network)."""
from __future__ import annotations

from datetime import date

import pytest

from xkcdgeohash.infrastructure.dow_data.in_memory_adapter import InMemoryDowPriceProvider

# Official geohashing.site test data around the 30W rule cutoff, plus the
# original comic's example and the scientific notation edge case.
DOW_OPENINGS: dict[date, float] = {
    date(2005, 5, 26): 10458.68,
    date(2008, 5, 20): 13026.04,
    date(2008, 5, 21): 12824.94,
    date(2008, 5, 22): 12597.69,
    date(2008, 5, 23): 12620.90,
    date(2008, 5, 24): 12620.90,
    date(2008, 5, 25): 12620.90,
    date(2008, 5, 26): 12620.90,
    date(2008, 5, 27): 12479.63,
    date(2008, 5, 28): 12542.90,
    date(2008, 5, 29): 12593.87,
    date(2008, 5, 30): 12647.36,
    date(2012, 2, 24): 12981.20,
    date(2012, 2, 25): 12981.20,
    date(2012, 2, 26): 12981.20,
}


@pytest.fixture
def dow_provider() -> InMemoryDowPriceProvider:
    return InMemoryDowPriceProvider(DOW_OPENINGS)


@pytest.fixture
def empty_provider() -> InMemoryDowPriceProvider:
    return InMemoryDowPriceProvider({})
