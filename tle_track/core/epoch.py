"""Epoch conversion for TLE line 1 (two-digit year + fractional day of year)."""

from __future__ import annotations

import datetime as dt
import math
from typing import Any

from .fields import get_epoch_day, get_epoch_year

MS_PER_DAY = 86_400_000
_UNIX_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)

# Two-digit years from 57 onward belong to the 1900s (Sputnik launched in
# 1957); 00-56 are 2000-2056.
CENTURY_PIVOT = 57


def resolve_epoch_year(year2: float | int) -> int:
    """Expand a two-digit TLE epoch year into a four-digit year."""

    year = int(year2)
    if year != year2 or not 0 <= year <= 99:
        raise ValueError(f"epoch year must be a two-digit integer, got {year2!r}")
    return 1900 + year if year >= CENTURY_PIVOT else 2000 + year


def day_of_year_to_datetime(day_of_year: float, year: int) -> dt.datetime:
    """Return the UTC instant of fractional *day_of_year* (1.0 = Jan 1 00:00)."""

    start = dt.datetime(year, 1, 1, tzinfo=dt.timezone.utc)
    return start + dt.timedelta(days=day_of_year - 1)


def day_of_year_to_timestamp(day_of_year: float, year: int) -> int:
    """Return the same instant as epoch milliseconds, floored."""

    start = dt.datetime(year, 1, 1, tzinfo=dt.timezone.utc)
    start_ms = (start - _UNIX_EPOCH) // dt.timedelta(milliseconds=1)
    return math.floor(start_ms + (day_of_year - 1) * MS_PER_DAY)


def _epoch_parts(tle: Any) -> tuple:
    year2 = get_epoch_year(tle)
    day = get_epoch_day(tle)
    if isinstance(year2, str) or isinstance(day, str):
        raise ValueError(f"TLE epoch is not numeric: {year2!r} {day!r}")
    return resolve_epoch_year(year2), day


def get_epoch_datetime(tle: Any) -> dt.datetime:
    """Return the epoch of *tle* as a timezone-aware UTC datetime."""

    year, day = _epoch_parts(tle)
    return day_of_year_to_datetime(day, year)


def get_epoch_timestamp(tle: Any) -> int:
    """Return the epoch of *tle* in milliseconds since the Unix epoch."""

    year, day = _epoch_parts(tle)
    return day_of_year_to_timestamp(day, year)


def to_timestamp_ms(when: dt.datetime) -> int:
    """Return aware datetime *when* as epoch milliseconds, floored."""

    if when.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return (when - _UNIX_EPOCH) // dt.timedelta(milliseconds=1)


def from_timestamp_ms(timestamp: float) -> dt.datetime:
    return _UNIX_EPOCH + dt.timedelta(milliseconds=timestamp)


__all__ = [
    "CENTURY_PIVOT",
    "MS_PER_DAY",
    "day_of_year_to_datetime",
    "day_of_year_to_timestamp",
    "from_timestamp_ms",
    "get_epoch_datetime",
    "get_epoch_timestamp",
    "resolve_epoch_year",
    "to_timestamp_ms",
]
