"""
Combodate - Date Logic Module.

This module provides the calendar arithmetic behind the proportion
calculations: leap year detection, month and year lengths, and the
wall-clock offsets of a timestamp from the start of its day, week and
year.

All functions follow the proleptic Gregorian calendar and accept any
integer year, including zero and negative years.

Functions:
    is_leap_year: Gregorian leap year test.
    month_length: Number of days in a given month.
    year_length: Number of days in a given year.
    seconds_since_midnight: Wall-clock seconds elapsed since 00:00.
    days_since_monday: Whole days since the start of the ISO week.
    day_of_year: 1-based ordinal day within the year.
"""

import calendar
from datetime import datetime

from combodate.errors import InvalidMonthError


SECONDS_PER_DAY = 86_400
DAYS_PER_WEEK = 7
FEBRUARY = 2


def is_leap_year(year: int) -> bool:
    """
    Gregorian leap year test, extended backwards to year zero and beyond.

    Every fourth year is a leap year except centuries, and every fourth
    century is a leap year again. The rule is applied as-is to year 0
    and negative years rather than being limited to datetime's 1-9999.

    Args:
        year: Any integer year.

    Returns:
        True for leap years.
    """
    return calendar.isleap(year)


def month_length(year: int, month: int) -> int:
    """
    Looks up how many days a month has in the given year.

    Only February depends on the year: 29 days when ``is_leap_year``
    holds, otherwise 28. The year itself is never range checked.

    Args:
        year: Any integer year.
        month: Month number, January = 1.

    Returns:
        28, 29, 30 or 31.

    Raises:
        InvalidMonthError: If month is outside 1-12.
    """
    if not 1 <= month <= 12:
        raise InvalidMonthError(month)
    # calendar.monthrange is bounded to datetime's year range; mdays is not
    if month == FEBRUARY and is_leap_year(year):
        return 29
    return calendar.mdays[month]


def year_length(year: int) -> int:
    """Returns 366 for leap years and 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def seconds_since_midnight(timestamp: datetime) -> int:
    """
    Calculates whole seconds elapsed since local midnight.

    Uses the timestamp's own wall clock; no timezone conversion is
    applied. Sub-second precision is discarded.

    Args:
        timestamp: Instant to measure.

    Returns:
        Seconds in the range 0-86399.
    """
    return timestamp.hour * 3600 + timestamp.minute * 60 + timestamp.second


def days_since_monday(timestamp: datetime) -> int:
    """Returns whole days since the start of the ISO week (Monday = 0)."""
    return timestamp.weekday()


def day_of_year(timestamp: datetime) -> int:
    """Returns the ordinal day within the year, 1 for 1 January."""
    return timestamp.timetuple().tm_yday
