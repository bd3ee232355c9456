"""
Combodate - Proportion Calculator Module.

This module calculates how much of the current day, week, month or year
has elapsed at a given instant, as a truncated 5-digit fixed-point
fraction such as ``"0.500 00"``.

All calculations use the timestamp's own wall clock. Integer arithmetic
is used throughout so the result is truncated, never rounded: the
displayed fraction is always less than or equal to the true fraction.

Functions:
    proportion_elapsed: Elapsed proportion of any Period.
    proportion_day: Elapsed proportion of the day.
    proportion_week: Elapsed proportion of the ISO week.
    proportion_month: Elapsed proportion of the calendar month.
    proportion_year: Elapsed proportion of the calendar year.
"""

from datetime import datetime
from typing import Tuple

from combodate.date_logic import (
    DAYS_PER_WEEK,
    SECONDS_PER_DAY,
    day_of_year,
    days_since_monday,
    month_length,
    seconds_since_midnight,
    year_length,
)
from combodate.formatting import group_digits_from_left
from combodate.schema import (
    GROUP_SEPARATOR,
    GROUP_SIZE,
    PROPORTION_DIGITS,
    PROPORTION_SCALE,
    Period,
)


def _period_bounds(timestamp: datetime, period: Period) -> Tuple[int, int]:
    """
    Returns (whole days since period start, period length in days).

    Args:
        timestamp: Instant to measure.
        period: Period to measure against.

    Returns:
        Tuple of elapsed whole days and total days in the period.
    """
    if period is Period.DAY:
        return 0, 1
    if period is Period.WEEK:
        return days_since_monday(timestamp), DAYS_PER_WEEK
    if period is Period.MONTH:
        return timestamp.day - 1, month_length(timestamp.year, timestamp.month)
    if period is Period.YEAR:
        return day_of_year(timestamp) - 1, year_length(timestamp.year)
    raise ValueError(f"Unknown period: {period!r}")


def format_proportion(scaled: int) -> str:
    """
    Formats a scaled proportion as a grouped fixed-point fraction.

    Args:
        scaled: Proportion multiplied by PROPORTION_SCALE, 0 <= scaled < scale.

    Returns:
        Text such as ``"0.500 00"`` for 50000.
    """
    digits = f"{scaled:0{PROPORTION_DIGITS}d}"
    return "0." + group_digits_from_left(digits, GROUP_SIZE, GROUP_SEPARATOR)


def proportion_elapsed(timestamp: datetime, period: Period) -> str:
    """
    Calculates the proportion of a period elapsed at the given instant.

    Formula: (seconds since midnight + 86400 * days since period start)
    * 100000 // (86400 * days in period)

    Args:
        timestamp: Instant to measure, read on its own wall clock.
        period: Period to measure against.

    Returns:
        Truncated 5-digit fraction in [0, 1), e.g. ``"0.250 00"``.

    Example:
        >>> proportion_elapsed(datetime(1989, 11, 9, 12), Period.DAY)
        '0.500 00'
    """
    elapsed_days, total_days = _period_bounds(timestamp, period)
    elapsed = seconds_since_midnight(timestamp) + elapsed_days * SECONDS_PER_DAY
    scaled = elapsed * PROPORTION_SCALE // (total_days * SECONDS_PER_DAY)
    return format_proportion(scaled)


def proportion_day(timestamp: datetime) -> str:
    """Returns the proportion of the local day elapsed."""
    return proportion_elapsed(timestamp, Period.DAY)


def proportion_week(timestamp: datetime) -> str:
    """Returns the proportion of the Monday-start week elapsed."""
    return proportion_elapsed(timestamp, Period.WEEK)


def proportion_month(timestamp: datetime) -> str:
    """Returns the proportion of the calendar month elapsed."""
    return proportion_elapsed(timestamp, Period.MONTH)


def proportion_year(timestamp: datetime) -> str:
    """Returns the proportion of the calendar year elapsed."""
    return proportion_elapsed(timestamp, Period.YEAR)
