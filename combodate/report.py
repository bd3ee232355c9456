"""
Combodate - Table Assembler Module.

This module turns a single captured instant into the nine-row Combodate
table: Unix time, ISO-8601 Gregorian and week-date forms in local time
and UTC, and the elapsed proportions of the local day, week, month and
year.

Every formatter accepts any timezone-aware datetime, so the same code
serves both the local and the UTC rows.

Functions:
    unix_time: Grouped seconds since the Unix epoch.
    iso_gregorian: ISO-8601 extended calendar date-time with offset.
    iso_week_date: ISO-8601 week-date with time and offset.
    build_rows: The nine table rows for an instant.
    make_combodate_table: The rendered table for an instant.
"""

from datetime import datetime, timedelta, timezone
from typing import List

from combodate.formatting import group_digits_from_right, render_table
from combodate.log import get_logger
from combodate.proportion import proportion_elapsed
from combodate.schema import GROUP_SEPARATOR, GROUP_SIZE, Period, Row


logger = get_logger("report")

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _require_aware(timestamp: datetime) -> None:
    """Raises ValueError unless the timestamp carries a UTC offset."""
    if timestamp.tzinfo is None or timestamp.utcoffset() is None:
        raise ValueError(f"Timestamp must be timezone-aware, got {timestamp!r}")


def _format_offset(timestamp: datetime) -> str:
    """
    Formats the timestamp's UTC offset as ``+HH:MM``.

    UTC is rendered as ``+00:00`` rather than ``Z``.
    """
    offset = timestamp.utcoffset()
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(offset) // timedelta(minutes=1)
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def unix_time(timestamp: datetime) -> str:
    """
    Calculates whole seconds since the Unix epoch, grouped in threes.

    Instants before the epoch keep their minus sign outside the grouping.

    Args:
        timestamp: Timezone-aware instant.

    Returns:
        Grouped seconds, e.g. ``"1 679 866 623"``.
    """
    _require_aware(timestamp)
    seconds = (timestamp - UNIX_EPOCH) // timedelta(seconds=1)
    sign = "-" if seconds < 0 else ""
    return sign + group_digits_from_right(str(abs(seconds)), GROUP_SIZE, GROUP_SEPARATOR)


def iso_gregorian(timestamp: datetime) -> str:
    """Returns ``YYYY-MM-DDTHH:MM:SS+HH:MM`` for the timestamp's own offset."""
    _require_aware(timestamp)
    wall_clock = timestamp.replace(tzinfo=None).isoformat(timespec="seconds")
    return wall_clock + _format_offset(timestamp)


def iso_week_date(timestamp: datetime) -> str:
    """
    Formats the timestamp as an ISO-8601 week-date with time and offset.

    The year is the ISO week-numbering year, which can differ from the
    calendar year in the first and last days of January and December.

    Args:
        timestamp: Timezone-aware instant.

    Returns:
        Text such as ``"1989-W45-4T22:45:00+01:00"``.
    """
    _require_aware(timestamp)
    iso_year, iso_week, iso_weekday = timestamp.isocalendar()
    return (
        f"{iso_year:04d}-W{iso_week:02d}-{iso_weekday}"
        f"T{timestamp:%H:%M:%S}{_format_offset(timestamp)}"
    )


def build_rows(timestamp: datetime) -> List[Row]:
    """
    Assembles the nine Combodate rows for a single instant.

    The UTC rows are derived from the same instant, so every row
    describes exactly the same moment. Proportions use local time.

    Args:
        timestamp: Timezone-aware local instant.

    Returns:
        Rows in display order.

    Raises:
        ValueError: If the timestamp is naive.
    """
    _require_aware(timestamp)
    utc = timestamp.astimezone(timezone.utc)

    rows = [
        Row("Unix", unix_time(timestamp)),
        Row("ISO-8601 Gregorian (Local)", iso_gregorian(timestamp)),
        Row("ISO-8601 Gregorian (UTC)", iso_gregorian(utc)),
        Row("ISO-8601 Week-date (Local)", iso_week_date(timestamp)),
        Row("ISO-8601 Week-date (UTC)", iso_week_date(utc)),
    ]
    for period in Period:
        rows.append(Row(
            f"Proportion of {period.value} elapsed (Local)",
            proportion_elapsed(timestamp, period),
        ))

    logger.debug("rows_built", count=len(rows), instant=iso_gregorian(timestamp))
    return rows


def make_combodate_table(timestamp: datetime) -> str:
    """Renders the Combodate table for the given instant."""
    return render_table(build_rows(timestamp))
