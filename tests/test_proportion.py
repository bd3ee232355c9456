"""
Combodate - Proportion Calculator Tests.

Property-based and unit tests for the elapsed-proportion calculations.
Tests ensure calendar-aware denominators, Monday-start weeks and
truncating (never rounding) fixed-point output.
"""

import re
from datetime import datetime, timedelta, timezone
from fractions import Fraction

import pytest
from hypothesis import given, settings
from hypothesis.strategies import builds, datetimes, integers, sampled_from

from combodate.proportion import (
    format_proportion,
    proportion_day,
    proportion_elapsed,
    proportion_month,
    proportion_week,
    proportion_year,
)
from combodate.schema import Period


PROPORTION_PATTERN = re.compile(r"^0\.\d{3} \d{2}$")

UTC = timezone.utc


def fixed_offset(hours: int) -> timezone:
    """Returns a fixed UTC offset of the given number of hours."""
    return timezone(timedelta(hours=hours))


def parse_proportion(value: str) -> Fraction:
    """Parses ``"0.500 00"`` into Fraction(1, 2)."""
    return Fraction(value.replace(" ", ""))


class TestProportionUnit:
    """Unit tests for the proportion calculator."""

    def test_day_noon_is_half(self) -> None:
        """Verify local noon is exactly halfway through the day."""
        t = datetime(1989, 11, 9, 12, 0, 0, tzinfo=fixed_offset(-8))
        assert proportion_day(t) == "0.500 00"

    def test_week_thursday_noon_is_half(self) -> None:
        """Verify Thursday noon is exactly halfway through a Monday-start week."""
        t = datetime(1995, 7, 13, 12, 0, 0, tzinfo=fixed_offset(-9))
        assert proportion_week(t) == "0.500 00"

    def test_week_starts_monday(self) -> None:
        """Verify Monday midnight starts the week and Sunday ends it."""
        monday = datetime(2023, 3, 20, 0, 0, 0, tzinfo=UTC)
        sunday = datetime(2023, 3, 26, 23, 59, 59, tzinfo=UTC)
        assert proportion_week(monday) == "0.000 00"
        assert proportion_week(sunday) == "0.999 99"

    def test_month_february_quarter(self) -> None:
        """Verify Feb 8 midnight is a quarter through a 28-day February."""
        t = datetime(1995, 2, 8, 0, 0, 0, tzinfo=fixed_offset(-9))
        assert proportion_month(t) == "0.250 00"

    def test_month_leap_february(self) -> None:
        """Verify the leap-year February denominator is 29 days."""
        t = datetime(2000, 2, 15, 12, 0, 0, tzinfo=UTC)
        # 14.5 / 29 = 0.5
        assert proportion_month(t) == "0.500 00"

    def test_year_quarter_common_year(self) -> None:
        """Verify April 2 06:00 is a quarter through a 365-day year."""
        t = datetime(1989, 4, 2, 6, 0, 0, tzinfo=UTC)
        assert proportion_year(t) == "0.250 00"

    def test_year_quarter_leap_year(self) -> None:
        """Verify April 1 12:00 is a quarter through a 366-day year."""
        t = datetime(2000, 4, 1, 12, 0, 0, tzinfo=UTC)
        assert proportion_year(t) == "0.250 00"

    def test_period_start_is_zero(self) -> None:
        """Verify every period starts at exactly zero."""
        t = datetime(2024, 1, 1, 0, 0, 0, tzinfo=UTC)  # a Monday
        for period in Period:
            assert proportion_elapsed(t, period) == "0.000 00"

    def test_truncates_not_rounds(self) -> None:
        """Verify 23:59:59 truncates to 0.999 98 rather than rounding up."""
        t = datetime(2023, 6, 1, 23, 59, 59, tzinfo=UTC)
        # 86399 / 86400 = 0.9999884...
        assert proportion_day(t) == "0.999 98"

    def test_one_second_after_midnight(self) -> None:
        """Verify small values keep their leading zeros."""
        t = datetime(2023, 6, 1, 0, 0, 1, tzinfo=UTC)
        assert proportion_day(t) == "0.000 01"

    def test_last_second_of_year(self) -> None:
        """Verify the final second of the year stays below one."""
        t = datetime(2023, 12, 31, 23, 59, 59, tzinfo=UTC)
        assert proportion_year(t) == "0.999 99"

    def test_uses_wall_clock_not_utc(self) -> None:
        """Verify the same instant gives different day proportions per offset."""
        local = datetime(1989, 11, 9, 12, 0, 0, tzinfo=fixed_offset(-8))
        utc = local.astimezone(UTC)
        assert proportion_day(local) == "0.500 00"
        assert proportion_day(utc) == "0.833 33"

    def test_format_proportion(self) -> None:
        """Verify scaled values are zero padded and grouped 3 then 2."""
        assert format_proportion(50000) == "0.500 00"
        assert format_proportion(7) == "0.000 07"
        assert format_proportion(99999) == "0.999 99"

    def test_unknown_period_raises_error(self) -> None:
        """Verify a value that is not a Period is rejected."""
        t = datetime(2023, 6, 1, tzinfo=UTC)
        with pytest.raises(ValueError):
            proportion_elapsed(t, "fortnight")


offsets = builds(lambda minutes: timezone(timedelta(minutes=minutes)),
                 integers(min_value=-14 * 60, max_value=14 * 60))

aware_datetimes = builds(
    lambda naive, tz: naive.replace(tzinfo=tz),
    datetimes(min_value=datetime(1, 1, 1), max_value=datetime(9999, 12, 31, 23, 59, 59)),
    offsets,
)


class TestProportionProperty:
    """Property-based tests for the proportion calculator."""

    @given(aware_datetimes, sampled_from(list(Period)))
    @settings(max_examples=300)
    def test_proportion_shape_and_range(self, t: datetime, period: Period) -> None:
        """
        Property: Every proportion is "0.DDD DD" and lies in [0, 1).
        """
        value = proportion_elapsed(t, period)
        assert PROPORTION_PATTERN.match(value), value
        assert Fraction(0) <= parse_proportion(value) < Fraction(1)

    @given(aware_datetimes)
    @settings(max_examples=300)
    def test_day_proportion_is_truncated_fraction(self, t: datetime) -> None:
        """
        Property: The displayed value is the true fraction truncated to 5 digits.
        """
        value = parse_proportion(proportion_day(t))
        seconds = t.hour * 3600 + t.minute * 60 + t.second
        exact = Fraction(seconds, 86400)
        assert value <= exact < value + Fraction(1, 100000)

    @given(aware_datetimes)
    @settings(max_examples=200)
    def test_day_proportion_matches_wall_clock(self, t: datetime) -> None:
        """
        Property: The day proportion depends only on the wall-clock time.
        """
        other_day = t.replace(year=2000, month=1, day=1)
        assert proportion_day(t) == proportion_day(other_day)
