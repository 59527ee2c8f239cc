"""Tests for the leap-year, weekday and month grid calculations."""

from datetime import date

import pytest

from calendar_errors import InvalidDay, InvalidMonth, InvalidWeekday
from calendar_logic import (
    FRIDAY,
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    days_in_month,
    is_leap,
    leap_days,
    month_calendar,
    month_range,
    week_weekdays,
    weekday,
)


class TestIsLeap:
    def test_century_rules(self):
        assert is_leap(2000) is True
        assert is_leap(1900) is False
        assert is_leap(2100) is False
        assert is_leap(2400) is True

    def test_ordinary_years(self):
        assert is_leap(2004) is True
        assert is_leap(2024) is True
        assert is_leap(2005) is False
        assert is_leap(2026) is False

    def test_non_positive_years(self):
        assert is_leap(0) is True
        assert is_leap(-4) is True
        assert is_leap(-100) is False


class TestLeapDays:
    def test_known_ranges(self):
        assert leap_days(2000, 2005) == 2
        # 1904, 1908, ..., 1996; 1900 is not a leap year
        assert leap_days(1900, 2000) == 24
        assert leap_days(2000, 2001) == 1
        assert leap_days(2001, 2004) == 0

    def test_empty_range(self):
        assert leap_days(2024, 2024) == 0

    def test_matches_brute_force_count(self):
        for y1, y2 in [(0, 401), (0, 1), (1, 2026), (1582, 1700), (1999, 2101), (2000, 2400)]:
            assert leap_days(y1, y2) == sum(1 for y in range(y1, y2) if is_leap(y))

    def test_every_start_from_year_zero(self):
        for y1 in range(0, 820, 7):
            for y2 in (y1, y1 + 1, y1 + 4, y1 + 100, y1 + 401):
                assert leap_days(y1, y2) == sum(1 for y in range(y1, y2) if is_leap(y))

    def test_years_before_zero(self):
        assert leap_days(-5, 0) == 1
        assert leap_days(-401, -1) == 97
        assert leap_days(-800, 1) == sum(1 for y in range(-800, 1) if is_leap(y))


class TestWeekday:
    def test_reference_dates(self):
        assert weekday(2000, 1, 1) == SATURDAY
        assert weekday(2026, 2, 20) == FRIDAY
        assert weekday(1, 1, 1) == MONDAY

    def test_agrees_with_datetime(self):
        for year in (1, 4, 100, 1582, 1752, 1900, 1999, 2000, 2024, 2026, 9999):
            for month in range(1, 13):
                for day in (1, 15, days_in_month(year, month)):
                    assert weekday(year, month, day) == date(year, month, day).weekday()

    def test_year_zero_is_proleptic(self):
        # Year 0 is a leap year, so 0000-01-01 lies 366 days before a Monday
        assert weekday(0, 1, 1) == SATURDAY

    def test_invalid_month(self):
        with pytest.raises(InvalidMonth):
            weekday(2026, 13, 1)

    @pytest.mark.parametrize("year, month, day", [(2026, 2, 29), (2026, 2, 31), (2026, 4, 31), (2026, 1, 0)])
    def test_invalid_day(self, year, month, day):
        with pytest.raises(InvalidDay) as excinfo:
            weekday(year, month, day)
        assert excinfo.value.day == day

    def test_leap_day_accepted(self):
        assert weekday(2024, 2, 29) == THURSDAY


class TestDaysInMonth:
    def test_table(self):
        assert [days_in_month(2026, m) for m in range(1, 13)] == [
            31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
        ]

    def test_february_in_leap_years(self):
        assert days_in_month(2000, 2) == 29
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2024, 2) == 29

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month):
        with pytest.raises(InvalidMonth) as excinfo:
            days_in_month(2026, month)
        assert excinfo.value.month == month
        assert isinstance(excinfo.value, ValueError)


class TestMonthRange:
    def test_known_months(self):
        assert month_range(2026, 2) == (SUNDAY, 28)
        assert month_range(2000, 2) == (TUESDAY, 29)
        assert month_range(2026, 1) == (THURSDAY, 31)

    def test_invalid_month(self):
        with pytest.raises(InvalidMonth):
            month_range(2026, 0)


class TestMonthCalendar:
    def test_february_2026_monday_first(self):
        assert month_calendar(2026, 2) == [
            [None, None, None, None, None, None, 1],
            [2, 3, 4, 5, 6, 7, 8],
            [9, 10, 11, 12, 13, 14, 15],
            [16, 17, 18, 19, 20, 21, 22],
            [23, 24, 25, 26, 27, 28, None],
        ]

    def test_four_row_month(self):
        # February 2015 starts on a Sunday; with Sunday first it fills 4 rows exactly
        grid = month_calendar(2015, 2, SUNDAY)
        assert len(grid) == 4
        assert grid[0] == [1, 2, 3, 4, 5, 6, 7]
        assert grid[-1] == [22, 23, 24, 25, 26, 27, 28]

    def test_six_row_month(self):
        # March 2026 starts on a Sunday: 6 leading blanks + 31 days
        grid = month_calendar(2026, 3)
        assert len(grid) == 6
        assert grid[5] == [30, 31, None, None, None, None, None]

    def test_first_weekday_changes_shift(self):
        grid = month_calendar(2026, 2, SUNDAY)
        assert grid[0] == [1, 2, 3, 4, 5, 6, 7]
        assert len(grid) == 4

    def test_every_month_holds_each_day_once(self):
        for year in (1900, 2000, 2024, 2026):
            for month in range(1, 13):
                for first in range(7):
                    grid = month_calendar(year, month, first)
                    assert all(len(row) == 7 for row in grid)
                    days = [d for row in grid for d in row if d is not None]
                    assert days == list(range(1, days_in_month(year, month) + 1))
                    start, n = month_range(year, month)
                    shift = (start - first) % 7
                    assert len(grid) == -(-(shift + n) // 7)
                    assert any(d is not None for d in grid[-1])

    def test_invalid_month_propagates(self):
        with pytest.raises(InvalidMonth):
            month_calendar(2026, 13)

    def test_invalid_first_weekday(self):
        with pytest.raises(InvalidWeekday):
            month_calendar(2026, 2, 7)


class TestWeekWeekdays:
    def test_column_order(self):
        assert week_weekdays(MONDAY) == [0, 1, 2, 3, 4, 5, 6]
        assert week_weekdays(SUNDAY) == [6, 0, 1, 2, 3, 4, 5]

    def test_first_weekday_does_not_affect_lengths(self):
        before = [days_in_month(2024, m) for m in range(1, 13)]
        month_calendar(2024, 2, SATURDAY)
        assert [days_in_month(2024, m) for m in range(1, 13)] == before
