"""Pure calendar calculations - no rendering or configuration state."""

from calendar_errors import InvalidDay, InvalidMonth, InvalidWeekday

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

# Index 0 unused so months can be looked up directly
_DAYS_IN_MONTH = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

_DAYS_BEFORE_MONTH = [0]
for _days in _DAYS_IN_MONTH[1:]:
    _DAYS_BEFORE_MONTH.append(_DAYS_BEFORE_MONTH[-1] + _days)
del _days


def is_leap(year: int) -> bool:
    """Return True for leap years in the proleptic Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _leaps_up_to(year: int) -> int:
    """Leap years in [1, year] (negative when counting back before year 1)."""
    # Floor division keeps year 0 and earlier years proleptic
    return year // 4 - year // 100 + year // 400


def leap_days(y1: int, y2: int) -> int:
    """Return the number of leap years in the range [y1, y2)."""
    return _leaps_up_to(y2 - 1) - _leaps_up_to(y1 - 1)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidMonth(month)


def validate_weekday(value) -> int:
    """Return *value* if it is a weekday number 0–6, else raise InvalidWeekday."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        raise InvalidWeekday(value)
    return value


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    _check_month(month)
    if month == 2 and is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month]


def _ordinal(year: int, month: int, day: int) -> int:
    """Days since 0000-12-31, so that 0001-01-01 is day 1.

    Floor division keeps the count proleptic for years before 1.
    """
    y = year - 1
    before_year = y * 365 + y // 4 - y // 100 + y // 400
    before_month = _DAYS_BEFORE_MONTH[month - 1] + (month > 2 and is_leap(year))
    return before_year + before_month + day


def weekday(year: int, month: int, day: int) -> int:
    """Return the weekday (0 = Monday … 6 = Sunday) of the given date."""
    if not 1 <= day <= days_in_month(year, month):
        raise InvalidDay(year, month, day)
    # Day 1 (0001-01-01) was a Monday
    return (_ordinal(year, month, day) + 6) % 7


def month_range(year: int, month: int) -> tuple[int, int]:
    """Return (weekday of the 1st, number of days) for the given month."""
    _check_month(month)
    return weekday(year, month, 1), days_in_month(year, month)


def week_weekdays(first_weekday: int = MONDAY) -> list[int]:
    """Return the weekday shown in each of the 7 grid columns."""
    validate_weekday(first_weekday)
    return [(first_weekday + i) % 7 for i in range(7)]


def month_calendar(
    year: int, month: int, first_weekday: int = MONDAY,
) -> list[list[int | None]]:
    """Return the week grid for the given month.

    Each row holds 7 cells; a cell is a day number or None for the padding
    before the 1st and after the last day. Only as many rows as the month
    needs are returned (4–6).
    """
    validate_weekday(first_weekday)
    start, days = month_range(year, month)
    shift = (start - first_weekday) % 7

    cells: list[int | None] = [None] * shift
    cells.extend(range(1, days + 1))
    # Pad the last row
    cells.extend([None] * (-len(cells) % 7))
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]
