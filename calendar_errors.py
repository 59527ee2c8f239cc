"""Error kinds raised by the calendar functions."""


class CalendarError(ValueError):
    """Base class for every calendar error."""


class InvalidMonth(CalendarError):
    def __init__(self, month) -> None:
        super().__init__(month)
        self.month = month

    def __str__(self) -> str:
        return f"bad month number {self.month!r}; must be 1-12"


class InvalidDay(CalendarError):
    def __init__(self, year, month, day) -> None:
        super().__init__(year, month, day)
        self.year = year
        self.month = month
        self.day = day

    def __str__(self) -> str:
        return f"bad day {self.day!r} for {self.year}-{self.month:02d}"


class InvalidWeekday(CalendarError):
    def __init__(self, weekday) -> None:
        super().__init__(weekday)
        self.weekday = weekday

    def __str__(self) -> str:
        return f"bad weekday number {self.weekday!r}; must be 0 (Monday) to 6 (Sunday)"


class InvalidLocale(CalendarError):
    """A name table that does not hold 7 weekdays and 12 months."""


class InvalidCountry(CalendarError):
    def __init__(self, country) -> None:
        super().__init__(country)
        self.country = country

    def __str__(self) -> str:
        return f"no holiday table for country {self.country!r}"


class HolidayYearOutOfRange(CalendarError):
    """Holiday tables only cover the years datetime.date supports."""

    def __init__(self, year) -> None:
        super().__init__(year)
        self.year = year

    def __str__(self) -> str:
        return f"no holiday dates for year {self.year}; supported years are 1-9999"
