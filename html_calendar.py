"""HTML table calendars."""

from __future__ import annotations

from dataclasses import replace
from html import escape

from calendar_logic import month_calendar, week_weekdays
from calendar_settings import CalendarConfig, get_config
from holiday_registry import HolidayRegistry


class HTMLCalendar:
    """Renders months and years as nested HTML tables."""

    # CSS classes for the weekday cells, indexed 0 (Monday) to 6
    cssclasses = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
    cssclass_noday = "noday"
    cssclass_holiday = "holiday"
    cssclass_month = "month"
    cssclass_year = "year"

    def __init__(self, config: CalendarConfig | None = None,
                 holidays: HolidayRegistry | None = None) -> None:
        self.config = config if config is not None else get_config()
        self.holidays = holidays

    def with_config(self, **changes) -> HTMLCalendar:
        """Return a renderer with some configuration fields replaced."""
        if "locale" in changes:
            config = self.config.with_locale(changes.pop("locale"))
        else:
            config = self.config
        return type(self)(replace(config, **changes), holidays=self.holidays)

    @property
    def first_weekday(self) -> int:
        return self.config.first_weekday

    def format_day(self, year: int, month: int, day: int | None, weekday: int) -> str:
        """Return a day as a table cell."""
        if day is None:
            return f'<td class="{self.cssclass_noday}">&nbsp;</td>'
        labels = self.holidays.lookup(year, month, day) if self.holidays else []
        if labels:
            title = escape("; ".join(labels))
            return (f'<td class="{self.cssclasses[weekday]} {self.cssclass_holiday}" '
                    f'title="{title}">{day}</td>')
        return f'<td class="{self.cssclasses[weekday]}">{day}</td>'

    def format_week(self, year: int, month: int, week: list[int | None]) -> str:
        cells = "".join(
            self.format_day(year, month, day, wd)
            for day, wd in zip(week, week_weekdays(self.first_weekday))
        )
        return f"<tr>{cells}</tr>"

    def format_weekday(self, weekday: int) -> str:
        abbr = escape(self.config.locale.day_abbrs[weekday])
        return f'<th class="{self.cssclasses[weekday]}">{abbr}</th>'

    def format_week_header(self) -> str:
        cells = "".join(self.format_weekday(wd) for wd in week_weekdays(self.first_weekday))
        return f"<tr>{cells}</tr>"

    def format_month_name(self, year: int, month: int, with_year: bool = True) -> str:
        title = self.config.locale.month_names[month]
        if with_year:
            title = f"{title} {year}"
        return f'<tr><th colspan="7" class="{self.cssclass_month}">{escape(title)}</th></tr>'

    def format_month(self, year: int, month: int, with_year: bool = True) -> str:
        """Return a month as a table."""
        weeks = month_calendar(year, month, self.first_weekday)
        v = [
            f'<table border="0" cellpadding="0" cellspacing="0" class="{self.cssclass_month}">',
            self.format_month_name(year, month, with_year),
            self.format_week_header(),
        ]
        v.extend(self.format_week(year, month, week) for week in weeks)
        v.append("</table>")
        return "\n".join(v)

    def format_year(self, year: int, months_per_row: int = 3) -> str:
        """Return a year as a table of month tables, *months_per_row* wide."""
        months_per_row = max(1, min(12, months_per_row))
        v = [
            f'<table border="0" cellpadding="0" cellspacing="0" class="{self.cssclass_year}">',
            f'<tr><th colspan="{months_per_row * 7}" class="{self.cssclass_year}">{year}</th></tr>',
        ]
        for first in range(1, 13, months_per_row):
            cells = "".join(
                f'<td valign="top">{self.format_month(year, m, with_year=False)}</td>'
                for m in range(first, min(first + months_per_row, 13))
            )
            v.append(f"<tr>{cells}</tr>")
        v.append("</table>")
        return "\n".join(v)
