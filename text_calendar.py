"""Plain-text month and year calendars."""

from __future__ import annotations

from dataclasses import replace

from calendar_logic import month_calendar, week_weekdays
from calendar_settings import CalendarConfig, get_config

MIN_WIDTH = 2
# Abbreviations are shown with up to this many characters even at minimum width
_ABBR_CHARS = 3
_MONTH_SEP = "   "


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class TextCalendar:
    """Renders month grids as fixed-width text for one configuration."""

    def __init__(self, config: CalendarConfig | None = None) -> None:
        self.config = config if config is not None else get_config()

    def with_config(self, **changes) -> TextCalendar:
        """Return a renderer with some configuration fields replaced."""
        if "locale" in changes:
            config = self.config.with_locale(changes.pop("locale"))
        else:
            config = self.config
        return type(self)(replace(config, **changes))

    @property
    def first_weekday(self) -> int:
        return self.config.first_weekday

    @property
    def locale(self):
        return self.config.locale

    def month_days(self, year: int, month: int) -> list[list[int | None]]:
        return month_calendar(year, month, self.first_weekday)

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------
    def column_width(self, width: int) -> int:
        """Width of one day column for a requested *width*.

        At least MIN_WIDTH, widened to fit the weekday abbreviations
        (each cut to max(width, 3) characters).
        """
        width = max(width, MIN_WIDTH)
        limit = max(width, _ABBR_CHARS)
        longest = max(len(abbr[:limit]) for abbr in self.locale.day_abbrs)
        return max(width, longest)

    def format_weekday(self, weekday: int, colwidth: int) -> str:
        return self.locale.day_abbrs[weekday][:colwidth].rjust(colwidth)

    def format_day(self, day: int | None, colwidth: int) -> str:
        if day is None:
            return " " * colwidth
        return str(day).rjust(colwidth)

    def format_week(self, week: list[int | None], colwidth: int) -> str:
        return " ".join(self.format_day(d, colwidth) for d in week)

    def format_week_header(self, width: int) -> str:
        """Return the weekday abbreviations line, starting at the first weekday."""
        colwidth = self.column_width(width)
        return " ".join(
            self.format_weekday(wd, colwidth) for wd in week_weekdays(self.first_weekday)
        )

    def format_month_title(self, year: int, month: int, colwidth: int,
                           with_year: bool = True) -> str:
        title = self.locale.month_names[month]
        if with_year:
            title = f"{title} {year}"
        return title.center(7 * colwidth + 6)

    # ------------------------------------------------------------------
    # Month and year
    # ------------------------------------------------------------------
    def format_month(self, year: int, month: int, width: int = 2, lines: int = 0) -> str:
        """Return a month's calendar as a multi-line string.

        Every week line is full width, days right-justified, with *lines*
        empty lines after each week.
        """
        weeks = self.month_days(year, month)
        colwidth = self.column_width(width)
        out = [
            self.format_month_title(year, month, colwidth).rstrip(),
            self.format_week_header(width),
        ]
        for week in weeks:
            out.append(self.format_week(week, colwidth))
            out.extend([""] * max(lines, 0))
        return "\n".join(out) + "\n"

    def format_year(self, year: int, width: int = 2, lines: int = 0,
                    months_per_row: int = 3, first_week_only: bool = False) -> str:
        """Return a year's calendar with *months_per_row* months side by side.

        All weeks of every month are shown; shorter months in a row are
        padded with blank weeks. *first_week_only* keeps only the first
        week of each month, the older compact layout.
        """
        months_per_row = _clamp(months_per_row, 1, 12)
        colwidth = self.column_width(width)
        month_width = 7 * colwidth + 6
        row_width = months_per_row * month_width + (months_per_row - 1) * len(_MONTH_SEP)
        blank_week = " " * month_width
        header = self.format_week_header(width)

        out = [str(year).center(row_width).rstrip(), ""]
        for first in range(1, 13, months_per_row):
            months = range(first, min(first + months_per_row, 13))
            grids = [self.month_days(year, m) for m in months]
            if first_week_only:
                grids = [grid[:1] for grid in grids]
            height = max(len(grid) for grid in grids)

            out.append(_MONTH_SEP.join(
                self.format_month_title(year, m, colwidth, with_year=False) for m in months
            ).rstrip())
            out.append(_MONTH_SEP.join(header for _ in months))
            for i in range(height):
                out.append(_MONTH_SEP.join(
                    self.format_week(grid[i], colwidth) if i < len(grid) else blank_week
                    for grid in grids
                ).rstrip())
                out.extend([""] * max(lines, 0))
            out.append("")
        return "\n".join(out) + "\n"

    def print_month(self, year: int, month: int, width: int = 2, lines: int = 0) -> None:
        print(self.format_month(year, month, width, lines), end="")

    def print_year(self, year: int, width: int = 2, lines: int = 0,
                   months_per_row: int = 3, first_week_only: bool = False) -> None:
        print(self.format_year(year, width, lines, months_per_row, first_week_only), end="")


# ------------------------------------------------------------------
# Module-level helpers bound to the process-wide configuration
# ------------------------------------------------------------------
def week_header(width: int = 2) -> str:
    return TextCalendar().format_week_header(width)


def format_month(year: int, month: int, width: int = 2, lines: int = 0) -> str:
    return TextCalendar().format_month(year, month, width, lines)


def format_year(year: int, width: int = 2, lines: int = 0, months_per_row: int = 3,
                first_week_only: bool = False) -> str:
    return TextCalendar().format_year(year, width, lines, months_per_row, first_week_only)


def print_month(year: int, month: int, width: int = 2, lines: int = 0) -> None:
    TextCalendar().print_month(year, month, width, lines)


def print_year(year: int, width: int = 2, lines: int = 0, months_per_row: int = 3,
               first_week_only: bool = False) -> None:
    TextCalendar().print_year(year, width, lines, months_per_row, first_week_only)
