"""Entry point - prints a month or year calendar as text or HTML."""

import argparse
import logging
import sys
from datetime import date

from calendar_errors import CalendarError
from calendar_settings import config_from_settings, load_settings, set_config
from holiday_registry import HolidayRegistry
from html_calendar import HTMLCalendar
from locale_names import ENGLISH
from text_calendar import TextCalendar

logger = logging.getLogger(__name__)


def parse_weekday(value: str) -> int:
    """Accept a weekday number (0 = Monday) or an English day name."""
    if value.isdigit():
        return int(value)
    for wd, name in enumerate(ENGLISH.day_names):
        if name.lower().startswith(value.lower()) and len(value) >= 2:
            return wd
    raise argparse.ArgumentTypeError(f"unknown weekday {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridcal", description="Print a month or year calendar.",
    )
    parser.add_argument("year", nargs="?", type=int, help="year (default: this year)")
    parser.add_argument("month", nargs="?", type=int, help="month 1-12")
    parser.add_argument("--html", action="store_true", help="emit an HTML table")
    parser.add_argument("-w", "--width", type=int, help="width of a day column")
    parser.add_argument("-l", "--lines", type=int, help="blank lines after each week")
    parser.add_argument("-m", "--months", type=int, dest="months_per_row",
                        help="months per row in the year view")
    parser.add_argument("--first-weekday", type=parse_weekday,
                        help="day the week starts on (name or 0-6, 0 = Monday)")
    parser.add_argument("--locale", help="name table: en or de")
    parser.add_argument("--holidays", nargs="+", metavar="CC", default=None,
                        help="mark holidays of these countries (HTML only)")
    parser.add_argument("--settings", help="path of a JSON settings file")
    parser.add_argument("--first-week-only", action="store_true",
                        help="show only the first week of each month in the year view")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(args: argparse.Namespace) -> str:
    """Render the calendar described by parsed arguments."""
    settings = load_settings(args.settings)
    if args.first_weekday is not None:
        settings["first_weekday"] = args.first_weekday
    if args.locale is not None:
        settings["locale"] = args.locale
    config = config_from_settings(settings)
    set_config(config)

    width = args.width if args.width is not None else settings["width"]
    lines = args.lines if args.lines is not None else settings["lines"]
    per_row = args.months_per_row if args.months_per_row is not None else settings["months_per_row"]

    today = date.today()
    if args.year is None:
        year, month = today.year, today.month
    else:
        year, month = args.year, args.month

    if args.html:
        registry = HolidayRegistry()
        for country in args.holidays if args.holidays is not None else settings["holidays"]:
            registry.load_country(country, year)
        cal = HTMLCalendar(config, holidays=registry)
        if month is None:
            return cal.format_year(year, per_row) + "\n"
        return cal.format_month(year, month) + "\n"

    text = TextCalendar(config)
    if month is None:
        return text.format_year(year, width, lines, per_row, args.first_week_only)
    return text.format_month(year, month, width, lines)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )
    try:
        output = run(args)
    except CalendarError as exc:
        logger.error("%s", exc)
        return 2
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
