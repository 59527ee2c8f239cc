"""Holiday labels keyed by date, plus built-in Swiss and German tables."""

from __future__ import annotations

import logging
from datetime import MAXYEAR, MINYEAR, date, timedelta

from calendar_errors import HolidayYearOutOfRange, InvalidCountry, InvalidDay
from calendar_logic import days_in_month

logger = logging.getLogger(__name__)


def easter_sunday(year: int) -> date:
    """Return Easter Sunday (Anonymous Gregorian algorithm)."""
    golden = year % 19
    century, year_of_century = divmod(year, 100)
    leap_centuries, century_rest = divmod(century, 4)
    f = (century + 8) // 25
    g = (century - f + 1) // 3
    epact = (19 * golden + century - leap_centuries - g + 15) % 30
    i, k = divmod(year_of_century, 4)
    weekday_shift = (32 + 2 * century_rest + 2 * i - epact - k) % 7
    m = (golden + 11 * epact + 22 * weekday_shift) // 451
    month, day = divmod(epact + weekday_shift - 7 * m + 114, 31)
    return date(year, month, day + 1)


# --- date generators --------------------------------------------------------

def _fixed(m: int, d: int):
    return lambda year: date(year, m, d)


def _easter_rel(offset: int):
    return lambda year: easter_sunday(year) + timedelta(days=offset)


# --- built-in tables: (key, name, country, date_fn) -------------------------

HOLIDAYS: list[tuple] = [
    # Switzerland
    ("ch_neujahr",        "Neujahr",        "CH", _fixed(1, 1)),
    ("ch_berchtoldstag",  "Berchtoldstag",  "CH", _fixed(1, 2)),
    ("ch_karfreitag",     "Karfreitag",     "CH", _easter_rel(-2)),
    ("ch_ostermontag",    "Ostermontag",    "CH", _easter_rel(1)),
    ("ch_auffahrt",       "Auffahrt",       "CH", _easter_rel(39)),
    ("ch_pfingstmontag",  "Pfingstmontag",  "CH", _easter_rel(50)),
    ("ch_bundesfeier",    "Bundesfeier",    "CH", _fixed(8, 1)),
    ("ch_weihnachten",    "Weihnachten",    "CH", _fixed(12, 25)),
    ("ch_stephanstag",    "Stephanstag",    "CH", _fixed(12, 26)),
    # Germany
    ("de_neujahr",             "Neujahr",                   "DE", _fixed(1, 1)),
    ("de_karfreitag",          "Karfreitag",                "DE", _easter_rel(-2)),
    ("de_ostermontag",         "Ostermontag",               "DE", _easter_rel(1)),
    ("de_tag_der_arbeit",      "Tag der Arbeit",            "DE", _fixed(5, 1)),
    ("de_christi_himmelfahrt", "Christi Himmelfahrt",       "DE", _easter_rel(39)),
    ("de_pfingstmontag",       "Pfingstmontag",             "DE", _easter_rel(50)),
    ("de_tag_dt_einheit",      "Tag der Deutschen Einheit", "DE", _fixed(10, 3)),
    ("de_weihnachten1",        "1. Weihnachtstag",          "DE", _fixed(12, 25)),
    ("de_weihnachten2",        "2. Weihnachtstag",          "DE", _fixed(12, 26)),
]

COUNTRIES: list[tuple[str, str]] = [
    ("CH", "Switzerland"),
    ("DE", "Germany"),
]


def holidays_by_country(country: str) -> list[tuple[str, str]]:
    """Return [(key, name), ...] for the given country code."""
    return [(h[0], h[1]) for h in HOLIDAYS if h[2] == country]


class HolidayRegistry:
    """Maps (year, month, day) to one or more holiday labels."""

    def __init__(self) -> None:
        self._labels: dict[tuple[int, int, int], list[str]] = {}

    @staticmethod
    def normalize(year: int, month: int, day: int) -> tuple[int, int, int]:
        """Validate a date and return it as a (year, month, day) key."""
        if not 1 <= day <= days_in_month(year, month):
            raise InvalidDay(year, month, day)
        return year, month, day

    def add(self, year: int, month: int, day: int, label: str) -> None:
        labels = self._labels.setdefault(self.normalize(year, month, day), [])
        if label not in labels:
            labels.append(label)

    def add_date(self, when: date, label: str) -> None:
        self.add(when.year, when.month, when.day, label)

    def lookup(self, year: int, month: int, day: int) -> list[str]:
        """Return the labels for a date, or an empty list."""
        return list(self._labels.get(self.normalize(year, month, day), ()))

    def clear(self, year: int | None = None) -> None:
        """Remove every label, or only those of *year*."""
        if year is None:
            self._labels.clear()
            return
        for key in [k for k in self._labels if k[0] == year]:
            del self._labels[key]

    def load_country(self, country: str, year: int) -> int:
        """Register the built-in holidays of *country* for *year*.

        Returns the number of holidays added.
        """
        country = country.upper()
        if country not in dict(COUNTRIES):
            raise InvalidCountry(country)
        if not MINYEAR <= year <= MAXYEAR:
            raise HolidayYearOutOfRange(year)
        count = 0
        for _key, name, code, date_fn in HOLIDAYS:
            if code != country:
                continue
            self.add_date(date_fn(year), name)
            count += 1
        logger.info("Registered %d %s holidays for %d", count, country, year)
        return count

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, key) -> bool:
        return tuple(key) in self._labels
