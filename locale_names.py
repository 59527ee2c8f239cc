"""Display names for weekdays and months."""

from __future__ import annotations

from dataclasses import dataclass, fields

from calendar_errors import InvalidLocale


def _weekday_table(name: str, values) -> tuple[str, ...]:
    table = _as_strings(name, values)
    if len(table) != 7:
        raise InvalidLocale(f"{name} needs 7 entries, got {len(table)}")
    return table


def _month_table(name: str, values) -> tuple[str, ...]:
    table = _as_strings(name, values)
    if len(table) == 12:
        table = ("",) + table
    elif len(table) != 13:
        raise InvalidLocale(
            f"{name} needs 12 entries (or 13 with an unused first entry), got {len(table)}"
        )
    return table


def _as_strings(name: str, values) -> tuple[str, ...]:
    if isinstance(values, str):
        raise InvalidLocale(f"{name} must be a sequence of names, not a string")
    try:
        table = tuple(values)
    except TypeError:
        raise InvalidLocale(f"{name} must be a sequence of names") from None
    if not all(isinstance(v, str) for v in table):
        raise InvalidLocale(f"{name} must only contain strings")
    return table


@dataclass(frozen=True)
class Locale:
    """Weekday names indexed 0 (Monday) to 6, month names indexed 1 to 12.

    Month tables may be given with 12 entries; an empty placeholder is put
    at index 0. Tables of the wrong size raise InvalidLocale.
    """

    day_names: tuple[str, ...]
    day_abbrs: tuple[str, ...]
    month_names: tuple[str, ...]
    month_abbrs: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "day_names", _weekday_table("day_names", self.day_names))
        object.__setattr__(self, "day_abbrs", _weekday_table("day_abbrs", self.day_abbrs))
        object.__setattr__(self, "month_names", _month_table("month_names", self.month_names))
        object.__setattr__(self, "month_abbrs", _month_table("month_abbrs", self.month_abbrs))

    @classmethod
    def from_mapping(cls, data) -> Locale:
        """Build a Locale from a dict with the four table keys."""
        if not isinstance(data, dict):
            raise InvalidLocale(f"locale must be a mapping, not {type(data).__name__}")
        names = [f.name for f in fields(cls)]
        missing = [n for n in names if n not in data]
        if missing:
            raise InvalidLocale(f"locale is missing {', '.join(missing)}")
        return cls(**{n: data[n] for n in names})


ENGLISH = Locale(
    day_names=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    day_abbrs=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    month_names=("January", "February", "March", "April", "May", "June", "July",
                 "August", "September", "October", "November", "December"),
    month_abbrs=("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                 "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
)

GERMAN = Locale(
    day_names=("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"),
    day_abbrs=("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"),
    month_names=("Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
                 "August", "September", "Oktober", "November", "Dezember"),
    month_abbrs=("Jan", "Feb", "Mär", "Apr", "Mai", "Jun",
                 "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"),
)

LOCALES: dict[str, Locale] = {
    "en": ENGLISH,
    "de": GERMAN,
}


def get_locale(code: str) -> Locale:
    """Return the built-in locale for a short code such as "en"."""
    try:
        return LOCALES[code.lower()]
    except (KeyError, AttributeError):
        raise InvalidLocale(
            f"unknown locale {code!r}; choose one of {', '.join(sorted(LOCALES))}"
        ) from None
