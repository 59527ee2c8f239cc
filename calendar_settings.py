"""Calendar configuration snapshots and JSON-based settings loading."""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass, replace

from calendar_errors import InvalidLocale
from calendar_logic import MONDAY, validate_weekday
from locale_names import ENGLISH, Locale, get_locale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarConfig:
    """Immutable settings every renderer reads: week start and name tables."""

    first_weekday: int = MONDAY
    locale: Locale = ENGLISH

    def __post_init__(self) -> None:
        validate_weekday(self.first_weekday)
        if not isinstance(self.locale, Locale):
            raise InvalidLocale(f"expected a Locale, got {type(self.locale).__name__}")

    def with_first_weekday(self, first_weekday: int) -> CalendarConfig:
        return replace(self, first_weekday=first_weekday)

    def with_locale(self, locale) -> CalendarConfig:
        return replace(self, locale=_coerce_locale(locale))


def _coerce_locale(locale) -> Locale:
    if isinstance(locale, Locale):
        return locale
    if isinstance(locale, str):
        return get_locale(locale)
    return Locale.from_mapping(locale)


# ------------------------------------------------------------------
# Process-wide default, swapped as a whole snapshot
# ------------------------------------------------------------------
_lock = threading.Lock()
_active = CalendarConfig()


def get_config() -> CalendarConfig:
    """Return the current process-wide configuration snapshot."""
    return _active


def set_config(config: CalendarConfig) -> None:
    global _active
    if not isinstance(config, CalendarConfig):
        raise TypeError(f"expected a CalendarConfig, got {type(config).__name__}")
    with _lock:
        _active = config
    logger.debug("Active calendar config: first_weekday=%d", config.first_weekday)


def reset_config() -> None:
    """Restore Monday as first weekday and the English names."""
    set_config(CalendarConfig())


def first_weekday() -> int:
    return _active.first_weekday


def set_first_weekday(weekday: int) -> None:
    """Change the week start; raises InvalidWeekday for values outside 0–6."""
    global _active
    with _lock:
        _active = _active.with_first_weekday(weekday)
    logger.debug("First weekday set to %d", weekday)


def set_locale(locale) -> None:
    """Replace the active name tables.

    Accepts a Locale, a built-in locale code or a mapping of the four name
    tables. An incomplete table raises InvalidLocale and leaves the active
    locale untouched.
    """
    global _active
    new_locale = _coerce_locale(locale)
    with _lock:
        _active = _active.with_locale(new_locale)
    logger.info("Active locale replaced (first month: %s)", new_locale.month_names[1])


# ------------------------------------------------------------------
# Settings file
# ------------------------------------------------------------------
_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".gridcal-settings.json")

_DEFAULTS = {
    "first_weekday": MONDAY,
    "locale": "en",
    "width": 2,
    "lines": 0,
    "months_per_row": 3,
    "holidays": [],
}


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or mistyped keys."""
    path = path or _SETTINGS_PATH
    settings = dict(_DEFAULTS)
    settings["holidays"] = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", path)
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", path)
        return settings
    for key in ("first_weekday", "width", "lines", "months_per_row"):
        value = stored.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            settings[key] = value
    if isinstance(stored.get("locale"), (str, dict)):
        settings["locale"] = stored["locale"]
    if isinstance(stored.get("holidays"), list):
        settings["holidays"] = [k for k in stored["holidays"] if isinstance(k, str)]
    logger.info("Loaded settings from %s", path)
    return settings


def config_from_settings(settings: dict) -> CalendarConfig:
    """Build a configuration snapshot from a loaded settings dict.

    Raises InvalidWeekday or InvalidLocale for bad values.
    """
    return CalendarConfig(
        first_weekday=settings.get("first_weekday", MONDAY),
        locale=_coerce_locale(settings.get("locale", ENGLISH)),
    )
