"""Holiday name translations."""

import logging
import threading
from collections.abc import Mapping

from feiertage.errors import InvalidLanguageError
from feiertage.models import HolidayType

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "de"

GERMAN_NAMES: Mapping[HolidayType, str] = {
    HolidayType.NEUJAHRSTAG: "Neujahrstag",
    HolidayType.HEILIGEDREIKOENIGE: "Heilige Drei Könige",
    HolidayType.WELTFRAUENTAG: "Internationaler Frauentag",
    HolidayType.KARFREITAG: "Karfreitag",
    HolidayType.OSTERSONNTAG: "Ostersonntag",
    HolidayType.OSTERMONTAG: "Ostermontag",
    HolidayType.TAG_DER_ARBEIT: "Tag der Arbeit",
    HolidayType.BEFREIUNGSTAG: "Tag der Befreiung",
    HolidayType.CHRISTIHIMMELFAHRT: "Christi Himmelfahrt",
    HolidayType.PFINGSTSONNTAG: "Pfingstsonntag",
    HolidayType.PFINGSTMONTAG: "Pfingstmontag",
    HolidayType.FRONLEICHNAM: "Fronleichnam",
    HolidayType.AUGSBURGER_FRIEDENSFEST: "Augsburger Friedensfest",
    HolidayType.MARIAHIMMELFAHRT: "Mariä Himmelfahrt",
    HolidayType.WELTKINDERTAG: "Weltkindertag",
    HolidayType.DEUTSCHEEINHEIT: "Tag der Deutschen Einheit",
    HolidayType.REFORMATIONSTAG: "Reformationstag",
    HolidayType.ALLERHEILIGEN: "Allerheiligen",
    HolidayType.BUBETAG: "Buß- und Bettag",
    HolidayType.ERSTERWEIHNACHTSFEIERTAG: "1. Weihnachtstag",
    HolidayType.ZWEITERWEIHNACHTSFEIERTAG: "2. Weihnachtstag",
}

TranslationTable = Mapping[HolidayType | str, str]


def _check_language(language: str) -> str:
    if not isinstance(language, str) or not language.strip():
        raise InvalidLanguageError(f"Invalid language code: {language!r}")
    return language.strip()


class TranslationRegistry:
    """
    Language tables for holiday names plus the active language.

    Starts with the German base table. Entries are only ever added or
    overwritten. Lookups fall back from the requested language to German,
    so translating a known holiday type never fails.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self._lock = threading.RLock()
        self._tables: dict[str, dict[HolidayType, str]] = {
            DEFAULT_LANGUAGE: dict(GERMAN_NAMES),
        }
        self._language = _check_language(language)

    def add_translation(self, language: str, table: TranslationTable) -> None:
        """Merge names into the table for a language, creating it if absent."""
        language = _check_language(language)
        entries = {HolidayType.parse(key): str(name) for key, name in table.items()}
        with self._lock:
            self._tables.setdefault(language, {}).update(entries)
        logger.debug("Added %d holiday names for language %r", len(entries), language)

    def set_language(self, language: str) -> None:
        """Set the language used when no explicit code is given."""
        language = _check_language(language)
        with self._lock:
            self._language = language
        logger.debug("Holiday language set to %r", language)

    def get_language(self) -> str:
        """Get the currently active language."""
        with self._lock:
            return self._language

    def languages(self) -> list[str]:
        """Registered language codes."""
        with self._lock:
            return sorted(self._tables)

    def translate(self, holiday_type: HolidayType | str, language: str | None = None) -> str:
        """Name of a holiday in a language, falling back to German."""
        holiday_type = HolidayType.parse(holiday_type)
        with self._lock:
            code = (language or "").strip() or self._language
            table = self._tables.get(code, {})
            if holiday_type in table:
                return table[holiday_type]
            return self._tables[DEFAULT_LANGUAGE][holiday_type]

    def table(self, language: str) -> dict[HolidayType, str]:
        """Copy of the names registered for a language."""
        with self._lock:
            return dict(self._tables.get(language, {}))
