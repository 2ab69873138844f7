"""German public holiday queries."""

from datetime import date, datetime
from functools import lru_cache
from typing import TYPE_CHECKING, Self

from feiertage.catalog import RULE_ORDER, all_rules, get_rule
from feiertage.easter import check_year
from feiertage.errors import InvalidArgumentError
from feiertage.models import Holiday, HolidayType, Region
from feiertage.translations import TranslationRegistry, TranslationTable

if TYPE_CHECKING:
    from feiertage.config import Config

SUNDAY = 6

_Entry = tuple[HolidayType, date, frozenset[Region]]


@lru_cache(maxsize=64)
def _resolve_year(year: int) -> tuple[_Entry, ...]:
    """Every holiday observed somewhere in a year, by date then catalog order."""
    entries = []
    for rule in all_rules():
        regions = rule.regions_in(year)
        if regions:
            entries.append((rule.type, rule.resolve(year), regions))
    entries.sort(key=lambda entry: (entry[1], RULE_ORDER[entry[0]]))
    return tuple(entries)


def _observed_in(regions: frozenset[Region], region: Region) -> bool:
    if region is Region.ALL:
        return bool(regions)
    return not regions.isdisjoint(region.scope())


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidArgumentError(f"Expected a date, got {value!r}")


class HolidayCalendar:
    """
    Holiday lookups for German states.

    Holds the translation registry that names returned holidays, so
    separate calendars can use separate languages.

    Usage:
        calendar = HolidayCalendar()
        calendar.is_holiday(date(2025, 12, 25), Region.BUND)  # True
    """

    def __init__(self, translations: TranslationRegistry | None = None) -> None:
        self.translations = translations or TranslationRegistry()

    @classmethod
    def from_config(cls, config: "Config") -> Self:
        """Create a calendar whose translations come from configuration."""
        registry = TranslationRegistry(config.language)
        for language, table in config.translations.items():
            registry.add_translation(language, table)
        return cls(registry)

    def _entries(self, target_date: date, region: Region) -> list[_Entry]:
        check_year(target_date.year)
        return [
            entry
            for entry in _resolve_year(target_date.year)
            if entry[1] == target_date and _observed_in(entry[2], region)
        ]

    def _holiday(self, entry: _Entry) -> Holiday:
        holiday_type, holiday_date, regions = entry
        return Holiday(
            type=holiday_type,
            date=holiday_date,
            regions=regions,
            translations=self.translations,
        )

    def is_holiday(self, target_date: date, region: Region | str) -> bool:
        """Check if a date is a public holiday in a region."""
        region = Region.parse(region)
        return bool(self._entries(_as_date(target_date), region))

    def is_specific_holiday(
        self,
        target_date: date,
        holiday_type: HolidayType | str,
        region: Region | str = Region.ALL,
    ) -> bool:
        """Check if a date is the given holiday and it is observed in a region."""
        rule = get_rule(holiday_type)
        region = Region.parse(region)
        target_date = _as_date(target_date)
        if rule.resolve(target_date.year) != target_date:
            return False
        return _observed_in(rule.regions_in(target_date.year), region)

    def is_sun_or_holiday(self, target_date: date, region: Region | str) -> bool:
        """Check if a date is a Sunday or a public holiday in a region."""
        region = Region.parse(region)
        target_date = _as_date(target_date)
        return target_date.weekday() == SUNDAY or self.is_holiday(target_date, region)

    def is_working_day(self, target_date: date, region: Region | str) -> bool:
        """
        Check if a date is a working day.

        A working day is:
        - Not a weekend (Saturday/Sunday)
        - Not a public holiday in the region
        """
        region = Region.parse(region)
        target_date = _as_date(target_date)
        # 5 = Saturday, 6 = Sunday
        if target_date.weekday() in (5, 6):
            return False
        return not self.is_holiday(target_date, region)

    def get_holiday_by_date(
        self, target_date: date, region: Region | str = Region.ALL
    ) -> Holiday | None:
        """
        Get the holiday on a date, or None.

        Several holidays can share a date (Ascension fell on May 1 in 2008,
        and ``ALL`` matches every state). Nationwide holidays win, then
        catalog order.
        """
        region = Region.parse(region)
        entries = self._entries(_as_date(target_date), region)
        if not entries:
            return None
        entries.sort(key=lambda entry: Region.BUND not in entry[2])
        return self._holiday(entries[0])

    def get_holidays(self, year: int, region: Region | str) -> list[Holiday]:
        """Get all holidays of a year observed in a region, sorted by date."""
        region = Region.parse(region)
        check_year(year)
        return [
            self._holiday(entry)
            for entry in _resolve_year(year)
            if _observed_in(entry[2], region)
        ]

    def get_holidays_of_year(self, target_date: date, region: Region | str) -> list[Holiday]:
        """Get all holidays of the year a date falls in."""
        return self.get_holidays(_as_date(target_date).year, region)

    def add_translation(self, language: str, table: TranslationTable) -> None:
        """Add holiday names for a language."""
        self.translations.add_translation(language, table)

    def set_language(self, language: str) -> None:
        """Set the default language for holiday names."""
        self.translations.set_language(language)

    def get_language(self) -> str:
        """Get the default language for holiday names."""
        return self.translations.get_language()

    def translate(self, holiday_type: HolidayType | str, language: str | None = None) -> str:
        """Name of a holiday type in a language."""
        return self.translations.translate(holiday_type, language)
