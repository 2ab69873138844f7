"""German public holidays by state."""

from feiertage.catalog import HolidayRule, all_rules, get_rule
from feiertage.config import Config
from feiertage.easter import compute_easter_sunday
from feiertage.errors import (
    ConfigNotFoundError,
    FeiertageError,
    InvalidArgumentError,
    InvalidLanguageError,
    InvalidYearError,
    UnknownHolidayTypeError,
    UnknownRegionError,
)
from feiertage.holidays import HolidayCalendar
from feiertage.models import Holiday, HolidayType, Region
from feiertage.translations import TranslationRegistry

__all__ = [
    "Config",
    "ConfigNotFoundError",
    "FeiertageError",
    "Holiday",
    "HolidayCalendar",
    "HolidayRule",
    "HolidayType",
    "InvalidArgumentError",
    "InvalidLanguageError",
    "InvalidYearError",
    "Region",
    "TranslationRegistry",
    "UnknownHolidayTypeError",
    "UnknownRegionError",
    "all_rules",
    "compute_easter_sunday",
    "get_rule",
]
