"""Data models for regions, holiday types and resolved holidays."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Self

from feiertage.errors import InvalidArgumentError, UnknownHolidayTypeError, UnknownRegionError

if TYPE_CHECKING:
    from feiertage.translations import TranslationRegistry


class Region(str, Enum):
    """German federal state, city or special query scope."""

    BW = "BW"  # Baden-Württemberg
    BY = "BY"  # Bayern
    BE = "BE"  # Berlin
    BB = "BB"  # Brandenburg
    HB = "HB"  # Bremen
    HE = "HE"  # Hessen
    HH = "HH"  # Hamburg
    MV = "MV"  # Mecklenburg-Vorpommern
    NI = "NI"  # Niedersachsen
    NW = "NW"  # Nordrhein-Westfalen
    RP = "RP"  # Rheinland-Pfalz
    SL = "SL"  # Saarland
    SN = "SN"  # Sachsen
    ST = "ST"  # Sachsen-Anhalt
    SH = "SH"  # Schleswig-Holstein
    TH = "TH"  # Thüringen
    BUND = "BUND"
    AUGSBURG = "AUGSBURG"
    ALL = "ALL"

    @classmethod
    def parse(cls, value: "Region | str") -> Self:
        """Return the region for a member or its code, e.g. ``"by"``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise UnknownRegionError(f"Unknown region: {value!r}")

    @property
    def is_state(self) -> bool:
        """Whether this region is one of the 16 federal states."""
        return self in STATES

    @property
    def is_city(self) -> bool:
        """Whether this region is a city with its own local calendar."""
        return self in CITY_STATES

    @property
    def enclosing_state(self) -> "Region | None":
        """State a city belongs to, or None for non-city regions."""
        return CITY_STATES.get(self)

    def scope(self) -> frozenset["Region"]:
        """
        Regions whose holidays are observed in this region.

        Nationwide holidays count everywhere; a city also observes its
        state's holidays. ``ALL`` has no finite scope; the query engine
        treats it as a wildcard.
        """
        if self is Region.BUND:
            return frozenset({Region.BUND})
        if self.is_state:
            return frozenset({Region.BUND, self})
        if self.is_city:
            return frozenset({Region.BUND, self, self.enclosing_state})
        raise InvalidArgumentError(f"Region {self.value} has no finite scope")


STATES: frozenset[Region] = frozenset(
    region for region in Region if region not in (Region.BUND, Region.AUGSBURG, Region.ALL)
)

CITY_STATES: dict[Region, Region] = {Region.AUGSBURG: Region.BY}


class HolidayType(str, Enum):
    """Named public holiday."""

    NEUJAHRSTAG = "NEUJAHRSTAG"
    HEILIGEDREIKOENIGE = "HEILIGEDREIKOENIGE"
    WELTFRAUENTAG = "WELTFRAUENTAG"
    KARFREITAG = "KARFREITAG"
    OSTERSONNTAG = "OSTERSONNTAG"
    OSTERMONTAG = "OSTERMONTAG"
    TAG_DER_ARBEIT = "TAG_DER_ARBEIT"
    BEFREIUNGSTAG = "BEFREIUNGSTAG"
    CHRISTIHIMMELFAHRT = "CHRISTIHIMMELFAHRT"
    PFINGSTSONNTAG = "PFINGSTSONNTAG"
    PFINGSTMONTAG = "PFINGSTMONTAG"
    FRONLEICHNAM = "FRONLEICHNAM"
    AUGSBURGER_FRIEDENSFEST = "AUGSBURGER_FRIEDENSFEST"
    MARIAHIMMELFAHRT = "MARIAHIMMELFAHRT"
    WELTKINDERTAG = "WELTKINDERTAG"
    DEUTSCHEEINHEIT = "DEUTSCHEEINHEIT"
    REFORMATIONSTAG = "REFORMATIONSTAG"
    ALLERHEILIGEN = "ALLERHEILIGEN"
    BUBETAG = "BUBETAG"
    ERSTERWEIHNACHTSFEIERTAG = "ERSTERWEIHNACHTSFEIERTAG"
    ZWEITERWEIHNACHTSFEIERTAG = "ZWEITERWEIHNACHTSFEIERTAG"

    @classmethod
    def parse(cls, value: "HolidayType | str") -> Self:
        """Return the holiday type for a member or its code."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise UnknownHolidayTypeError(f"Unknown holiday type: {value!r}")


@dataclass(frozen=True)
class Holiday:
    """A holiday resolved to a concrete date."""

    type: HolidayType
    date: date
    regions: frozenset[Region]
    translations: "TranslationRegistry" = field(repr=False, compare=False)

    @property
    def name(self) -> str:
        """Holiday type code, e.g. ``"ERSTERWEIHNACHTSFEIERTAG"``."""
        return self.type.value

    @property
    def date_string(self) -> str:
        """ISO formatted date."""
        return self.date.isoformat()

    @property
    def is_nationwide(self) -> bool:
        """Whether the holiday is observed in every state."""
        return Region.BUND in self.regions

    def translate(self, language: str | None = None) -> str:
        """Localized name, using the registry's active language by default."""
        return self.translations.translate(self.type, language)

    def equals(self, other: date) -> bool:
        """Check if this holiday falls on the given date."""
        return self.date == other
