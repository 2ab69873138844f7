"""Holiday catalog: date rules and regional applicability for every holiday."""

from dataclasses import dataclass
from datetime import date, timedelta
from types import MappingProxyType

from feiertage.easter import check_year, compute_easter_sunday
from feiertage.models import HolidayType, Region

WEDNESDAY = 2


@dataclass(frozen=True)
class FixedDate:
    """Same calendar day every year."""

    month: int
    day: int

    def resolve(self, year: int) -> date:
        return date(year, self.month, self.day)


@dataclass(frozen=True)
class EasterOffset:
    """Signed number of days from Easter Sunday."""

    days: int

    def resolve(self, year: int) -> date:
        return compute_easter_sunday(year) + timedelta(days=self.days)


@dataclass(frozen=True)
class WeekdayBefore:
    """Last given weekday strictly before a calendar day."""

    month: int
    day: int
    weekday: int  # Monday == 0

    def resolve(self, year: int) -> date:
        anchor = date(year, self.month, self.day) - timedelta(days=1)
        return anchor - timedelta(days=(anchor.weekday() - self.weekday) % 7)


DateRule = FixedDate | EasterOffset | WeekdayBefore


@dataclass(frozen=True)
class Observance:
    """Regions observing a holiday, optionally bounded to a span of years."""

    regions: frozenset[Region]
    first_year: int | None = None
    last_year: int | None = None

    def active_in(self, year: int) -> bool:
        if self.first_year is not None and year < self.first_year:
            return False
        return self.last_year is None or year <= self.last_year


@dataclass(frozen=True)
class HolidayRule:
    """Catalog entry for one holiday type."""

    type: HolidayType
    date_rule: DateRule
    observances: tuple[Observance, ...]

    @property
    def applicable_regions(self) -> frozenset[Region]:
        """Every region that observes this holiday in any year."""
        return frozenset().union(*(observance.regions for observance in self.observances))

    @property
    def is_moveable(self) -> bool:
        """Whether the date depends on Easter."""
        return isinstance(self.date_rule, EasterOffset)

    def regions_in(self, year: int) -> frozenset[Region]:
        """Regions observing this holiday in the given year."""
        return frozenset().union(
            *(
                observance.regions
                for observance in self.observances
                if observance.active_in(year)
            )
        )

    def resolve(self, year: int) -> date:
        """Concrete date of this holiday in the given year."""
        return self.date_rule.resolve(check_year(year))


def _regions(*regions: Region) -> tuple[Observance, ...]:
    return (Observance(frozenset(regions)),)


NATIONWIDE = _regions(Region.BUND)

_RULES = (
    HolidayRule(HolidayType.NEUJAHRSTAG, FixedDate(1, 1), NATIONWIDE),
    HolidayRule(
        HolidayType.HEILIGEDREIKOENIGE,
        FixedDate(1, 6),
        _regions(Region.BW, Region.BY, Region.ST),
    ),
    HolidayRule(
        HolidayType.WELTFRAUENTAG,
        FixedDate(3, 8),
        (
            Observance(frozenset({Region.BE}), first_year=2019),
            Observance(frozenset({Region.MV}), first_year=2023),
        ),
    ),
    HolidayRule(HolidayType.KARFREITAG, EasterOffset(-2), NATIONWIDE),
    HolidayRule(HolidayType.OSTERSONNTAG, EasterOffset(0), _regions(Region.BB)),
    HolidayRule(HolidayType.OSTERMONTAG, EasterOffset(1), NATIONWIDE),
    HolidayRule(HolidayType.TAG_DER_ARBEIT, FixedDate(5, 1), NATIONWIDE),
    HolidayRule(
        HolidayType.BEFREIUNGSTAG,
        FixedDate(5, 8),
        (
            # 75th and 80th anniversary of the end of the war
            Observance(frozenset({Region.BE}), first_year=2020, last_year=2020),
            Observance(frozenset({Region.BE}), first_year=2025, last_year=2025),
        ),
    ),
    HolidayRule(HolidayType.CHRISTIHIMMELFAHRT, EasterOffset(39), NATIONWIDE),
    HolidayRule(HolidayType.PFINGSTSONNTAG, EasterOffset(49), _regions(Region.BB)),
    HolidayRule(HolidayType.PFINGSTMONTAG, EasterOffset(50), NATIONWIDE),
    HolidayRule(
        HolidayType.FRONLEICHNAM,
        EasterOffset(60),
        _regions(Region.BW, Region.BY, Region.HE, Region.NW, Region.RP, Region.SL),
    ),
    HolidayRule(
        HolidayType.AUGSBURGER_FRIEDENSFEST, FixedDate(8, 8), _regions(Region.AUGSBURG)
    ),
    HolidayRule(HolidayType.MARIAHIMMELFAHRT, FixedDate(8, 15), _regions(Region.BY, Region.SL)),
    HolidayRule(
        HolidayType.WELTKINDERTAG,
        FixedDate(9, 20),
        (Observance(frozenset({Region.TH}), first_year=2019),),
    ),
    HolidayRule(HolidayType.DEUTSCHEEINHEIT, FixedDate(10, 3), NATIONWIDE),
    HolidayRule(
        HolidayType.REFORMATIONSTAG,
        FixedDate(10, 31),
        (
            Observance(frozenset({Region.BB, Region.MV, Region.SN, Region.ST, Region.TH})),
            Observance(frozenset({Region.HB, Region.HH, Region.NI, Region.SH}), first_year=2018),
            # 500th anniversary of the Reformation
            Observance(frozenset({Region.BUND}), first_year=2017, last_year=2017),
        ),
    ),
    HolidayRule(
        HolidayType.ALLERHEILIGEN,
        FixedDate(11, 1),
        _regions(Region.BW, Region.BY, Region.NW, Region.RP, Region.SL),
    ),
    HolidayRule(HolidayType.BUBETAG, WeekdayBefore(11, 23, WEDNESDAY), _regions(Region.SN)),
    HolidayRule(HolidayType.ERSTERWEIHNACHTSFEIERTAG, FixedDate(12, 25), NATIONWIDE),
    HolidayRule(HolidayType.ZWEITERWEIHNACHTSFEIERTAG, FixedDate(12, 26), NATIONWIDE),
)

CATALOG: MappingProxyType[HolidayType, HolidayRule] = MappingProxyType(
    {rule.type: rule for rule in _RULES}
)

# Catalog order, used to break ties between holidays on the same date
RULE_ORDER: MappingProxyType[HolidayType, int] = MappingProxyType(
    {rule.type: index for index, rule in enumerate(_RULES)}
)


def get_rule(holiday_type: HolidayType | str) -> HolidayRule:
    """Get the rule for a holiday type."""
    return CATALOG[HolidayType.parse(holiday_type)]


def all_rules() -> tuple[HolidayRule, ...]:
    """All rules in catalog order."""
    return _RULES
