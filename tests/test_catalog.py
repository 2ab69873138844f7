"""Tests for the holiday catalog."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from feiertage.catalog import CATALOG, EasterOffset, FixedDate, WeekdayBefore, all_rules, get_rule
from feiertage.errors import UnknownHolidayTypeError
from feiertage.models import HolidayType, Region


def test_every_holiday_type_has_one_rule():
    """Every holiday type appears exactly once in the catalog."""
    types = [rule.type for rule in all_rules()]
    assert len(types) == len(set(types))
    assert set(types) == set(HolidayType)
    assert set(CATALOG) == set(HolidayType)


def test_easter_offsets():
    """Moveable feasts use the liturgical offsets from Easter Sunday."""
    offsets = {
        HolidayType.KARFREITAG: -2,
        HolidayType.OSTERSONNTAG: 0,
        HolidayType.OSTERMONTAG: 1,
        HolidayType.CHRISTIHIMMELFAHRT: 39,
        HolidayType.PFINGSTSONNTAG: 49,
        HolidayType.PFINGSTMONTAG: 50,
        HolidayType.FRONLEICHNAM: 60,
    }
    for holiday_type, days in offsets.items():
        rule = get_rule(holiday_type)
        assert rule.date_rule == EasterOffset(days)
        assert rule.is_moveable

    moveable = {rule.type for rule in all_rules() if rule.is_moveable}
    assert moveable == set(offsets)


def test_resolve_moveable_feasts_2025():
    """Easter 2025 is April 20."""
    assert get_rule(HolidayType.KARFREITAG).resolve(2025) == date(2025, 4, 18)
    assert get_rule(HolidayType.OSTERMONTAG).resolve(2025) == date(2025, 4, 21)
    assert get_rule(HolidayType.CHRISTIHIMMELFAHRT).resolve(2025) == date(2025, 5, 29)
    assert get_rule(HolidayType.PFINGSTMONTAG).resolve(2025) == date(2025, 6, 9)
    assert get_rule(HolidayType.FRONLEICHNAM).resolve(2025) == date(2025, 6, 19)


def test_moveable_feasts_stay_in_year():
    """No Easter offset crosses a year boundary."""
    for year in range(1583, 3000):
        for rule in all_rules():
            if rule.is_moveable:
                assert rule.resolve(year).year == year


def test_fixed_dates():
    """Fixed holidays resolve to the same calendar day every year."""
    assert get_rule(HolidayType.DEUTSCHEEINHEIT).date_rule == FixedDate(10, 3)
    assert get_rule(HolidayType.NEUJAHRSTAG).resolve(2024) == date(2024, 1, 1)
    assert get_rule(HolidayType.ERSTERWEIHNACHTSFEIERTAG).resolve(2030) == date(2030, 12, 25)


def test_buss_und_bettag():
    """Buß- und Bettag is the Wednesday before November 23."""
    rule = get_rule(HolidayType.BUBETAG)
    assert isinstance(rule.date_rule, WeekdayBefore)
    assert rule.resolve(2024) == date(2024, 11, 20)
    assert rule.resolve(2025) == date(2025, 11, 19)
    # November 22, 2023 is itself a Wednesday
    assert rule.resolve(2023) == date(2023, 11, 22)
    for year in range(2000, 2100):
        resolved = rule.resolve(year)
        assert resolved.weekday() == 2
        assert date(year, 11, 16) <= resolved <= date(year, 11, 22)


def test_regions():
    """Applicable regions match the state legislation."""
    assert get_rule(HolidayType.NEUJAHRSTAG).applicable_regions == {Region.BUND}
    assert get_rule(HolidayType.HEILIGEDREIKOENIGE).applicable_regions == {
        Region.BW,
        Region.BY,
        Region.ST,
    }
    assert get_rule(HolidayType.AUGSBURGER_FRIEDENSFEST).applicable_regions == {
        Region.AUGSBURG
    }
    assert Region.BUND in get_rule(HolidayType.REFORMATIONSTAG).applicable_regions


def test_year_bound_regions():
    """Some holidays only apply from a given year or in single years."""
    weltkindertag = get_rule(HolidayType.WELTKINDERTAG)
    assert weltkindertag.regions_in(2018) == frozenset()
    assert weltkindertag.regions_in(2019) == {Region.TH}

    frauentag = get_rule(HolidayType.WELTFRAUENTAG)
    assert frauentag.regions_in(2020) == {Region.BE}
    assert frauentag.regions_in(2023) == {Region.BE, Region.MV}

    befreiungstag = get_rule(HolidayType.BEFREIUNGSTAG)
    assert befreiungstag.regions_in(2020) == {Region.BE}
    assert befreiungstag.regions_in(2021) == frozenset()
    assert befreiungstag.regions_in(2025) == {Region.BE}

    reformationstag = get_rule(HolidayType.REFORMATIONSTAG)
    assert Region.BUND in reformationstag.regions_in(2017)
    assert Region.NI not in reformationstag.regions_in(2016)
    assert Region.NI in reformationstag.regions_in(2018)
    assert Region.BUND not in reformationstag.regions_in(2018)


def test_get_rule_accepts_codes():
    """Rules can be looked up by string code."""
    assert get_rule("CHRISTIHIMMELFAHRT").type == HolidayType.CHRISTIHIMMELFAHRT
    assert get_rule("fronleichnam").type == HolidayType.FRONLEICHNAM


def test_get_rule_unknown_type():
    """Unknown holiday types are rejected."""
    with pytest.raises(UnknownHolidayTypeError):
        get_rule("HALLOWEEN")


def test_catalog_is_read_only():
    """The catalog cannot be mutated."""
    with pytest.raises(TypeError):
        CATALOG[HolidayType.NEUJAHRSTAG] = None
    with pytest.raises(FrozenInstanceError):
        get_rule(HolidayType.NEUJAHRSTAG).date_rule = FixedDate(1, 2)
