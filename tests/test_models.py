from __future__ import annotations

import dataclasses

import pytest

from luach.models import (
    GregorianDate,
    HebrewDate,
    MoladMoment,
    Weekday,
    YearCharacter,
    YearDescriptor,
    YearKind,
)


def test_weekday_traditional_numbering() -> None:
    assert Weekday.SUNDAY.number == 1
    assert Weekday.FRIDAY.number == 6
    assert Weekday.SHABBAT.number == 7


def test_year_descriptor_lengths() -> None:
    assert YearDescriptor(False, YearKind.DEFICIENT).length == 353
    assert YearDescriptor(True, YearKind.COMPLETE).length == 385
    assert YearDescriptor(False, YearKind.REGULAR).heshvan_kislev == 59


def test_weekday_of_julian_day() -> None:
    assert Weekday.of(2451545) is Weekday.SHABBAT  # 1 Jan 2000
    assert Weekday.of(347998) is Weekday.MONDAY
    for day in range(2451545, 2451552):
        assert MoladMoment(day=day, parts=0).weekday is Weekday.of(day)


def test_molad_moment_time_of_day() -> None:
    moment = MoladMoment(day=2450340, parts=9924)
    assert (moment.hours, moment.remainder_parts) == (9, 204)
    assert moment.weekday is Weekday.FRIDAY


def test_dates_are_frozen() -> None:
    date = HebrewDate(1, 1, 5757)
    with pytest.raises(dataclasses.FrozenInstanceError):
        date.day = 2  # type: ignore[misc]
    assert GregorianDate(1, 1, 2000).astuple() == (1, 1, 2000)


def test_year_character_forms() -> None:
    character = YearCharacter(
        rosh_hashanah=Weekday.SHABBAT,
        kind=YearKind.COMPLETE,
        pesach=Weekday.THURSDAY,
        leap=True,
    )
    assert character.code == "725"
    assert character.letters == "ZShH"
