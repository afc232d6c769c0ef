# tests/test_perennial.py
"""Cotsworth, Positivist, Symmetry, French Revolutionary and the wandering years."""

import random

import pytest

from calconv.calendars.coptic import Coptic
from calconv.calendars.cotsworth import Cotsworth, CotsworthComplementaryDay
from calconv.calendars.egyptian import Armenian, Egyptian, EgyptianEpagomenae
from calconv.calendars.french_rev import DecadeDay, FrenchRevArith, FrenchRevArithAdjusted, Sansculottide
from calconv.calendars.positivist import Positivist, PositivistComplementaryDay
from calconv.calendars.symmetry import (
    EQUINOX,
    LeapRule,
    Symmetry010,
    Symmetry010Solstice,
    Symmetry454,
    Symmetry454Solstice,
)
from calconv.core.errors import DayOutOfRange, MonthOutOfRange
from calconv.cycles.weekday import Weekday, weekday_of


def test_cotsworth_complementary_days():
    year_day = Cotsworth(2024, 13, 29)
    leap_day = Cotsworth(2024, 6, 29)
    assert year_day.complementary() is CotsworthComplementaryDay.YEAR_DAY
    assert leap_day.complementary() is CotsworthComplementaryDay.LEAP_DAY
    assert year_day.display_weekday() is None
    assert leap_day.display_weekday() is None
    assert Cotsworth(2024, 1, 1).complementary() is None
    with pytest.raises(DayOutOfRange):
        Cotsworth(2025, 6, 29)


def test_cotsworth_months_start_on_sunday():
    random.seed(42)
    for _ in range(500):
        year = random.randint(1, 3000)
        month = random.randint(1, 13)
        assert Cotsworth(year, month, 1).display_weekday() == Weekday.SUNDAY
        assert Cotsworth(year, month, 28).display_weekday() == Weekday.SATURDAY


@pytest.mark.parametrize(
    "month, quarter",
    [(1, 1), (4, 1), (5, 2), (7, 2), (8, 3), (10, 3), (11, 4), (13, 4)],
)
def test_cotsworth_quarter_follows_weeks(month, quarter):
    assert Cotsworth(2024, month, 1).quarter() == quarter
    assert Cotsworth(2025, month, 1).quarter() == quarter


def test_cotsworth_complementary_days_have_no_week():
    assert Cotsworth(2024, 6, 29).week_of_year() is None
    assert Cotsworth(2024, 13, 29).week_of_year() is None
    assert Cotsworth(2024, 6, 29).quarter() == 2
    assert Cotsworth(2024, 13, 29).quarter() == 4
    assert Cotsworth(2024, 13, 28).week_of_year() == 52


def test_festivals_and_sansculottides_have_no_week():
    assert Positivist(236, 14, 2).week_of_year() is None
    assert Positivist(236, 13, 28).week_of_year() == 52
    assert FrenchRevArith(4, 13, 6).week_of_year() is None
    assert FrenchRevArith(4, 12, 30).week_of_year() == 36


def test_positivist_festivals():
    dead = Positivist(237, 14, 1)
    assert dead.complementary() is PositivistComplementaryDay.FESTIVAL_OF_THE_DEAD
    assert dead.display_weekday() is None
    assert Positivist(236, 14, 2).complementary() is PositivistComplementaryDay.FESTIVAL_OF_HOLY_WOMEN
    with pytest.raises(DayOutOfRange):
        Positivist(237, 14, 2)
    assert Positivist(237, 1, 1).display_weekday() == Weekday.MONDAY


def test_symmetry_years_start_on_monday():
    for cls in (Symmetry454, Symmetry010, Symmetry454Solstice, Symmetry010Solstice):
        for year in range(-500, 2500, 7):
            assert weekday_of(cls.new_year(year)) == Weekday.MONDAY


def test_symmetry_leap_rule():
    assert not Symmetry454.is_leap(1)
    assert Symmetry454.is_leap(3)
    leaps = sum(EQUINOX.is_leap(y) for y in range(1, 294))
    assert leaps == 52
    assert float(EQUINOX.mean_year) == pytest.approx(365.2423, abs=1e-4)
    with pytest.raises(ValueError):
        LeapRule(cycle=10, leaps=10, offset=0)


def test_irvember_only_in_leap_years():
    Symmetry454(3, 13, 7)
    with pytest.raises(MonthOutOfRange):
        Symmetry454(1, 13, 1)
    with pytest.raises(DayOutOfRange):
        Symmetry454(3, 13, 8)


def test_symmetry_month_lengths():
    assert [Symmetry454.days_in_month(1, m) for m in (1, 2, 3)] == [28, 35, 28]
    assert [Symmetry010.days_in_month(1, m) for m in (1, 2, 3)] == [30, 31, 30]
    assert Symmetry454.days_in_year(1) == 364
    assert Symmetry010.days_in_year(3) == 371


def test_french_rev_leap_variants():
    assert not FrenchRevArith.is_leap(3)
    assert FrenchRevArith.is_leap(4)
    assert FrenchRevArithAdjusted.is_leap(3)
    assert not FrenchRevArith.is_leap(4000)
    FrenchRevArith(4, 13, 6)
    with pytest.raises(DayOutOfRange):
        FrenchRevArith(1, 13, 6)


def test_french_rev_decades_and_sansculottides():
    assert FrenchRevArith(1, 1, 11).decade_day() is DecadeDay.PRIMIDI
    assert FrenchRevArith(1, 1, 30).decade_day() is DecadeDay.DECADI
    last = FrenchRevArith(4, 13, 6)
    assert last.complementary() is Sansculottide.REVOLUTION
    assert last.decade_day() is None
    assert last + 1 == FrenchRevArith(5, 1, 1)


def test_wandering_years():
    assert Egyptian(1, 13, 5) + 1 == Egyptian(2, 1, 1)
    assert Egyptian(1, 13, 1).complementary() is EgyptianEpagomenae.BIRTH_OF_OSIRIS
    assert Egyptian(1, 12, 30).complementary() is None
    assert Egyptian(1, 13, 1).is_complementary()
    assert not Egyptian(1, 12, 30).is_complementary()
    assert Armenian(1, 1, 1).day_name() == "Areg"
    assert Armenian(1, 1, 30).day_name() == "Giseravar"
    assert Armenian(1, 13, 1).day_name() is None
    with pytest.raises(DayOutOfRange):
        Egyptian(1, 13, 6)


def test_coptic_leap_years():
    Coptic(3, 13, 6)
    with pytest.raises(DayOutOfRange):
        Coptic(1, 13, 6)
    assert Coptic(3, 13, 6) + 1 == Coptic(4, 1, 1)
