# tests/test_gregorian_julian.py

import random

import pytest

from calconv.calendars import gregorian as greg
from calconv.calendars import julian
from calconv.calendars.gregorian import Gregorian
from calconv.calendars.holocene import Holocene
from calconv.calendars.iso import ISO
from calconv.calendars.julian import Julian, Olympiad
from calconv.core.errors import (
    DayOutOfRange,
    InvalidDateError,
    MonthOutOfRange,
    UnrepresentableDate,
    WeekOutOfRange,
    YearOutOfRange,
)
from calconv.core.types import YEAR_MAX, YEAR_MIN


@pytest.mark.parametrize(
    "year,leap",
    [(2024, True), (2023, False), (2000, True), (1900, False), (0, True), (-4, True), (-100, False)],
)
def test_gregorian_leap_years(year, leap):
    assert Gregorian.is_leap(year) is leap


@pytest.mark.parametrize("year,leap", [(4, True), (1900, True), (2023, False), (-1, True), (-5, True), (-2, False)])
def test_julian_leap_years(year, leap):
    assert Julian.is_leap(year) is leap


def test_validation_errors():
    Gregorian(2024, 2, 29)
    with pytest.raises(DayOutOfRange):
        Gregorian(2023, 2, 29)
    with pytest.raises(MonthOutOfRange):
        Gregorian(2025, 13, 1)
    with pytest.raises(DayOutOfRange):
        Gregorian(2025, 4, 31)
    with pytest.raises(YearOutOfRange):
        Julian(0, 1, 1)
    with pytest.raises(YearOutOfRange):
        Gregorian(YEAR_MAX + 1, 1, 1)
    with pytest.raises(YearOutOfRange):
        Gregorian(YEAR_MIN - 1, 1, 1)
    # Valid year, but beyond the day-count domain.
    with pytest.raises(UnrepresentableDate):
        Gregorian(YEAR_MAX, 1, 1)
    with pytest.raises(TypeError):
        Gregorian(2025.0, 1, 1)


def test_error_hierarchy():
    with pytest.raises(InvalidDateError):
        Gregorian(2023, 2, 29)
    with pytest.raises(ValueError):
        Gregorian(2023, 2, 29)


def test_arithmetic_beyond_domain_raises():
    with pytest.raises(UnrepresentableDate):
        Gregorian(2025, 7, 26) + 10**11


def test_iso_weeks():
    assert ISO.is_long_year(2009)
    assert not ISO.is_long_year(2010)
    with pytest.raises(WeekOutOfRange):
        ISO(2010, 53, 1)
    with pytest.raises(DayOutOfRange):
        ISO(2009, 1, 8)
    assert ISO(2009, 53, 1).quarter() == 4
    assert ISO(2009, 13, 7).quarter() == 1
    assert ISO(2009, 14, 7).quarter() == 1
    assert ISO(2009, 15, 1).quarter() == 2
    assert ISO(2009, 42, 7).quarter() == 3
    assert ISO(2009, 43, 1).quarter() == 4


def test_iso_day_is_weekday():
    random.seed(42)
    for _ in range(1000):
        d = ISO.decode(random.randint(-10**6, 10**6))
        assert d.iso_weekday() == d.weekday()
        assert d.weekday().iso_number() == d.day


def test_gregorian_helpers_agree():
    random.seed(42)
    for _ in range(2000):
        n = random.randint(-10**7, 10**7)
        year, doy = greg.ordinal_from_fixed(n)
        d = Gregorian.decode(n)
        assert d.year == year
        assert d.day_of_year() == doy
        assert Gregorian.new_year(year) <= n <= Gregorian.year_end(year)


def test_quarters_and_weeks():
    assert Gregorian(2025, 3, 31).quarter() == 1
    assert Gregorian(2025, 4, 1).quarter() == 2
    assert Gregorian(2025, 12, 31).quarter() == 4
    assert Gregorian(2025, 1, 7).week_of_year() == 1
    assert Gregorian(2025, 1, 8).week_of_year() == 2


def test_holocene_years():
    assert Holocene(1, 1, 1).convert(Gregorian) == Gregorian(-9999, 1, 1)
    assert Holocene.is_leap(12024)


def test_auc_years():
    assert julian.julian_year_from_auc(1) == -753
    assert julian.auc_year_from_julian(-753) == 1
    assert julian.auc_year_from_julian(-1) == 753
    assert julian.julian_year_from_auc(754) == 1
    assert Julian(2025, 1, 1).auc_year() == 2778
    with pytest.raises(YearOutOfRange):
        julian.julian_year_from_auc(0)


def test_auc_round_trip():
    random.seed(42)
    for _ in range(2000):
        year = random.randint(-5000, 5000)
        if year == 0:
            continue
        assert julian.julian_year_from_auc(julian.auc_year_from_julian(year)) == year


def test_olympiads():
    assert Olympiad.from_julian_year(-776) == Olympiad(1, 1)
    assert Olympiad(1, 1).to_julian_year() == -776
    assert Olympiad.from_julian_year(1) == Olympiad(195, 1)
    assert Julian(-1, 1, 1).olympiad() == Olympiad(194, 4)
    with pytest.raises(YearOutOfRange):
        Olympiad(1, 5)
    random.seed(42)
    for _ in range(2000):
        year = random.randint(-5000, 5000)
        if year == 0:
            continue
        assert Olympiad.from_julian_year(year).to_julian_year() == year
