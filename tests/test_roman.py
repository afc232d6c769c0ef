# tests/test_roman.py

import random

import pytest

from calconv.calendars import roman
from calconv.calendars.julian import Julian
from calconv.calendars.roman import Roman, RomanEvent
from calconv.core.errors import DayOutOfRange, YearOutOfRange


@pytest.mark.parametrize(
    "julian_date,expected",
    [
        (Julian(2025, 3, 1), Roman(2025, 3, RomanEvent.KALENDS, 1)),
        (Julian(2025, 3, 5), Roman(2025, 3, RomanEvent.NONES, 3)),
        (Julian(2025, 3, 7), Roman(2025, 3, RomanEvent.NONES, 1)),
        (Julian(2025, 3, 14), Roman(2025, 3, RomanEvent.IDES, 2)),
        (Julian(-44, 3, 15), Roman(-44, 3, RomanEvent.IDES, 1)),
        (Julian(2025, 3, 16), Roman(2025, 4, RomanEvent.KALENDS, 17)),
        (Julian(2025, 12, 31), Roman(2026, 1, RomanEvent.KALENDS, 2)),
        (Julian(-1, 12, 31), Roman(1, 1, RomanEvent.KALENDS, 2)),
        # Leap year: the sixth day before the Kalends of March is doubled.
        (Julian(2024, 2, 24), Roman(2024, 3, RomanEvent.KALENDS, 6)),
        (Julian(2024, 2, 25), Roman(2024, 3, RomanEvent.KALENDS, 6, leap=True)),
        (Julian(2024, 2, 26), Roman(2024, 3, RomanEvent.KALENDS, 5)),
        (Julian(2025, 2, 24), Roman(2025, 3, RomanEvent.KALENDS, 6)),
    ],
)
def test_roman_names(julian_date, expected):
    assert julian_date.convert(Roman) == expected
    assert expected.to_julian() == julian_date


def test_max_count():
    assert roman.max_count(2025, 3, RomanEvent.KALENDS) == 16
    assert roman.max_count(2025, 4, RomanEvent.KALENDS) == 17
    assert roman.max_count(2025, 3, RomanEvent.NONES) == 6
    assert roman.max_count(2025, 1, RomanEvent.NONES) == 4
    assert roman.max_count(2025, 3, RomanEvent.IDES) == 8


def test_invalid_roman_dates():
    with pytest.raises(DayOutOfRange):
        Roman(2025, 3, RomanEvent.KALENDS, 17)
    with pytest.raises(DayOutOfRange):
        Roman(2025, 3, RomanEvent.KALENDS, 6, leap=True)
    with pytest.raises(DayOutOfRange):
        Roman(2024, 3, RomanEvent.KALENDS, 7, leap=True)
    with pytest.raises(YearOutOfRange):
        Roman(0, 3, RomanEvent.KALENDS, 1)


def test_event_is_coerced():
    d = Roman(2025, 3, 3, 1)
    assert d.event is RomanEvent.IDES


def test_every_day_of_a_leap_year_is_named_once():
    start = Julian(2024, 1, 1).encode()
    names = set()
    for k in range(366):
        d = Roman.decode(start + k)
        assert d.encode() == start + k
        names.add(d)
    assert len(names) == 366


def test_auc_and_julian_views():
    random.seed(42)
    for _ in range(1000):
        n = random.randint(-10**6, 10**6)
        d = Roman.decode(n)
        assert d.day_of_year() == Julian.decode(n).day_of_year()
        assert d.auc_year() == Julian(d.year, 1, 1).auc_year()
