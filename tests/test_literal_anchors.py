# tests/test_literal_anchors.py
"""Known correspondences between calendars."""

import pytest

from calconv.calendars.coptic import Coptic, Ethiopic
from calconv.calendars.cotsworth import Cotsworth
from calconv.calendars.daycounts import JulianDayNumber, ModifiedJulianDay, RataDie, UnixDay
from calconv.calendars.egyptian import Armenian, Egyptian
from calconv.calendars.french_rev import FrenchRevArith, FrenchRevArithAdjusted
from calconv.calendars.gregorian import Gregorian
from calconv.calendars.holocene import Holocene
from calconv.calendars.iso import ISO
from calconv.calendars.julian import Julian
from calconv.calendars.positivist import Positivist
from calconv.calendars.symmetry import Symmetry010, Symmetry454
from calconv.calendars.tranquility import Tranquility
from calconv.core.types import DayCount


@pytest.mark.parametrize(
    "date,gregorian",
    [
        (UnixDay(0), Gregorian(1970, 1, 1)),
        (ModifiedJulianDay(0), Gregorian(1858, 11, 17)),
        (JulianDayNumber(2451545), Gregorian(2000, 1, 1)),
        (RataDie(1), Gregorian(1, 1, 1)),
        (Julian(1752, 9, 3), Gregorian(1752, 9, 14)),
        (Julian(2025, 7, 13), Gregorian(2025, 7, 26)),
        (FrenchRevArith(1, 1, 1), Gregorian(1792, 9, 22)),
        (FrenchRevArithAdjusted(1, 1, 1), Gregorian(1792, 9, 22)),
        (Armenian(1, 1, 1), Gregorian(552, 7, 13)),
        (ISO(2009, 1, 1), Gregorian(2008, 12, 29)),
        (ISO(2009, 53, 7), Gregorian(2010, 1, 3)),
        (Holocene(12025, 7, 26), Gregorian(2025, 7, 26)),
        (Cotsworth(2024, 13, 29), Gregorian(2024, 12, 31)),
        (Cotsworth(2024, 6, 29), Gregorian(2024, 6, 17)),
        (Positivist(237, 14, 1), Gregorian(2025, 12, 31)),
        (Symmetry454(1, 1, 1), Gregorian(1, 1, 1)),
        (Symmetry010(1, 1, 1), Gregorian(1, 1, 1)),
        (Tranquility(0, 0, 0), Gregorian(1969, 7, 20)),
        (Tranquility(1, 1, 1), Gregorian(1969, 7, 21)),
        (Tranquility(-1, 13, 28), Gregorian(1969, 7, 19)),
        (Tranquility(31, 0, 2), Gregorian(2000, 2, 29)),
        (Tranquility(31, 0, 1), Gregorian(2000, 7, 20)),
    ],
)
def test_same_day(date, gregorian):
    assert date.encode() == gregorian.encode()
    assert date.convert(Gregorian) == gregorian
    assert gregorian.convert(type(date)) == date


@pytest.mark.parametrize(
    "date,julian",
    [
        (Coptic(1, 1, 1), Julian(284, 8, 29)),
        (Ethiopic(1, 1, 1), Julian(8, 8, 29)),
    ],
)
def test_alexandrian_epochs(date, julian):
    assert date.convert(Julian) == julian


def test_day_count_anchors():
    assert Gregorian(1970, 1, 1).encode() == DayCount(719163)
    assert Gregorian(1, 1, 1).encode() == DayCount(1)
    assert Gregorian(0, 12, 31).encode() == DayCount(0)
    assert Gregorian.prior_elapsed_days(2009) == 733407
    assert Gregorian(2009, 7, 14).day_of_year() == 195
    assert Egyptian(1, 1, 1).encode() == DayCount(-272787)
    assert Julian(1, 1, 1).encode() == DayCount(-1)
