# tests/test_daycount.py

import random
from datetime import date

import pytest

from calconv.core import time as scales
from calconv.core.errors import UnrepresentableDate
from calconv.core.types import DAYCOUNT_MAX, DAYCOUNT_MIN, DayCount


def test_daycount_arithmetic():
    assert DayCount(5) + 3 == DayCount(8)
    assert 3 + DayCount(5) == DayCount(8)
    assert DayCount(8) - DayCount(5) == 3
    assert DayCount(8) - 3 == DayCount(5)
    assert DayCount(5).difference(DayCount(8)) == -3
    assert DayCount(1) < DayCount(2)


def test_daycount_domain():
    DayCount(DAYCOUNT_MAX)
    DayCount(DAYCOUNT_MIN)
    with pytest.raises(UnrepresentableDate):
        DayCount(DAYCOUNT_MAX + 1)
    with pytest.raises(UnrepresentableDate):
        DayCount(DAYCOUNT_MIN) - 1
    with pytest.raises(TypeError):
        DayCount(True)
    with pytest.raises(TypeError):
        DayCount(1.5)


def test_of_is_idempotent():
    d = DayCount(42)
    assert DayCount.of(d) is d
    assert DayCount.of(42) == d


def test_known_epochs():
    assert scales.from_date(date(1970, 1, 1)) == DayCount(scales.UNIX_EPOCH)
    assert scales.from_date(date(1858, 11, 17)) == DayCount(scales.MJD_EPOCH)
    assert scales.to_jdn(scales.from_date(date(2000, 1, 1))) == 2451545
    assert scales.to_mjd(scales.from_mjd(0)) == 0
    assert scales.to_unix_day(scales.from_date(date(1970, 1, 2))) == 1
    assert scales.from_jdn(2451545) == scales.from_date(date(2000, 1, 1))
    assert scales.from_unix_day(0) == DayCount(719163)


def test_date_roundtrip():
    random.seed(42)
    lo, hi = date.min.toordinal(), date.max.toordinal()
    for _ in range(2000):
        n = DayCount(random.randint(lo, hi))
        assert scales.from_date(scales.to_date(n)) == n


def test_to_date_outside_python_range():
    with pytest.raises(UnrepresentableDate):
        scales.to_date(0)


def test_fliegel_van_flandern_agrees_with_python_ordinals():
    random.seed(42)
    for _ in range(2000):
        d = date.fromordinal(random.randint(1, date.max.toordinal()))
        jdn = scales.gregorian_to_jdn(d.year, d.month, d.day)
        assert jdn == scales.to_jdn(scales.from_date(d))
        assert scales.jdn_to_gregorian(jdn) == (d.year, d.month, d.day)
