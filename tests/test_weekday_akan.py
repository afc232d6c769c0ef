# tests/test_weekday_akan.py

import random

import pytest

from calconv.calendars.gregorian import Gregorian
from calconv.cycles import weekday as wk
from calconv.cycles.akan import CYCLE_LENGTH, AkanDay, AkanPrefix, AkanStem
from calconv.cycles.weekday import Weekday, weekday_of


def test_reference_days():
    assert weekday_of(0) == Weekday.SUNDAY
    assert weekday_of(1) == Weekday.MONDAY
    assert Gregorian(2025, 7, 26).weekday() == Weekday.SATURDAY
    assert Gregorian(1970, 1, 1).weekday() == Weekday.THURSDAY


def test_successor_property():
    random.seed(42)
    for _ in range(5000):
        n = random.randint(-10**9, 10**9)
        assert weekday_of(n + 1) == weekday_of(n).successor()
        assert weekday_of(n + 7) == weekday_of(n)


def test_iso_numbers():
    assert Weekday.SUNDAY.iso_number() == 7
    assert Weekday.MONDAY.iso_number() == 1
    for k in range(1, 8):
        assert Weekday.from_iso_number(k).iso_number() == k
    with pytest.raises(ValueError):
        Weekday.from_iso_number(0)


def test_kday_helpers():
    random.seed(42)
    for _ in range(2000):
        n = random.randint(-10**6, 10**6)
        k = random.randint(0, 6)
        b = wk.on_or_before(k, n)
        assert weekday_of(b) == k and n - 6 <= b <= n
        a = wk.on_or_after(k, n)
        assert weekday_of(a) == k and n <= a <= n + 6
        assert n - 3 <= wk.nearest(k, n) <= n + 3
        assert wk.before(k, n) < n < wk.after(k, n)
        assert wk.nth_kday(1, k, n) == a


def test_nth_kday():
    # Fourth Thursday of November 2025 (US Thanksgiving): 2025-11-27.
    nov1 = Gregorian(2025, 11, 1).encode().value
    thanksgiving = wk.nth_kday(4, Weekday.THURSDAY, nov1)
    assert Gregorian.decode(thanksgiving) == Gregorian(2025, 11, 27)
    # Last Monday of May 2025: 2025-05-26.
    jun1 = Gregorian(2025, 6, 1).encode().value
    assert Gregorian.decode(wk.nth_kday(-1, Weekday.MONDAY, jun1)) == Gregorian(2025, 5, 26)
    with pytest.raises(ValueError):
        wk.nth_kday(0, Weekday.MONDAY, jun1)


def test_akan_cycle():
    random.seed(42)
    for _ in range(2000):
        n = random.randint(-10**6, 10**6)
        name = AkanDay.from_fixed(n)
        assert AkanDay.from_fixed(n + CYCLE_LENGTH) == name
        assert AkanDay.from_fixed(n + 1) != name


def test_akan_name_difference_and_on_or_before():
    random.seed(42)
    for _ in range(2000):
        n = random.randint(-10**6, 10**6)
        a = AkanDay.from_fixed(n)
        b = AkanDay(AkanPrefix(random.randint(1, 6)), AkanStem(random.randint(1, 7)))
        d = a.name_difference(b)
        assert 1 <= d <= CYCLE_LENGTH
        assert AkanDay.from_fixed(n + d) == b
        prior = b.on_or_before(n).value
        assert n - CYCLE_LENGTH < prior <= n
        assert AkanDay.from_fixed(prior) == b


def test_akan_position_and_label():
    first = AkanDay(AkanPrefix.NWONA, AkanStem.WUKUO)
    assert first.position() == CYCLE_LENGTH
    assert AkanDay(AkanPrefix.NKYI, AkanStem.YAW).position() == 1
    assert first.label() == "Nwona Wukuo"
