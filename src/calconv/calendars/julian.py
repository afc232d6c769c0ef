"""
calconv.calendars.julian
------------------------
Proleptic Julian calendar. Years are numbered historically: there is no
year 0, 1 BC is year -1.

Also hosts the two year-numbering schemes layered on Julian years:
ab urbe condita (AUC) and Olympiads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..core.errors import YearOutOfRange
from ..core.types import CalendarId
from . import gregorian as greg
from .base import MonthDayDate

# Julian 1-01-01 is Gregorian 0-12-30.
EPOCH = -1

YEAR_ROME_FOUNDED = -753
OLYMPIAD_START = -776


def is_leap(year: int) -> bool:
    if year > 0:
        return year % 4 == 0
    return year % 4 == 3


def _prior_elapsed_days(year: int) -> int:
    y = year + 1 if year < 0 else year
    return (EPOCH - 1) + 365 * (y - 1) + (y - 1) // 4


def fixed_from_ymd(year: int, month: int, day: int) -> int:
    if month <= 2:
        correction = 0
    elif is_leap(year):
        correction = -1
    else:
        correction = -2
    return _prior_elapsed_days(year) + (367 * month - 362) // 12 + correction + day


def ymd_from_fixed(n: int) -> Tuple[int, int, int]:
    approx = (4 * (n - EPOCH) + 1464) // 1461
    year = approx - 1 if approx <= 0 else approx
    prior_days = n - fixed_from_ymd(year, 1, 1)
    if n < fixed_from_ymd(year, 3, 1):
        correction = 0
    elif is_leap(year):
        correction = 1
    else:
        correction = 2
    month = (12 * (prior_days + correction) + 373) // 367
    day = n - fixed_from_ymd(year, month, 1) + 1
    return year, month, day


def month_length(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap(year) else 28
    return greg.month_length(1, month)


def julian_year_from_auc(year: int) -> int:
    """Julian year of a year counted from the founding of Rome."""
    if year == 0:
        raise YearOutOfRange("AUC has no year 0")
    if 1 <= year <= -YEAR_ROME_FOUNDED:
        return year + YEAR_ROME_FOUNDED - 1
    return year + YEAR_ROME_FOUNDED

def auc_year_from_julian(year: int) -> int:
    if year == 0:
        raise YearOutOfRange("the Julian calendar has no year 0")
    if YEAR_ROME_FOUNDED <= year <= -1:
        return year - YEAR_ROME_FOUNDED + 1
    return year - YEAR_ROME_FOUNDED


@dataclass(frozen=True)
class Olympiad:
    """A year given as (olympiad cycle, year 1..4 within it)."""
    cycle: int
    year: int

    def __post_init__(self) -> None:
        if not (1 <= self.year <= 4):
            raise YearOutOfRange(f"olympiad year {self.year} not in 1..4")

    def to_julian_year(self) -> int:
        years = OLYMPIAD_START + 4 * (self.cycle - 1) + self.year - 1
        return years + 1 if years >= 0 else years

    @classmethod
    def from_julian_year(cls, year: int) -> "Olympiad":
        if year == 0:
            raise YearOutOfRange("the Julian calendar has no year 0")
        years = year - OLYMPIAD_START - (0 if year < 0 else 1)
        return cls(years // 4 + 1, years % 4 + 1)


@dataclass(frozen=True)
class Julian(MonthDayDate):
    NAME: ClassVar[str] = "julian"
    ID: ClassVar[CalendarId] = CalendarId("julian", "solar", ("year", "month", "day"), optional=False)

    is_leap = staticmethod(is_leap)

    @classmethod
    def valid_year(cls, year: int) -> bool:
        return year != 0

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        return month_length(year, month)

    @classmethod
    def new_year(cls, year: int) -> int:
        return fixed_from_ymd(year, 1, 1)

    def _to_fixed(self) -> int:
        return fixed_from_ymd(self.year, self.month, self.day)

    @classmethod
    def _from_fixed(cls, n: int) -> "Julian":
        return cls(*ymd_from_fixed(n))

    def auc_year(self) -> int:
        return auc_year_from_julian(self.year)

    def olympiad(self) -> Olympiad:
        return Olympiad.from_julian_year(self.year)
