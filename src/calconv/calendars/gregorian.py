"""
calconv.calendars.gregorian
---------------------------
Proleptic Gregorian calendar with astronomical year numbering (year 0 exists,
year 0 is 1 BCE).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..core.types import CalendarId
from .base import MonthDayDate

EPOCH = 1

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 400) not in (100, 200, 300)


def prior_elapsed_days(year: int) -> int:
    """Days before January 1 of ``year``, counted from the epoch."""
    y = year - 1
    return (EPOCH - 1) + 365 * y + y // 4 - y // 100 + y // 400


def day_of_year(year: int, month: int, day: int) -> int:
    if month <= 2:
        correction = 0
    elif is_leap(year):
        correction = -1
    else:
        correction = -2
    return (367 * month - 362) // 12 + correction + day


def fixed_from_ymd(year: int, month: int, day: int) -> int:
    return prior_elapsed_days(year) + day_of_year(year, month, day)


def year_from_fixed(n: int) -> int:
    d0 = n - EPOCH
    n400, d1 = divmod(d0, 146097)
    n100, d2 = divmod(d1, 36524)
    n4, d3 = divmod(d2, 1461)
    n1 = d3 // 365
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    if n100 == 4 or n1 == 4:
        return year
    return year + 1


def ordinal_from_fixed(n: int) -> Tuple[int, int]:
    """(year, day-of-year) of day count n."""
    year = year_from_fixed(n)
    return year, n - prior_elapsed_days(year)


def ymd_from_fixed(n: int) -> Tuple[int, int, int]:
    year = year_from_fixed(n)
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
    if month == 2 and is_leap(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


@dataclass(frozen=True)
class Gregorian(MonthDayDate):
    NAME: ClassVar[str] = "gregorian"
    ID: ClassVar[CalendarId] = CalendarId("gregorian", "solar", ("year", "month", "day"), optional=False)

    is_leap = staticmethod(is_leap)
    prior_elapsed_days = staticmethod(prior_elapsed_days)

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        return month_length(year, month)

    @classmethod
    def new_year(cls, year: int) -> int:
        return fixed_from_ymd(year, 1, 1)

    @classmethod
    def year_end(cls, year: int) -> int:
        return fixed_from_ymd(year, 12, 31)

    def _to_fixed(self) -> int:
        return fixed_from_ymd(self.year, self.month, self.day)

    @classmethod
    def _from_fixed(cls, n: int) -> "Gregorian":
        return cls(*ymd_from_fixed(n))
