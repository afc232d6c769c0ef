"""
calconv.calendars.cotsworth
---------------------------
The International Fixed Calendar of Moses Cotsworth.

Thirteen months of 28 days (Sol is inserted between June and July). The
365th day is Year Day, stored as 13/29; in Gregorian leap years Leap Day is
stored as 6/29. Neither belongs to a week.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional

from ..core.arith import amod
from ..core.types import CalendarId
from ..cycles.weekday import Weekday
from . import gregorian as greg
from .base import MonthDayDate

LEAP_DAY_ORDINAL = 169


class CotsworthComplementaryDay(IntEnum):
    YEAR_DAY = 1
    LEAP_DAY = 2


@dataclass(frozen=True)
class Cotsworth(MonthDayDate):
    NAME: ClassVar[str] = "cotsworth"
    ID: ClassVar[CalendarId] = CalendarId("cotsworth", "perennial", ("year", "month", "day"))

    is_leap = staticmethod(greg.is_leap)

    @classmethod
    def months_in_year(cls, year: int) -> int:
        return 13

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        if month == 13 or (month == 6 and greg.is_leap(year)):
            return 29
        return 28

    @classmethod
    def new_year(cls, year: int) -> int:
        return greg.fixed_from_ymd(year, 1, 1)

    def _to_fixed(self) -> int:
        leap_shift = 1 if (self.month > 6 and greg.is_leap(self.year)) else 0
        return self.new_year(self.year) - 1 + 28 * (self.month - 1) + leap_shift + self.day

    @classmethod
    def _from_fixed(cls, n: int) -> "Cotsworth":
        year, doy = greg.ordinal_from_fixed(n)
        leap = greg.is_leap(year)
        if doy == (366 if leap else 365):
            return cls(year, 13, 29)
        if leap and doy == LEAP_DAY_ORDINAL:
            return cls(year, 6, 29)
        correction = 1 if (leap and doy > LEAP_DAY_ORDINAL) else 0
        month = (doy - correction - 1) // 28 + 1
        return cls(year, month, amod(doy - correction, 28))

    def complementary(self) -> Optional[CotsworthComplementaryDay]:
        if self.day != 29:
            return None
        if self.month == 13:
            return CotsworthComplementaryDay.YEAR_DAY
        return CotsworthComplementaryDay.LEAP_DAY

    def perennial_weekday(self) -> Optional[Weekday]:
        """Every month starts on a Sunday; complementary days have no weekday."""
        if self.day == 29:
            return None
        return Weekday((self.day - 1) % 7)

    display_weekday = perennial_weekday

    def week_of_year(self) -> Optional[int]:
        if self.day == 29:
            return None
        return 4 * (self.month - 1) + (self.day - 1) // 7 + 1

    def quarter(self) -> int:
        """Quarters of 13 weeks. Leap Day follows week 24, Year Day closes the year."""
        week = self.week_of_year()
        if week is None:
            return 2 if self.complementary() is CotsworthComplementaryDay.LEAP_DAY else 4
        return (week - 1) // 13 + 1
