"""
calconv.calendars.positivist
----------------------------
Auguste Comte's Positivist calendar. Year 1 is Gregorian 1789; thirteen months
of 28 days named after great men, then a fourteenth "month" holding the
Festival of the Dead and, in Gregorian leap years, the Festival of Holy Women.
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

YEAR_OFFSET = 1788
COMPLEMENTARY_MONTH = 14
EPOCH = greg.fixed_from_ymd(1 + YEAR_OFFSET, 1, 1)


class PositivistComplementaryDay(IntEnum):
    FESTIVAL_OF_THE_DEAD = 1
    FESTIVAL_OF_HOLY_WOMEN = 2


def is_leap(year: int) -> bool:
    return greg.is_leap(year + YEAR_OFFSET)


@dataclass(frozen=True)
class Positivist(MonthDayDate):
    NAME: ClassVar[str] = "positivist"
    ID: ClassVar[CalendarId] = CalendarId("positivist", "perennial", ("year", "month", "day"))
    COMPLEMENTARY_MONTH: ClassVar[Optional[int]] = COMPLEMENTARY_MONTH

    is_leap = staticmethod(is_leap)

    @classmethod
    def months_in_year(cls, year: int) -> int:
        return 14

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        if month == COMPLEMENTARY_MONTH:
            return 2 if is_leap(year) else 1
        return 28

    @classmethod
    def new_year(cls, year: int) -> int:
        return greg.fixed_from_ymd(year + YEAR_OFFSET, 1, 1)

    def _to_fixed(self) -> int:
        return self.new_year(self.year) - 1 + 28 * (self.month - 1) + self.day

    @classmethod
    def _from_fixed(cls, n: int) -> "Positivist":
        g_year, doy = greg.ordinal_from_fixed(n)
        month = (doy - 1) // 28 + 1
        return cls(g_year - YEAR_OFFSET, month, amod(doy, 28))

    def complementary(self) -> Optional[PositivistComplementaryDay]:
        if self.month != COMPLEMENTARY_MONTH:
            return None
        return PositivistComplementaryDay(self.day)

    def perennial_weekday(self) -> Optional[Weekday]:
        """Every month starts on a Monday; festivals have no weekday."""
        if self.month == COMPLEMENTARY_MONTH:
            return None
        return Weekday(self.day % 7)

    display_weekday = perennial_weekday

    def week_of_year(self) -> Optional[int]:
        if self.month == COMPLEMENTARY_MONTH:
            return None
        return 4 * (self.month - 1) + (self.day - 1) // 7 + 1
