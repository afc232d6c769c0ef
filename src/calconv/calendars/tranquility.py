"""
calconv.calendars.tranquility
-----------------------------
Jeff Siggins' Tranquility calendar, counted from the first Moon landing.

Years run from Gregorian July 21 to July 20. Thirteen months of 28 days
(Archimedes .. Mendel), each starting on a Friday, plus days that belong to
no month (month 0):

- day 0 of year 0: Moon Landing Day, Gregorian 1969-07-20, the only day of
  year 0;
- day 1: Armstrong Day, the last day of every year except year -1;
- day 2: Aldrin Day, the leap day, between Hippocrates 27 and 28.

Years before the landing are negative (-1, -2, ...); there is no ordinary
year 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional, Tuple

from ..core.arith import amod
from ..core.errors import DayOutOfRange, MonthOutOfRange, YearOutOfRange
from ..core.types import CalendarId
from ..cycles.weekday import Weekday
from . import gregorian as greg
from .base import MonthDayDate, check_year

EPOCH_GREGORIAN = (1969, 7, 20)
EPOCH = greg.fixed_from_ymd(*EPOCH_GREGORIAN)
NON_MONTH = 0
HIPPOCRATES = 8
ALDRIN_ORDINAL = HIPPOCRATES * 28
# Gregorian day-of-year shift onto the Tranquility year (Faraday 24 ends the Gregorian year).
ORDINAL_SHIFT = 6 * 28 - 4


class TranquilityComplementaryDay(IntEnum):
    MOON_LANDING_DAY = 0
    ARMSTRONG_DAY = 1
    ALDRIN_DAY = 2


def is_leap(year: int) -> bool:
    if year > 0:
        return greg.is_leap(year + EPOCH_GREGORIAN[0])
    if year < 0:
        return greg.is_leap(year + EPOCH_GREGORIAN[0] + 1)
    return False


def epagomenae_count(year: int) -> int:
    if is_leap(year):
        return 2
    if year == -1:
        # Its Armstrong Day is Moon Landing Day.
        return 0
    return 1


def prior_elapsed_days(year: int) -> int:
    if year == 0:
        return EPOCH - 1
    y = year + 1 if year < 0 else year
    return greg.fixed_from_ymd(y - 1 + EPOCH_GREGORIAN[0], EPOCH_GREGORIAN[1], EPOCH_GREGORIAN[2])


def ordinal_from_fixed(n: int) -> Tuple[int, int]:
    g_year, g_doy = greg.ordinal_from_fixed(n)
    g_len = 366 if greg.is_leap(g_year) else 365
    doy = amod(g_doy + ORDINAL_SHIFT, g_len)
    year = g_year - EPOCH_GREGORIAN[0] + (1 if doy <= ORDINAL_SHIFT else 0)
    if year < 1:
        year -= 1
    if year == -1 and doy == 365:
        return 0, 1
    return year, doy


@dataclass(frozen=True)
class Tranquility(MonthDayDate):
    NAME: ClassVar[str] = "tranquility"
    ID: ClassVar[CalendarId] = CalendarId("tranquility", "perennial", ("year", "month", "day"))
    COMPLEMENTARY_MONTH: ClassVar[Optional[int]] = NON_MONTH

    is_leap = staticmethod(is_leap)
    prior_elapsed_days = staticmethod(prior_elapsed_days)

    @classmethod
    def months_in_year(cls, year: int) -> int:
        return 0 if year == 0 else 13

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        if month == NON_MONTH:
            return epagomenae_count(year)
        return 28

    @classmethod
    def days_in_year(cls, year: int) -> int:
        if year == 0:
            return 1
        return 364 + epagomenae_count(year)

    @classmethod
    def new_year(cls, year: int) -> int:
        return prior_elapsed_days(year) + 1

    def _validate(self) -> None:
        check_year(self.year)
        if not (0 <= self.month <= 13):
            raise MonthOutOfRange(f"month {self.month} not in 0..13")
        if self.month == NON_MONTH:
            if self.day == 0 and self.year == 0:
                return
            if self.day == 1 and self.year not in (0, -1):
                return
            if self.day == 2 and self.year != 0 and is_leap(self.year):
                return
            raise DayOutOfRange(f"no complementary day {self.day} in year {self.year}")
        if not (1 <= self.day <= 28):
            raise DayOutOfRange(f"day {self.day} not in 1..28")
        if self.year == 0:
            raise YearOutOfRange("year 0 holds only Moon Landing Day (0/0/0)")

    @classmethod
    def epoch(cls) -> int:
        return EPOCH

    def ordinal(self) -> int:
        if self.month == NON_MONTH:
            if self.day == TranquilityComplementaryDay.MOON_LANDING_DAY:
                return 1
            if self.day == TranquilityComplementaryDay.ARMSTRONG_DAY:
                return 364 + epagomenae_count(self.year)
            return ALDRIN_ORDINAL
        approx = 28 * (self.month - 1) + self.day
        if approx >= ALDRIN_ORDINAL and epagomenae_count(self.year) >= 2:
            return approx + 1
        return approx

    def _to_fixed(self) -> int:
        return prior_elapsed_days(self.year) + self.ordinal()

    @classmethod
    def _from_fixed(cls, n: int) -> "Tranquility":
        year, doy = ordinal_from_fixed(n)
        leap = is_leap(year)
        if year == 0:
            return cls(0, NON_MONTH, 0)
        if doy == (366 if leap else 365):
            return cls(year, NON_MONTH, 1)
        if leap and doy == ALDRIN_ORDINAL:
            return cls(year, NON_MONTH, 2)
        correction = 1 if (leap and doy > ALDRIN_ORDINAL) else 0
        month = (doy - correction - 1) // 28 + 1
        return cls(year, month, amod(doy - correction, 28))

    def day_of_year(self) -> int:
        return self.ordinal()

    def complementary(self) -> Optional[TranquilityComplementaryDay]:
        if self.month != NON_MONTH:
            return None
        return TranquilityComplementaryDay(self.day)

    def perennial_weekday(self) -> Optional[Weekday]:
        """Months start on a Friday; complementary days have no weekday."""
        if self.month == NON_MONTH:
            return None
        return Weekday((self.day + 4) % 7)

    display_weekday = perennial_weekday

    def week_of_year(self) -> Optional[int]:
        if self.month == NON_MONTH:
            return None
        return 4 * (self.month - 1) + (self.day - 1) // 7 + 1

    def quarter(self) -> int:
        week = self.week_of_year()
        if week is None:
            return 3 if self.day == TranquilityComplementaryDay.ALDRIN_DAY else 4
        return (week - 1) // 13 + 1
