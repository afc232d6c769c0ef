"""
calconv.calendars.roman
-----------------------
Roman day reckoning on top of the Julian calendar.

A day is named by counting (inclusively) down to the next of the three fixed
points of a month: the Kalends (day 1), the Nones (day 5 or 7) and the Ides
(day 13 or 15). In a Julian leap year the doubled "sixth day before the
Kalends of March" is distinguished by ``leap=True``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from ..core.arith import amod
from ..core.errors import DayOutOfRange, MonthOutOfRange, YearOutOfRange
from ..core.types import CalendarId
from . import julian
from .base import CalendarDate, check_year

MARCH = 3
FEBRUARY = 2


class RomanEvent(IntEnum):
    KALENDS = 1
    NONES = 2
    IDES = 3


def ides_of_month(month: int) -> int:
    return 15 if month in (3, 5, 7, 10) else 13


def nones_of_month(month: int) -> int:
    return ides_of_month(month) - 8


def max_count(year: int, month: int, event: RomanEvent) -> int:
    """Largest count that still names a day of the given month and event."""
    if event == RomanEvent.KALENDS:
        if month == MARCH:
            # February is 28 days either way; the leap day repeats count 6.
            return 16
        prev = amod(month - 1, 12)
        return julian.month_length(year, prev) - ides_of_month(prev) + 1
    if event == RomanEvent.NONES:
        return nones_of_month(month) - 1
    return ides_of_month(month) - nones_of_month(month)


@dataclass(frozen=True)
class Roman(CalendarDate):
    NAME: ClassVar[str] = "roman"
    ID: ClassVar[CalendarId] = CalendarId("roman", "solar", ("year", "month", "event", "count", "leap"))

    year: int
    month: int
    event: RomanEvent
    count: int
    leap: bool = False

    is_leap = staticmethod(julian.is_leap)

    def _validate(self) -> None:
        check_year(self.year)
        if self.year == 0:
            raise YearOutOfRange("the Julian calendar has no year 0")
        if not (1 <= self.month <= 12):
            raise MonthOutOfRange(f"month {self.month} not in 1..12")
        if self.event not in (RomanEvent.KALENDS, RomanEvent.NONES, RomanEvent.IDES):
            raise DayOutOfRange(f"unknown Roman event {self.event!r}")
        if not isinstance(self.event, RomanEvent):
            object.__setattr__(self, "event", RomanEvent(self.event))
        hi = max_count(self.year, self.month, self.event)
        if not (1 <= self.count <= hi):
            raise DayOutOfRange(f"count {self.count} not in 1..{hi} before the {self.event.name.title()}")
        if self.leap and not self._is_bissextile_slot():
            raise DayOutOfRange("only the sixth day before the Kalends of March in a leap year can be doubled")

    def _is_bissextile_slot(self) -> bool:
        return (julian.is_leap(self.year) and self.month == MARCH
                and self.event == RomanEvent.KALENDS and self.count == 6)

    def _to_fixed(self) -> int:
        if self.event == RomanEvent.KALENDS:
            day = 1
        elif self.event == RomanEvent.NONES:
            day = nones_of_month(self.month)
        else:
            day = ides_of_month(self.month)
        base = julian.fixed_from_ymd(self.year, self.month, day)
        shifted = (julian.is_leap(self.year) and self.month == MARCH
                   and self.event == RomanEvent.KALENDS and 6 <= self.count <= 16)
        return base - self.count + (0 if shifted else 1) + (1 if self.leap else 0)

    @classmethod
    def _from_fixed(cls, n: int) -> "Roman":
        year, month, day = julian.ymd_from_fixed(n)
        month1 = amod(month + 1, 12)
        if month1 != 1:
            year1 = year
        elif year != -1:
            year1 = year + 1
        else:
            year1 = 1

        if day == 1:
            return cls(year, month, RomanEvent.KALENDS, 1)
        nones = nones_of_month(month)
        if day <= nones:
            return cls(year, month, RomanEvent.NONES, nones - day + 1)
        ides = ides_of_month(month)
        if day <= ides:
            return cls(year, month, RomanEvent.IDES, ides - day + 1)
        if month != FEBRUARY or not julian.is_leap(year):
            kalends1 = julian.fixed_from_ymd(year1, month1, 1)
            return cls(year1, month1, RomanEvent.KALENDS, kalends1 - n + 1)
        if day < 25:
            return cls(year, MARCH, RomanEvent.KALENDS, 30 - day)
        return cls(year, MARCH, RomanEvent.KALENDS, 31 - day, leap=(day == 25))

    @classmethod
    def epoch(cls) -> int:
        """Day count of the first day of year 1 AUC."""
        return julian.fixed_from_ymd(julian.YEAR_ROME_FOUNDED, 1, 1)

    def to_julian(self) -> julian.Julian:
        return julian.Julian.decode(self._to_fixed())

    def auc_year(self) -> int:
        return julian.auc_year_from_julian(self.year)

    def quarter(self) -> int:
        return (self.month - 1) // 3 + 1

    def day_of_year(self) -> int:
        return self.to_julian().day_of_year()

    def week_of_year(self) -> int:
        return self.to_julian().week_of_year()
