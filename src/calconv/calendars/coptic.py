"""
calconv.calendars.coptic
------------------------
Coptic and Ethiopic calendars: twelve 30-day months and a short thirteenth
month of 5 days (6 in leap years). Leap years are those with year % 4 == 3.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from ..core.types import CalendarId
from . import julian
from .base import MonthDayDate

COPTIC_EPOCH = julian.fixed_from_ymd(284, 8, 29)
ETHIOPIC_EPOCH = julian.fixed_from_ymd(8, 8, 29)

EPAGOMENAL_MONTH = 13


def is_leap(year: int) -> bool:
    return year % 4 == 3


@dataclass(frozen=True)
class _Alexandrian(MonthDayDate):
    EPOCH: ClassVar[int]
    COMPLEMENTARY_MONTH: ClassVar[Optional[int]] = EPAGOMENAL_MONTH

    is_leap = staticmethod(is_leap)

    @classmethod
    def months_in_year(cls, year: int) -> int:
        return 13

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        if month == EPAGOMENAL_MONTH:
            return 6 if is_leap(year) else 5
        return 30

    @classmethod
    def days_in_year(cls, year: int) -> int:
        return 366 if is_leap(year) else 365

    @classmethod
    def new_year(cls, year: int) -> int:
        return cls.EPOCH - 1 + 365 * (year - 1) + year // 4 + 1

    def _to_fixed(self) -> int:
        return (self.EPOCH - 1 + 365 * (self.year - 1) + self.year // 4
                + 30 * (self.month - 1) + self.day)

    @classmethod
    def _from_fixed(cls, n: int):
        year = (4 * (n - cls.EPOCH) + 1463) // 1461
        doy = n - cls.new_year(year)
        month = doy // 30 + 1
        day = doy - 30 * (month - 1) + 1
        return cls(year, month, day)


@dataclass(frozen=True)
class Coptic(_Alexandrian):
    NAME: ClassVar[str] = "coptic"
    ID: ClassVar[CalendarId] = CalendarId("coptic", "solar", ("year", "month", "day"))
    EPOCH: ClassVar[int] = COPTIC_EPOCH


@dataclass(frozen=True)
class Ethiopic(_Alexandrian):
    NAME: ClassVar[str] = "ethiopic"
    ID: ClassVar[CalendarId] = CalendarId("ethiopic", "solar", ("year", "month", "day"))
    EPOCH: ClassVar[int] = ETHIOPIC_EPOCH
