"""
calconv.calendars.egyptian
--------------------------
The Egyptian and Armenian wandering years: twelve 30-day months followed by
five epagomenal days (stored as month 13), 365 days every year.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional

from ..core.types import CalendarId
from .base import MonthDayDate

# JD 1448638 (Nabonassar era, 747 BCE), floored to a whole day count.
EGYPTIAN_EPOCH = -272787
ARMENIAN_EPOCH = 201443

EPAGOMENAL_MONTH = 13


class EgyptianEpagomenae(IntEnum):
    """The five days upon the year, birthdays of the gods."""
    BIRTH_OF_OSIRIS = 1
    BIRTH_OF_HORUS = 2
    BIRTH_OF_SETH = 3
    BIRTH_OF_ISIS = 4
    BIRTH_OF_NEPHTHYS = 5


# Day names of the Armenian month, indexed by day 1..30.
ARMENIAN_DAY_NAMES = (
    "Areg", "Hrand", "Aram", "Margar", "Ahrank", "Mazdel", "Astlik", "Mihr",
    "Jopaber", "Murc", "Erezhan", "Ani", "Parkhar", "Vanat", "Aramazd", "Mani",
    "Asak", "Masis", "Anahit", "Aragats", "Gorgor", "Kordvik", "Tsmak", "Lusnak",
    "Tsron", "Npat", "Vahagn", "Sim", "Varag", "Giseravar",
)


@dataclass(frozen=True)
class _WanderingYear(MonthDayDate):
    EPOCH: ClassVar[int]
    COMPLEMENTARY_MONTH: ClassVar[Optional[int]] = EPAGOMENAL_MONTH

    @staticmethod
    def is_leap(year: int) -> bool:
        return False

    @classmethod
    def months_in_year(cls, year: int) -> int:
        return 13

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        return 5 if month == EPAGOMENAL_MONTH else 30

    @classmethod
    def days_in_year(cls, year: int) -> int:
        return 365

    @classmethod
    def new_year(cls, year: int) -> int:
        return cls.EPOCH + 365 * (year - 1)

    def _to_fixed(self) -> int:
        return self.EPOCH + 365 * (self.year - 1) + 30 * (self.month - 1) + self.day - 1

    @classmethod
    def _from_fixed(cls, n: int):
        days = n - cls.EPOCH
        year = days // 365 + 1
        month = (days % 365) // 30 + 1
        day = days - 365 * (year - 1) - 30 * (month - 1) + 1
        return cls(year, month, day)


@dataclass(frozen=True)
class Egyptian(_WanderingYear):
    NAME: ClassVar[str] = "egyptian"
    ID: ClassVar[CalendarId] = CalendarId("egyptian", "solar", ("year", "month", "day"))
    EPOCH: ClassVar[int] = EGYPTIAN_EPOCH

    def complementary(self) -> Optional[EgyptianEpagomenae]:
        if self.month != EPAGOMENAL_MONTH:
            return None
        return EgyptianEpagomenae(self.day)


@dataclass(frozen=True)
class Armenian(_WanderingYear):
    NAME: ClassVar[str] = "armenian"
    ID: ClassVar[CalendarId] = CalendarId("armenian", "solar", ("year", "month", "day"))
    EPOCH: ClassVar[int] = ARMENIAN_EPOCH

    def day_name(self) -> Optional[str]:
        """Each day of a regular month has its own name; epagomenal days have none."""
        if self.month == EPAGOMENAL_MONTH:
            return None
        return ARMENIAN_DAY_NAMES[self.day - 1]
