"""
calconv.calendars.french_rev
----------------------------
Arithmetic French Revolutionary calendar.

Twelve months of three 10-day décades, then the sansculottides (month 13):
five days, six in leap years. Year 1 began on Gregorian 1792-09-22.

Leap years follow the Romme proposal: every 4th year, except centuries not
divisible by 400, and except multiples of 4000. Two variants exist:
``FrenchRevArith`` tests the year itself, ``FrenchRevArithAdjusted`` tests
``year + 1`` so that years 3, 7, 11 are leap as they were historically.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional

from ..core.arith import amod
from ..core.types import CalendarId
from . import gregorian as greg
from .base import MonthDayDate

EPOCH = greg.fixed_from_ymd(1792, 9, 22)
SANSCULOTTIDES = 13


class DecadeDay(IntEnum):
    PRIMIDI = 1
    DUODI = 2
    TRIDI = 3
    QUARTIDI = 4
    QUINTIDI = 5
    SEXTIDI = 6
    SEPTIDI = 7
    OCTIDI = 8
    NONIDI = 9
    DECADI = 10


class Sansculottide(IntEnum):
    VERTU = 1
    GENIE = 2
    TRAVAIL = 3
    OPINION = 4
    RECOMPENSE = 5
    REVOLUTION = 6


def _is_romme_leap(y: int) -> bool:
    return y % 4 == 0 and (y % 400) not in (100, 200, 300) and y % 4000 != 0


def _leap_count(y: int) -> int:
    """Leap years among 1..y under the Romme rule."""
    return y // 4 - y // 100 + y // 400 - y // 4000


@dataclass(frozen=True)
class FrenchRevArith(MonthDayDate):
    NAME: ClassVar[str] = "french-rev"
    ID: ClassVar[CalendarId] = CalendarId("french-rev", "perennial", ("year", "month", "day"))
    COMPLEMENTARY_MONTH: ClassVar[Optional[int]] = SANSCULOTTIDES
    YEAR_SHIFT: ClassVar[int] = 0

    @classmethod
    def is_leap(cls, year: int) -> bool:
        return _is_romme_leap(year + cls.YEAR_SHIFT)

    @classmethod
    def months_in_year(cls, year: int) -> int:
        return 13

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        if month == SANSCULOTTIDES:
            return 6 if cls.is_leap(year) else 5
        return 30

    @classmethod
    def new_year(cls, year: int) -> int:
        return cls._fixed(year, 1, 1)

    @classmethod
    def _fixed(cls, year: int, month: int, day: int) -> int:
        return (EPOCH - 1 + 365 * (year - 1) + _leap_count(year + cls.YEAR_SHIFT - 1)
                + 30 * (month - 1) + day)

    def _to_fixed(self) -> int:
        return self._fixed(self.year, self.month, self.day)

    @classmethod
    def _from_fixed(cls, n: int):
        year = (4000 * (n - EPOCH + 2)) // 1460969 + 1
        # The mean-year estimate can be off by one in either direction.
        while n < cls._fixed(year, 1, 1):
            year -= 1
        while n >= cls._fixed(year + 1, 1, 1):
            year += 1
        month = 1 + (n - cls._fixed(year, 1, 1)) // 30
        day = 1 + n - cls._fixed(year, month, 1)
        return cls(year, month, day)

    def complementary(self) -> Optional[Sansculottide]:
        if self.month != SANSCULOTTIDES:
            return None
        return Sansculottide(self.day)

    def decade_day(self) -> Optional[DecadeDay]:
        if self.month == SANSCULOTTIDES:
            return None
        return DecadeDay(amod(self.day, 10))

    display_weekday = decade_day

    def week_of_year(self) -> Optional[int]:
        """Décade of the year, 1..36. Sansculottides belong to none."""
        if self.month == SANSCULOTTIDES:
            return None
        return 3 * (self.month - 1) + (self.day - 1) // 10 + 1


@dataclass(frozen=True)
class FrenchRevArithAdjusted(FrenchRevArith):
    NAME: ClassVar[str] = "french-rev-adjusted"
    ID: ClassVar[CalendarId] = CalendarId("french-rev-adjusted", "perennial", ("year", "month", "day"))
    YEAR_SHIFT: ClassVar[int] = 1
