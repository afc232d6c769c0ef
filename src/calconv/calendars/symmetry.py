"""
calconv.calendars.symmetry
--------------------------
Irv Bromberg's Symmetry calendars.

Every year starts on a Monday and has 52 weeks, or 53 in leap years where the
extra week is a short thirteenth month (Irvember). Quarters are 91 days:

- Symmetry454: months of 4, 5 and 4 weeks (28, 35, 28 days).
- Symmetry010: months of 30, 31 and 30 days.

Leap years follow ``(L*y + K) mod C < L``; the default variants track the
northward equinox year (C=293), the "solstice" variants the northern solstice
year (C=389).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar, Literal

from ..core.arith import ceil_div
from ..core.types import CalendarId
from .base import MonthDayDate

EPOCH = 1
IRVEMBER = 13


@dataclass(frozen=True)
class LeapRule:
    cycle: int   # C
    leaps: int   # L
    offset: int  # K

    def __post_init__(self) -> None:
        if not (0 < self.leaps < self.cycle):
            raise ValueError("Require 0 < L < C")

    @property
    def mean_year(self) -> Fraction:
        return 364 + Fraction(7 * self.leaps, self.cycle)

    def is_leap(self, year: int) -> bool:
        return (self.leaps * year + self.offset) % self.cycle < self.leaps

    def new_year(self, year: int) -> int:
        e = year - 1
        return EPOCH + 364 * e + 7 * ((self.leaps * e + self.offset) // self.cycle)


EQUINOX = LeapRule(cycle=293, leaps=52, offset=146)
SOLSTICE = LeapRule(cycle=389, leaps=69, offset=194)


@dataclass(frozen=True)
class _Symmetry(MonthDayDate):
    RULE: ClassVar[LeapRule]
    STYLE: ClassVar[Literal["454", "010"]]

    @classmethod
    def is_leap(cls, year: int) -> bool:
        return cls.RULE.is_leap(year)

    @classmethod
    def months_in_year(cls, year: int) -> int:
        return 13 if cls.RULE.is_leap(year) else 12

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        if month == IRVEMBER:
            return 7
        if cls.STYLE == "454":
            return 28 + 7 * ((month % 3) // 2)
        return 30 + (month % 3) // 2

    @classmethod
    def days_before_month(cls, month: int) -> int:
        if cls.STYLE == "454":
            return 28 * (month - 1) + 7 * (month // 3)
        return 30 * (month - 1) + month // 3

    @classmethod
    def new_year(cls, year: int) -> int:
        return cls.RULE.new_year(year)

    @classmethod
    def year_from_fixed(cls, n: int) -> int:
        year = math.ceil((n - EPOCH) / cls.RULE.mean_year)
        start = cls.new_year(year)
        if start < n and n - start >= 364:
            if n >= cls.new_year(year + 1):
                return year + 1
        elif start > n:
            return year - 1
        return year

    def _to_fixed(self) -> int:
        return self.new_year(self.year) + self.days_before_month(self.month) + self.day - 1

    @classmethod
    def _from_fixed(cls, n: int):
        year = cls.year_from_fixed(n)
        doy = n - cls.new_year(year) + 1
        week = ceil_div(doy, 7)
        quarter = ceil_div(4 * week, 53)
        day_of_quarter = doy - 91 * (quarter - 1)
        if cls.STYLE == "454":
            week_of_quarter = ceil_div(day_of_quarter, 7)
            month_of_quarter = ceil_div(2 * week_of_quarter, 9)
        else:
            month_of_quarter = ceil_div(2 * day_of_quarter, 61)
        month = 3 * (quarter - 1) + month_of_quarter
        return cls(year, month, doy - cls.days_before_month(month))


@dataclass(frozen=True)
class Symmetry454(_Symmetry):
    NAME: ClassVar[str] = "symmetry454"
    ID: ClassVar[CalendarId] = CalendarId("symmetry454", "perennial", ("year", "month", "day"))
    RULE: ClassVar[LeapRule] = EQUINOX
    STYLE: ClassVar[Literal["454", "010"]] = "454"


@dataclass(frozen=True)
class Symmetry010(_Symmetry):
    NAME: ClassVar[str] = "symmetry010"
    ID: ClassVar[CalendarId] = CalendarId("symmetry010", "perennial", ("year", "month", "day"))
    RULE: ClassVar[LeapRule] = EQUINOX
    STYLE: ClassVar[Literal["454", "010"]] = "010"


@dataclass(frozen=True)
class Symmetry454Solstice(_Symmetry):
    NAME: ClassVar[str] = "symmetry454-solstice"
    ID: ClassVar[CalendarId] = CalendarId("symmetry454-solstice", "perennial", ("year", "month", "day"))
    RULE: ClassVar[LeapRule] = SOLSTICE
    STYLE: ClassVar[Literal["454", "010"]] = "454"


@dataclass(frozen=True)
class Symmetry010Solstice(_Symmetry):
    NAME: ClassVar[str] = "symmetry010-solstice"
    ID: ClassVar[CalendarId] = CalendarId("symmetry010-solstice", "perennial", ("year", "month", "day"))
    RULE: ClassVar[LeapRule] = SOLSTICE
    STYLE: ClassVar[Literal["454", "010"]] = "010"
