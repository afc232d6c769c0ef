"""
calconv.calendars.iso
---------------------
ISO-8601 week dates: (year, week, day) with day 1=Monday .. 7=Sunday.

Week 1 is the week containing the year's first Thursday, so a year has 52
weeks, or 53 when January 1 or December 31 falls on a Thursday.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core.arith import amod
from ..core.errors import DayOutOfRange, WeekOutOfRange
from ..core.types import CalendarId
from ..cycles.weekday import Weekday, nth_kday, weekday_of
from . import gregorian as greg
from .base import CalendarDate, check_year


def is_long_year(year: int) -> bool:
    """True when the ISO year has 53 weeks."""
    jan1 = weekday_of(greg.fixed_from_ymd(year, 1, 1))
    dec31 = weekday_of(greg.fixed_from_ymd(year, 12, 31))
    return jan1 == Weekday.THURSDAY or dec31 == Weekday.THURSDAY


def weeks_in_year(year: int) -> int:
    return 53 if is_long_year(year) else 52


def fixed_from_iso(year: int, week: int, day: int) -> int:
    return nth_kday(week, Weekday.SUNDAY, greg.fixed_from_ymd(year - 1, 12, 28)) + day


@dataclass(frozen=True)
class ISO(CalendarDate):
    NAME: ClassVar[str] = "iso"
    ID: ClassVar[CalendarId] = CalendarId("iso", "solar", ("year", "week", "day"), optional=False)

    year: int
    week: int
    day: int

    is_leap = staticmethod(is_long_year)
    is_long_year = staticmethod(is_long_year)

    def _validate(self) -> None:
        check_year(self.year)
        n_weeks = weeks_in_year(self.year)
        if not (1 <= self.week <= n_weeks):
            raise WeekOutOfRange(f"week {self.week} not in 1..{n_weeks} for ISO year {self.year}")
        if not (1 <= self.day <= 7):
            raise DayOutOfRange(f"ISO weekday {self.day} not in 1..7")

    def _to_fixed(self) -> int:
        return fixed_from_iso(self.year, self.week, self.day)

    @classmethod
    def _from_fixed(cls, n: int) -> "ISO":
        approx = greg.year_from_fixed(n - 3)
        year = approx + 1 if n >= fixed_from_iso(approx + 1, 1, 1) else approx
        week = (n - fixed_from_iso(year, 1, 1)) // 7 + 1
        return cls(year, week, amod(n, 7))

    @classmethod
    def new_year(cls, year: int) -> int:
        return fixed_from_iso(year, 1, 1)

    @classmethod
    def epoch(cls) -> int:
        return fixed_from_iso(1, 1, 1)

    def day_of_year(self) -> int:
        return 7 * (self.week - 1) + self.day

    def week_of_year(self) -> int:
        return self.week

    def quarter(self) -> int:
        """Fourteen-week quarters, so week 53 falls in the fourth."""
        return (self.week - 1) // 14 + 1

    def iso_weekday(self) -> Weekday:
        return Weekday.from_iso_number(self.day)
