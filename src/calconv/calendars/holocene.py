"""Holocene (Human Era) calendar: Gregorian months, years shifted by 10000."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core.types import CalendarId
from . import gregorian as greg
from .base import MonthDayDate

YEAR_OFFSET = 10000
EPOCH = greg.fixed_from_ymd(1 - YEAR_OFFSET, 1, 1)


@dataclass(frozen=True)
class Holocene(MonthDayDate):
    NAME: ClassVar[str] = "holocene"
    ID: ClassVar[CalendarId] = CalendarId("holocene", "solar", ("year", "month", "day"))

    @staticmethod
    def is_leap(year: int) -> bool:
        return greg.is_leap(year - YEAR_OFFSET)

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        return greg.month_length(year - YEAR_OFFSET, month)

    @classmethod
    def new_year(cls, year: int) -> int:
        return greg.fixed_from_ymd(year - YEAR_OFFSET, 1, 1)

    def _to_fixed(self) -> int:
        return greg.fixed_from_ymd(self.year - YEAR_OFFSET, self.month, self.day)

    @classmethod
    def _from_fixed(cls, n: int) -> "Holocene":
        y, m, d = greg.ymd_from_fixed(n)
        return cls(y + YEAR_OFFSET, m, d)
