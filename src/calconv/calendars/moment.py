"""
calconv.calendars.moment
------------------------
A calendar date together with a clock time.

``Moment`` pivots through a float day count: the date supplies the whole
days and the clock the fraction. Calendar views (weekday, quarter, week,
complementary day) are those of the date.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Type

from ..core import time as scales
from ..core.clock import MIDNIGHT, ClockTime, TimeOfDay, split_moment
from .base import CalendarDate


@dataclass(frozen=True)
class Moment:
    date: CalendarDate
    time: ClockTime = MIDNIGHT

    def __post_init__(self) -> None:
        if not isinstance(self.date, CalendarDate):
            raise TypeError(f"date must be a CalendarDate, got {type(self.date).__name__}")
        if not isinstance(self.time, ClockTime):
            raise TypeError(f"time must be a ClockTime, got {type(self.time).__name__}")

    @property
    def NAME(self) -> str:
        return self.date.NAME

    # ---------------------------------------------------------
    # Pivot
    # ---------------------------------------------------------

    @classmethod
    def decode(cls, calendar: Type[CalendarDate], t: float) -> "Moment":
        """Float day count -> moment in ``calendar``."""
        day, fraction = split_moment(t)
        return cls(calendar.decode(day), TimeOfDay(fraction).to_clock())

    from_fixed = decode

    @classmethod
    def from_jd(cls, calendar: Type[CalendarDate], jd: float) -> "Moment":
        return cls.decode(calendar, scales.moment_from_jd(jd))

    @classmethod
    def from_unix(cls, calendar: Type[CalendarDate], seconds: float) -> "Moment":
        return cls.decode(calendar, scales.moment_from_unix(seconds))

    def encode(self) -> float:
        return int(self.date.encode()) + self.time_of_day().fraction

    to_fixed = encode

    def to_jd(self) -> float:
        return scales.moment_to_jd(self.encode())

    def to_unix(self) -> int:
        return scales.moment_to_unix(self.encode())

    def convert(self, target: Type[CalendarDate]) -> "Moment":
        """Same instant in another calendar; the clock time is unchanged."""
        return Moment(self.date.convert(target), self.time)

    def time_of_day(self) -> TimeOfDay:
        return self.time.to_time_of_day()

    def fields(self) -> Dict[str, Any]:
        out = self.date.fields()
        out.update(hours=self.time.hours, minutes=self.time.minutes, seconds=self.time.seconds)
        return out

    # ---------------------------------------------------------
    # Views of the date
    # ---------------------------------------------------------

    def weekday(self):
        return self.date.weekday()

    def display_weekday(self):
        return self.date.display_weekday()

    def complementary(self):
        return self.date.complementary()

    def quarter(self) -> int:
        return self.date.quarter()

    def week_of_year(self) -> Optional[int]:
        return self.date.week_of_year()

    def format(self, name: str, lang: Optional[str] = None) -> str:
        from ..display.presets import format_date
        return format_date(self, name, lang=lang)
