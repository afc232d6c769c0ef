"""
calconv.calendars.daycounts
---------------------------
Pure ordinal day counts, exposed as calendars so they take part in
conversion like any other date: Julian Day Number, Modified Julian Day,
Rata Die and days since the Unix epoch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core import time as scales
from ..core.types import CalendarId
from .base import CalendarDate


@dataclass(frozen=True)
class _Ordinal(CalendarDate):
    OFFSET: ClassVar[int]  # day count of ordinal 0

    day: int

    def _validate(self) -> None:
        if isinstance(self.day, bool) or not isinstance(self.day, int):
            raise TypeError(f"{type(self).__name__} requires an int day, got {type(self.day).__name__}")

    def _to_fixed(self) -> int:
        return self.day + self.OFFSET

    @classmethod
    def _from_fixed(cls, n: int):
        return cls(n - cls.OFFSET)

    @classmethod
    def epoch(cls) -> int:
        return cls.OFFSET

    def __int__(self) -> int:
        return self.day


@dataclass(frozen=True)
class JulianDayNumber(_Ordinal):
    NAME: ClassVar[str] = "jdn"
    ID: ClassVar[CalendarId] = CalendarId("jdn", "ordinal", ("day",), optional=False)
    OFFSET: ClassVar[int] = -scales.JDN_OFFSET


@dataclass(frozen=True)
class ModifiedJulianDay(_Ordinal):
    NAME: ClassVar[str] = "mjd"
    ID: ClassVar[CalendarId] = CalendarId("mjd", "ordinal", ("day",), optional=False)
    OFFSET: ClassVar[int] = scales.MJD_EPOCH


@dataclass(frozen=True)
class RataDie(_Ordinal):
    NAME: ClassVar[str] = "rd"
    ID: ClassVar[CalendarId] = CalendarId("rd", "ordinal", ("day",), optional=False)
    OFFSET: ClassVar[int] = 0


@dataclass(frozen=True)
class UnixDay(_Ordinal):
    NAME: ClassVar[str] = "unix"
    ID: ClassVar[CalendarId] = CalendarId("unix", "ordinal", ("day",), optional=False)
    OFFSET: ClassVar[int] = scales.UNIX_EPOCH
