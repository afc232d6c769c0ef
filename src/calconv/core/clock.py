"""
calconv.core.clock
------------------
Time of day.

A moment is a float day count: the integer part is the civil day (Rata Die)
and the fractional part the time elapsed since midnight. ``TimeOfDay`` holds
that fraction and ``ClockTime`` its hours, minutes and seconds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .arith import amod
from .errors import HourOutOfRange, InvalidTimeError, MinuteOutOfRange, SecondOutOfRange

SECONDS_PER_DAY = 86400
# Last representable instant before the next midnight.
_LAST_INSTANT = math.nextafter(1.0, 0.0)


def split_moment(t: float) -> Tuple[int, float]:
    """Split a moment into its day and its fraction of a day, 0 <= fraction < 1."""
    if not math.isfinite(t):
        raise InvalidTimeError(f"moment {t!r} is not a finite number")
    day = math.floor(t)
    fraction = t - day
    if fraction >= 1.0:
        # -1e-17 rounds to the next midnight.
        return day + 1, 0.0
    return int(day), fraction


@dataclass(frozen=True)
class TimeOfDay:
    fraction: float = 0.0

    def __post_init__(self) -> None:
        if not (0.0 <= self.fraction < 1.0):
            raise InvalidTimeError(f"time of day {self.fraction!r} not in [0, 1)")

    @classmethod
    def of(cls, t: float) -> "TimeOfDay":
        """Time of day of a moment."""
        return cls(split_moment(t)[1])

    @classmethod
    def from_clock(cls, clock: "ClockTime") -> "TimeOfDay":
        seconds = 3600 * clock.hours + 60 * clock.minutes + clock.seconds
        # A leap second at 23:59:60 stays inside the day.
        return cls(min(seconds / SECONDS_PER_DAY, _LAST_INSTANT))

    def to_clock(self) -> "ClockTime":
        # Rounded to microseconds so that whole seconds survive the float round trip.
        total = min(round(self.fraction * SECONDS_PER_DAY, 6), SECONDS_PER_DAY - 1e-6)
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        return ClockTime(int(hours), int(minutes), seconds)

    def is_am(self) -> bool:
        return self.fraction < 0.5


@dataclass(frozen=True)
class ClockTime:
    """Hours 0..23, minutes 0..59 and seconds 0..60 (60 being a leap second)."""

    hours: int = 0
    minutes: int = 0
    seconds: float = 0.0

    def __post_init__(self) -> None:
        if not (0 <= self.hours <= 23):
            raise HourOutOfRange(f"hour {self.hours} not in 0..23")
        if not (0 <= self.minutes <= 59):
            raise MinuteOutOfRange(f"minute {self.minutes} not in 0..59")
        if not (0.0 <= self.seconds <= 60.0):
            raise SecondOutOfRange(f"second {self.seconds} not in 0..60")

    def to_time_of_day(self) -> TimeOfDay:
        return TimeOfDay.from_clock(self)

    @property
    def hour12(self) -> int:
        """Hour on a 12-hour dial, 1..12."""
        return amod(self.hours, 12)

    def is_am(self) -> bool:
        return self.hours < 12


MIDNIGHT = ClockTime()
NOON = ClockTime(12)
