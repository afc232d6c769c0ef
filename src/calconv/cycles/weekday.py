"""
calconv.cycles.weekday
----------------------
The seven-day week as a pure function of the day count.

DayCount 0 is a Sunday (so Gregorian 0001-01-01, DayCount 1, is a Monday).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from ..core.types import DayCount

REFERENCE_SUNDAY = 0


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def successor(self) -> "Weekday":
        return Weekday((self + 1) % 7)

    def iso_number(self) -> int:
        """ISO-8601 day number: Monday=1 .. Sunday=7."""
        return 7 if self == Weekday.SUNDAY else int(self)

    @classmethod
    def from_iso_number(cls, k: int) -> "Weekday":
        if not (1 <= k <= 7):
            raise ValueError(f"ISO weekday must be in 1..7, got {k}")
        return cls(k % 7)


def weekday_of(n: Union[int, DayCount]) -> Weekday:
    return Weekday((int(n) - REFERENCE_SUNDAY) % 7)


def on_or_before(k: int, n: int) -> int:
    """Day count of the k-day (0=Sunday) on or before n."""
    return n - ((n - k) % 7)

def on_or_after(k: int, n: int) -> int:
    return on_or_before(k, n + 6)

def nearest(k: int, n: int) -> int:
    return on_or_before(k, n + 3)

def before(k: int, n: int) -> int:
    return on_or_before(k, n - 1)

def after(k: int, n: int) -> int:
    return on_or_before(k, n + 7)

def nth_kday(nth: int, k: int, n: int) -> int:
    """
    The nth k-day after n (nth > 0) or before n (nth < 0).

    nth == 0 is meaningless and raises ValueError.
    """
    if nth > 0:
        return before(k, n) + 7 * nth
    if nth < 0:
        return after(k, n) + 7 * nth
    raise ValueError("nth must be non-zero")
