"""
calconv.cycles.akan
-------------------
The Akan 42-day cycle: a six-day prefix cycle running alongside the seven-day
stem cycle. Like the weekday, a day name is a pure function of the day count.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from ..core.arith import amod, interval_mod
from ..core.types import DayCount

CYCLE_START = 37
CYCLE_LENGTH = 42


class AkanPrefix(IntEnum):
    NWONA = 1
    NKYI = 2
    KURU = 3
    KWA = 4
    MONO = 5
    FO = 6


class AkanStem(IntEnum):
    WUKUO = 1
    YAW = 2
    FIE = 3
    MEMENE = 4
    KWASI = 5
    DWO = 6
    BENE = 7


@dataclass(frozen=True)
class AkanDay:
    prefix: AkanPrefix
    stem: AkanStem

    @classmethod
    def day_name(cls, n: int) -> "AkanDay":
        """Name of the n-th day of the cycle (n counted from CYCLE_START)."""
        return cls(AkanPrefix(amod(n, 6)), AkanStem(amod(n, 7)))

    @classmethod
    def from_fixed(cls, n: Union[int, DayCount]) -> "AkanDay":
        return cls.day_name(int(n) - CYCLE_START)

    def name_difference(self, other: "AkanDay") -> int:
        """Days (1..42) from a day named ``self`` to the next day named ``other``."""
        prefix_diff = int(other.prefix) - int(self.prefix)
        stem_diff = int(other.stem) - int(self.stem)
        return amod(prefix_diff + 36 * (stem_diff - prefix_diff), CYCLE_LENGTH)

    def position(self) -> int:
        """Position 1..42 in the cycle, NWONA WUKUO being 42."""
        return AkanDay(AkanPrefix.NWONA, AkanStem.WUKUO).name_difference(self)

    def on_or_before(self, n: Union[int, DayCount]) -> DayCount:
        """Latest day count <= n carrying this name."""
        date = int(n)
        diff = AkanDay.from_fixed(0).name_difference(self)
        return DayCount(interval_mod(diff, date, date - CYCLE_LENGTH))

    def label(self) -> str:
        return f"{self.prefix.name.title()} {self.stem.name.title()}"
