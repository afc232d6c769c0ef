from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Tuple, Union, overload

from .errors import UnrepresentableDate

# Rata Die: DayCount 1 is Gregorian 0001-01-01.
DAYCOUNT_MAX = 2 ** 34
DAYCOUNT_MIN = -DAYCOUNT_MAX

YEAR_MAX = 2 ** 31 - 1
YEAR_MIN = -(2 ** 31)


@dataclass(frozen=True, order=True)
class DayCount:
    """Whole days elapsed since the shared epoch (Rata Die)."""
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"DayCount requires an int, got {type(self.value).__name__}")
        if not (DAYCOUNT_MIN <= self.value <= DAYCOUNT_MAX):
            raise UnrepresentableDate(
                f"day count {self.value} outside supported domain [{DAYCOUNT_MIN}, {DAYCOUNT_MAX}]"
            )

    @classmethod
    def of(cls, value: Union[int, "DayCount"]) -> "DayCount":
        if isinstance(value, DayCount):
            return value
        return cls(value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __add__(self, offset: int) -> "DayCount":
        if isinstance(offset, DayCount) or not isinstance(offset, int):
            return NotImplemented
        return DayCount(self.value + offset)

    __radd__ = __add__

    @overload
    def __sub__(self, other: "DayCount") -> int: ...
    @overload
    def __sub__(self, other: int) -> "DayCount": ...

    def __sub__(self, other):
        if isinstance(other, DayCount):
            return self.value - other.value
        if isinstance(other, int):
            return DayCount(self.value - other)
        return NotImplemented

    def difference(self, other: "DayCount") -> int:
        """Signed number of days from ``other`` to ``self``."""
        return self.value - other.value

    def __repr__(self) -> str:
        return f"DayCount({self.value})"


@dataclass(frozen=True)
class CalendarId:
    """Registry metadata for a calendar class."""
    name: str
    family: Literal["solar", "perennial", "ordinal", "cycle"]
    fields: Tuple[str, ...]
    optional: bool = True
