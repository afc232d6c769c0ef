"""
calconv.calendars.base
----------------------
Shared behaviour of every calendar date class.

A calendar only has to supply the pair of pivot functions
(``_to_fixed`` / ``_from_fixed``) and its field validation; conversion,
ordering, day arithmetic and weekday derivation are inherited from here.
"""

from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Dict, Optional, Type, TypeVar

from ..core.errors import (
    DayOutOfRange,
    MonthOutOfRange,
    UnrepresentableDate,
    YearOutOfRange,
)
from ..core.types import DAYCOUNT_MAX, DAYCOUNT_MIN, YEAR_MAX, YEAR_MIN, CalendarId, DayCount
from ..cycles.weekday import Weekday, weekday_of

D = TypeVar("D", bound="CalendarDate")
T = TypeVar("T", bound="CalendarDate")


class CalendarDate:
    """
    Base for immutable calendar dates.

    Subclasses are frozen dataclasses. Construction validates the fields
    (``_validate``) and then checks that the resulting day count lies inside the
    supported domain, so an instance that exists is always encodable.
    """
    NAME: ClassVar[str] = ""
    ID: ClassVar[CalendarId]

    def __post_init__(self) -> None:
        self._validate()
        n = self._to_fixed()
        if not (DAYCOUNT_MIN <= n <= DAYCOUNT_MAX):
            raise UnrepresentableDate(
                f"{self!r} lies outside the supported day-count domain"
            )

    # ---------------------------------------------------------
    # Calendar-specific hooks
    # ---------------------------------------------------------

    def _validate(self) -> None:
        raise NotImplementedError

    def _to_fixed(self) -> int:
        raise NotImplementedError

    @classmethod
    def _from_fixed(cls: Type[D], n: int) -> D:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Construction and pivot
    # ---------------------------------------------------------

    @classmethod
    def epoch(cls) -> int:
        """Day count of the first day of the calendar's era."""
        raise NotImplementedError

    @classmethod
    def try_new(cls: Type[D], *args: Any, **kwargs: Any) -> D:
        """Validated construction; raises an InvalidDateError subclass on bad fields."""
        return cls(*args, **kwargs)

    @classmethod
    def decode(cls: Type[D], n: DayCount | int) -> D:
        """DayCount -> date. Total over the supported domain."""
        return cls._from_fixed(int(DayCount.of(n)))

    from_fixed = decode

    def encode(self) -> DayCount:
        return DayCount(self._to_fixed())

    to_fixed = encode

    def convert(self, target: Type[T]) -> T:
        return target.decode(self.encode())

    def fields(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}

    # ---------------------------------------------------------
    # Ordering and day arithmetic
    # ---------------------------------------------------------

    def _key(self, other: Any) -> Optional[int]:
        if type(other) is not type(self):
            return None
        return other._to_fixed()

    def __lt__(self, other: Any) -> bool:
        k = self._key(other)
        if k is None:
            return NotImplemented
        return self._to_fixed() < k

    def __le__(self, other: Any) -> bool:
        k = self._key(other)
        if k is None:
            return NotImplemented
        return self._to_fixed() <= k

    def __gt__(self, other: Any) -> bool:
        k = self._key(other)
        if k is None:
            return NotImplemented
        return self._to_fixed() > k

    def __ge__(self, other: Any) -> bool:
        k = self._key(other)
        if k is None:
            return NotImplemented
        return self._to_fixed() >= k

    def __add__(self: D, days: int) -> D:
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return type(self).decode(self.encode() + days)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, CalendarDate):
            if type(other) is not type(self):
                return NotImplemented
            return self.encode() - other.encode()
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self).decode(self.encode() - other)
        return NotImplemented

    # ---------------------------------------------------------
    # Derived views
    # ---------------------------------------------------------

    def weekday(self) -> Weekday:
        return weekday_of(self._to_fixed())

    def display_weekday(self) -> Optional[Any]:
        """The weekday a formatted date shows; perennial calendars override this."""
        return self.weekday()

    def complementary(self) -> Optional[Any]:
        """Named day outside the regular months, if any."""
        return None

    def format(self, name: str, lang: Optional[str] = None) -> str:
        from ..display.presets import format_date
        return format_date(self, name, lang=lang)


def check_year(year: int) -> None:
    if isinstance(year, bool) or not isinstance(year, int):
        raise TypeError(f"year must be an int, got {type(year).__name__}")
    if not (YEAR_MIN <= year <= YEAR_MAX):
        raise YearOutOfRange(f"year {year} outside [{YEAR_MIN}, {YEAR_MAX}]")


@dataclasses.dataclass(frozen=True)
class MonthDayDate(CalendarDate):
    """
    Year/month/day calendars whose months are numbered from 1.

    Subclasses define ``months_in_year``, ``days_in_month`` and
    ``new_year``; month and day validation is generic.
    """
    year: int
    month: int
    day: int

    # Month number holding epagomenal / complementary days, if any.
    COMPLEMENTARY_MONTH: ClassVar[Optional[int]] = None

    @classmethod
    def valid_year(cls, year: int) -> bool:
        return True

    @classmethod
    def months_in_year(cls, year: int) -> int:
        return 12

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        raise NotImplementedError

    @classmethod
    def new_year(cls, year: int) -> int:
        """Day count of the first day of ``year``."""
        raise NotImplementedError

    @classmethod
    def epoch(cls) -> int:
        return cls.new_year(1)

    @classmethod
    def days_in_year(cls, year: int) -> int:
        return sum(cls.days_in_month(year, m) for m in range(1, cls.months_in_year(year) + 1))

    def _validate(self) -> None:
        check_year(self.year)
        if not self.valid_year(self.year):
            raise YearOutOfRange(f"{type(self).__name__} has no year {self.year}")
        n_months = self.months_in_year(self.year)
        if not (1 <= self.month <= n_months):
            raise MonthOutOfRange(f"month {self.month} not in 1..{n_months} for year {self.year}")
        n_days = self.days_in_month(self.year, self.month)
        if not (1 <= self.day <= n_days):
            raise DayOutOfRange(
                f"day {self.day} not in 1..{n_days} for {self.year}-{self.month:02d}"
            )

    def day_of_year(self) -> int:
        return self._to_fixed() - self.new_year(self.year) + 1

    def week_of_year(self) -> int:
        return (self._to_fixed() - self.new_year(self.year)) // 7 + 1

    def quarter(self) -> int:
        return min(4, (self.month - 1) // 3 + 1)

    def is_complementary(self) -> bool:
        return self.COMPLEMENTARY_MONTH is not None and self.month == self.COMPLEMENTARY_MONTH
