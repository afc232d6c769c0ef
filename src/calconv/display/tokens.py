"""Token resolvers: each maps a date and a name table to a number, a string or None."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Union

from ..calendars.tranquility import Tranquility
from ..core.clock import ClockTime
from ..cycles.weekday import Weekday
from . import names
from .names import NameTable

Value = Optional[Union[int, str]]
Resolver = Callable[[Any, NameTable], Value]
ClockResolver = Callable[[ClockTime, NameTable], Value]

_NUMERALS = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)


def roman_numeral(n: int) -> str:
    if not (0 < n < 4000):
        raise ValueError(f"no Roman numeral for {n}")
    out = []
    for value, letters in _NUMERALS:
        q, n = divmod(n, value)
        out.append(letters * q)
    return "".join(out)


def _method(name: str) -> Resolver:
    def resolve(date: Any, table: NameTable) -> Value:
        fn = getattr(date, name, None)
        return None if fn is None else fn()
    return resolve


def _field(name: str) -> Resolver:
    return lambda date, table: getattr(date, name, None)


def _year(date: Any, table: NameTable) -> Value:
    # Tranquility year 0 is a single unnumbered day.
    if isinstance(date, Tranquility) and date.year == 0:
        return None
    return getattr(date, "year", None)


def _abbr(resolver: Resolver, size: int = 3) -> Resolver:
    def resolve(date: Any, table: NameTable) -> Value:
        text = resolver(date, table)
        return None if text is None else str(text)[:size]
    return resolve


def _month_name(date: Any, table: NameTable) -> Value:
    return names.month_name(date, table)


def _weekday(date: Any, table: NameTable) -> Value:
    return names.weekday_name(date.display_weekday(), table)


def _weekday_num(date: Any, table: NameTable) -> Value:
    wd = date.display_weekday()
    if wd is None:
        return None
    if isinstance(wd, Weekday):
        return wd.iso_number()
    return int(wd)


def _epoch_days(date: Any, table: NameTable) -> Value:
    return int(date.encode()) - type(date).epoch()


def _era(abbreviated: bool) -> Resolver:
    return lambda date, table: names.era_name(date, table, abbreviated=abbreviated)


def _event(date: Any, table: NameTable) -> Value:
    event = getattr(date, "event", None)
    if event is None:
        return None
    return table.roman[event.name.lower()]


def _roman_day(date: Any, table: NameTable) -> Value:
    event = _event(date, table)
    if event is None:
        return None
    words = table.roman
    if date.count == 1:
        return f"{event} {words['of']}"
    if date.count == 2:
        return f"{words['pridie']} {event}"
    parts = [words["ante_diem"]]
    if date.leap:
        parts.append(words["bissextum"])
    parts += [roman_numeral(date.count), event]
    return " ".join(parts)


def _bissextile(date: Any, table: NameTable) -> Value:
    return table.roman["bissextum"] if getattr(date, "leap", False) else None


TOKENS: Dict[str, Resolver] = {
    "year": _year,
    "month": _field("month"),
    "month_name": _month_name,
    "month_abbr": _abbr(_month_name),
    "day": _field("day"),
    "day_name": _method("day_name"),
    "weekday": _weekday,
    "weekday_abbr": _abbr(_weekday),
    "weekday_num": _weekday_num,
    "day_of_year": _method("day_of_year"),
    "week": _method("week_of_year"),
    "quarter": _method("quarter"),
    "epoch_days": _epoch_days,
    "compl": lambda date, table: names.complementary_name(date, table),
    "era": _era(False),
    "era_abbr": _era(True),
    "calendar": lambda date, table: names.calendar_name(date.NAME, table),
    "event": _event,
    "count": _field("count"),
    "roman_day": _roman_day,
    "bissextile": _bissextile,
    "auc": _method("auc_year"),
}


def _half_day(abbreviated: bool) -> ClockResolver:
    def resolve(clock: ClockTime, table: NameTable) -> Value:
        index = (0 if clock.is_am() else 1) + (2 if abbreviated else 0)
        return table.half_days[index]
    return resolve


# Clock tokens read the time of a Moment; plain dates are at midnight.
CLOCK_TOKENS: Dict[str, ClockResolver] = {
    "hour": lambda clock, table: clock.hours,
    "hour12": lambda clock, table: clock.hour12,
    "minute": lambda clock, table: clock.minutes,
    "second": lambda clock, table: int(clock.seconds),
    "half_day": _half_day(True),
    "half_day_name": _half_day(False),
}
