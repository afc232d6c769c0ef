from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from .calendars.base import CalendarDate
from .calendars.moment import Moment
from .core import time as scales
from .core.calendar import CalendarRegistry, Fields
from .core.clock import ClockTime
from .core.types import DayCount
from .cycles.weekday import Weekday, weekday_of
from .display import presets
from .display.template import FormatTemplate, render as _render

_registry: Optional[CalendarRegistry] = None


def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry


# ============================================================
# Calendars
# ============================================================

def list_calendars() -> List[str]:
    return _reg().list()


def calendar_info(name: str) -> Dict[str, Any]:
    cls = _reg().get(name)
    return {
        "name": name,
        "class": cls.__name__,
        "family": cls.ID.family,
        "fields": list(cls.ID.fields),
        "optional": cls.ID.optional,
    }


def get_calendar(name: str) -> Type[CalendarDate]:
    return _reg().get(name)


def register_calendar(name: str, cls: Type[CalendarDate], *, overwrite: bool = False) -> None:
    _reg().register(name, cls, overwrite=overwrite)


def make_date(name: str, *fields: Any, **kwargs: Any) -> CalendarDate:
    """Validated construction through the registry: ``make_date("julian", 1752, 9, 3)``."""
    return _reg().make(name, kwargs if kwargs else fields)


# ============================================================
# Pivot
# ============================================================

def to_fixed(name: str, *fields: Any, **kwargs: Any) -> DayCount:
    return make_date(name, *fields, **kwargs).encode()


def from_fixed(name: str, n: DayCount | int) -> CalendarDate:
    return _reg().get(name).decode(n)


def convert(name_from: str, fields: Fields, name_to: str) -> CalendarDate:
    return _reg().convert(name_from, fields, name_to)


def weekday(n: DayCount | int) -> Weekday:
    return weekday_of(int(DayCount.of(n)))


def today(name: str = "gregorian") -> CalendarDate:
    return from_fixed(name, scales.today())


# ============================================================
# Moments
# ============================================================

def make_moment(name: str, *fields: Any, hours: int = 0, minutes: int = 0, seconds: float = 0.0) -> Moment:
    """``make_moment("gregorian", 1969, 7, 20, hours=20, minutes=17)``."""
    return Moment(make_date(name, *fields), ClockTime(hours, minutes, seconds))


def from_moment(name: str, t: float) -> Moment:
    """Float day count (Rata Die plus fraction of a day) -> moment in calendar ``name``."""
    return Moment.decode(_reg().get(name), t)


def from_jd(name: str, jd: float) -> Moment:
    return Moment.from_jd(_reg().get(name), jd)


def from_unix(name: str, seconds: float) -> Moment:
    return Moment.from_unix(_reg().get(name), seconds)


def now(name: str = "gregorian") -> Moment:
    """Current UTC moment in calendar ``name``."""
    return from_moment(name, scales.now())


# ============================================================
# Display
# ============================================================

def format_date(date: CalendarDate | Moment, name: Optional[str] = None, lang: Optional[str] = None) -> str:
    return presets.format_date(date, name, lang=lang)


def render(date: CalendarDate | Moment, template: str | FormatTemplate, lang: Optional[str] = None) -> str:
    return _render(date, template, lang=lang)


def list_formats() -> List[str]:
    return presets.list_formats()


def register_format(name: str, template: str, *, compl: Optional[str] = None, overwrite: bool = False) -> None:
    presets.register_format(name, template, compl=compl, overwrite=overwrite)
