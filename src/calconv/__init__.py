"""calconv public API.

Dates of every supported calendar convert through a single day count; most
users only need the functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    register_calendar,
    make_date,
    to_fixed,
    from_fixed,
    convert,
    weekday,
    today,
    make_moment,
    from_moment,
    from_jd,
    from_unix,
    now,
    format_date,
    render,
    list_formats,
    register_format,
)
from .calendars.base import CalendarDate
from .calendars.moment import Moment
from .core.clock import ClockTime, TimeOfDay
from .core.errors import (
    CalconvError,
    InvalidDateError,
    InvalidTimeError,
    UnknownCalendarError,
    UnknownFormatError,
    UnknownLanguageError,
)
from .core.types import DayCount
from .cycles.weekday import Weekday

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "register_calendar",
    "make_date",
    "to_fixed",
    "from_fixed",
    "convert",
    "weekday",
    "today",
    "make_moment",
    "from_moment",
    "from_jd",
    "from_unix",
    "now",
    "format_date",
    "render",
    "list_formats",
    "register_format",
    "CalendarDate",
    "Moment",
    "ClockTime",
    "TimeOfDay",
    "CalconvError",
    "InvalidDateError",
    "InvalidTimeError",
    "UnknownCalendarError",
    "UnknownFormatError",
    "UnknownLanguageError",
    "DayCount",
    "Weekday",
]
