from __future__ import annotations
import math
from datetime import date, datetime, timedelta, timezone
from typing import Union

from .clock import SECONDS_PER_DAY
from .errors import UnrepresentableDate
from .types import DayCount

# Offsets between DayCount (Rata Die) and the other day-count scales.
JDN_OFFSET = 1721425     # JDN at DayCount 0
MJD_EPOCH = 678576       # DayCount of MJD 0 (1858-11-17)
UNIX_EPOCH = 719163      # DayCount of 1970-01-01

DayLike = Union[int, DayCount]


def to_jdn(n: DayLike) -> int:
    """DayCount -> Julian Day Number (the JD at noon of that civil day)."""
    return int(n) + JDN_OFFSET

def from_jdn(jdn: int) -> DayCount:
    return DayCount(jdn - JDN_OFFSET)

def to_mjd(n: DayLike) -> int:
    return int(n) - MJD_EPOCH

def from_mjd(mjd: int) -> DayCount:
    return DayCount(mjd + MJD_EPOCH)

def to_unix_day(n: DayLike) -> int:
    """DayCount -> days since 1970-01-01 (multiply by 86400 for a Unix timestamp)."""
    return int(n) - UNIX_EPOCH

def from_unix_day(days: int) -> DayCount:
    return DayCount(days + UNIX_EPOCH)


def from_date(d: date) -> DayCount:
    """Python proleptic-Gregorian ordinals coincide with Rata Die."""
    return DayCount(d.toordinal())

def to_date(n: DayLike) -> date:
    v = int(n)
    if not (date.min.toordinal() <= v <= date.max.toordinal()):
        raise UnrepresentableDate(f"day count {v} has no datetime.date equivalent (years 1..9999 only)")
    return date.fromordinal(v)

def today() -> DayCount:
    return from_date(date.today())


def gregorian_to_jdn(y: int, m: int, d: int) -> int:
    """Fliegel-Van Flandern: Gregorian date -> JDN, independent of the calendar classes."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return d + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


# ---------------------------------------------------------
# Moments: fractional day counts
# ---------------------------------------------------------

# Julian Dates count from noon, so JD 0.0 is half a day after the JDN 0 midnight.
JD_EPOCH = -JDN_OFFSET + 0.5


def moment_to_jd(t: float) -> float:
    """Moment -> Julian Date (days from noon)."""
    return t - JD_EPOCH

def moment_from_jd(jd: float) -> float:
    return JD_EPOCH + jd

def moment_to_unix(t: float) -> int:
    """Moment -> Unix timestamp, rounded to the nearest second."""
    return round(SECONDS_PER_DAY * (t - UNIX_EPOCH))

def moment_from_unix(seconds: float) -> float:
    return UNIX_EPOCH + seconds / SECONDS_PER_DAY


def moment_from_datetime(dt: datetime) -> float:
    """Aware datetimes are read in UTC; naive ones as civil time."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    seconds = 3600 * dt.hour + 60 * dt.minute + dt.second + dt.microsecond / 1e6
    return dt.toordinal() + seconds / SECONDS_PER_DAY

def moment_to_datetime(t: float) -> datetime:
    """Moment -> naive civil datetime, to the microsecond."""
    day = math.floor(t)
    midnight = datetime.combine(to_date(day), datetime.min.time())
    return midnight + timedelta(microseconds=round((t - day) * SECONDS_PER_DAY * 1e6))

def now() -> float:
    """Current moment in UTC."""
    return moment_from_datetime(datetime.now(timezone.utc))
