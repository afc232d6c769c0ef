class CalconvError(Exception):
    """Base error."""

class InvalidDateError(CalconvError, ValueError):
    """Raised when date fields do not describe a valid date."""

class YearOutOfRange(InvalidDateError):
    """Raised when a year lies outside the supported range (or is a missing year 0)."""

class MonthOutOfRange(InvalidDateError):
    """Raised when a month number does not exist in the given year."""

class DayOutOfRange(InvalidDateError):
    """Raised when a day does not exist in the given month and year."""

class WeekOutOfRange(InvalidDateError):
    """Raised when an ISO week number does not exist in the given year."""

class UnrepresentableDate(InvalidDateError):
    """Raised when a day count falls outside the supported domain."""

class InvalidTimeError(CalconvError, ValueError):
    """Raised when a time of day or clock reading is out of range."""

class HourOutOfRange(InvalidTimeError):
    """Raised when an hour is not in 0..23."""

class MinuteOutOfRange(InvalidTimeError):
    """Raised when a minute is not in 0..59."""

class SecondOutOfRange(InvalidTimeError):
    """Raised when a second is not in 0..60."""

class UnknownFormatError(CalconvError, KeyError):
    """Raised when a format preset name is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class UnknownCalendarError(CalconvError, KeyError):
    """Raised when a calendar name is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class UnknownLanguageError(CalconvError, KeyError):
    """Raised when no name table exists for a language code."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class TemplateSyntaxError(CalconvError, ValueError):
    """Raised when a format template cannot be parsed."""

class FeatureUnavailableError(CalconvError):
    """Raised when an optional feature (e.g. display) is disabled."""

class ConfigError(CalconvError):
    """Raised when an environment setting has an invalid value."""
