"""
calconv.display.presets
-----------------------
Named formats. A preset holds a main template, an optional template for
complementary days and optional per-calendar templates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from ..config import load_settings
from ..core.errors import FeatureUnavailableError, UnknownFormatError
from .template import FormatTemplate, parse_template, render

logger = logging.getLogger(__name__)

TemplateLike = Union[str, FormatTemplate]


def _as_template(t: TemplateLike) -> FormatTemplate:
    return t if isinstance(t, FormatTemplate) else parse_template(t)


@dataclass(frozen=True)
class PresetFormat:
    name: str
    template: FormatTemplate
    compl: Optional[FormatTemplate] = None
    calendars: Mapping[str, FormatTemplate] = field(default_factory=dict)

    def select(self, date: Any) -> FormatTemplate:
        if date.NAME in self.calendars:
            return self.calendars[date.NAME]
        if self.compl is not None and date.complementary() is not None:
            return self.compl
        return self.template


_PRESETS: Dict[str, PresetFormat] = {}


def register_format(
    name: str,
    template: TemplateLike,
    *,
    compl: Optional[TemplateLike] = None,
    calendars: Optional[Mapping[str, TemplateLike]] = None,
    overwrite: bool = False,
) -> PresetFormat:
    """Add a named format; raises KeyError if ``name`` is taken and not ``overwrite``."""
    if (not overwrite) and (name in _PRESETS):
        raise KeyError(f"Format '{name}' already exists. Use overwrite=True to replace.")
    preset = PresetFormat(
        name=name,
        template=_as_template(template),
        compl=None if compl is None else _as_template(compl),
        calendars={k: _as_template(v) for k, v in (calendars or {}).items()},
    )
    logger.debug("registering format %s -> %r", name, preset.template.source)
    _PRESETS[name] = preset
    return preset


def get_format(name: str) -> PresetFormat:
    if name not in _PRESETS:
        raise UnknownFormatError(f"Unknown format '{name}'. Available: {sorted(_PRESETS)}")
    return _PRESETS[name]


def list_formats() -> List[str]:
    return sorted(_PRESETS)


def format_date(date: Any, name: Optional[str] = None, lang: Optional[str] = None) -> str:
    """Render ``date`` with the preset ``name`` (default ``CALCONV_FORMAT``)."""
    settings = load_settings()
    if not settings.has_feature("display"):
        raise FeatureUnavailableError("formatting requires the 'display' feature")
    preset = get_format(name or settings.default_format)
    template = preset.select(date)
    logger.debug("format %s for %s uses %r", preset.name, date.NAME, template.source)
    return render(date, template, lang=lang)


# ---------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------

LONG_DATE = "[{weekday} ]{month_name} {day}, {year:!}[ {era}]"
LONG_COMPL = "{compl}[, {year:!}][ {era}]"
ROMAN_LONG = "{roman_day} {month_name}, {auc:!}[ {era}]"
ISO_LONG = "{weekday} W{week:02}, {year:!}[ {era}]"
DAY_COUNT = "{calendar} {day}"
DAY_COUNTS = ("jdn", "mjd", "rd", "unix")

LONG_CALENDARS = {"roman": ROMAN_LONG, "iso": ISO_LONG, **{k: DAY_COUNT for k in DAY_COUNTS}}
NUMERIC_FIELDS = {
    # ISO dates have weeks in place of months; Roman days are an event and a count.
    None: {"m": "{month:02}", "d": "{day:02}"},
    "iso": {"m": "W{week:02}", "d": "{day}"},
    "roman": {"m": "{month:02}", "d": "{event:.1}{count:02}[{bissextile:.1}]"},
}


def register_numeric(name: str, order: str, sep: str, year_width: int = 4) -> PresetFormat:
    """Register a numeric preset whose fields appear in ``order`` (e.g. ``"dmy"``)."""
    def build(fields: Mapping[str, str]) -> str:
        parts = dict(fields, y="{year:0%d}" % year_width)
        return sep.join(parts[k] for k in order)

    calendars = {k: build(v) for k, v in NUMERIC_FIELDS.items() if k is not None}
    calendars.update({k: "{day}" for k in DAY_COUNTS})
    return register_format(name, build(NUMERIC_FIELDS[None]), calendars=calendars)


register_numeric("iso", "ymd", "-")
register_numeric("yyyyy-mm-dd", "ymd", "-", year_width=5)
register_numeric("yyyy/mm/dd", "ymd", "/")
register_numeric("dd/mm/yyyy", "dmy", "/")
register_numeric("dd.mm.yyyy", "dmy", ".")
register_numeric("mm/dd/yyyy", "mdy", "/")
register_format("long", LONG_DATE, compl=LONG_COMPL, calendars=LONG_CALENDARS)
register_format(
    "long-era-abbr",
    LONG_DATE.replace("{era}", "{era_abbr}"),
    compl=LONG_COMPL.replace("{era}", "{era_abbr}"),
    calendars={k: v.replace("{era}", "{era_abbr}") for k, v in LONG_CALENDARS.items()},
)
register_format(
    "short",
    "[{weekday_abbr} ]{day:02} {month_abbr} {year}",
    compl="{compl:.3}[ {year}]",
    calendars={
        "roman": "{roman_day} {month_abbr} {auc}",
        "iso": "{weekday_abbr} W{week:02} {year}",
        **{k: DAY_COUNT for k in DAY_COUNTS},
    },
)
register_format(
    "year-week-day",
    "{year}-W{week:02}-{weekday_num}",
    compl="[{year}-]{compl:.3}",
    calendars={k: "{day}" for k in DAY_COUNTS},
)
register_format(
    "year-mdd",
    "{year}-{month_name:.1}{day:02}",
    compl="[{year}-]{compl:.3}",
    calendars={
        "roman": "{year}-{month_name:.1}{event:.1}{count:02}[{bissextile:.1}]",
        "iso": "{year}-W{week:02}-{day}",
        **{k: "{day}" for k in DAY_COUNTS},
    },
)
register_format("compl", "{compl}")
register_format("weekday", "{weekday}")
register_format("epoch-days", "{epoch_days}")
register_format("hh:mm:ss", "{hour:02}:{minute:02}:{second:02}")
register_format("h:mm-am", "{hour12}:{minute:02} {half_day}")
