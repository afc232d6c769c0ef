"""
calconv.display.template
------------------------
Format templates: parsing and rendering.

A template is literal text with ``{token}`` or ``{token:spec}`` fields, where
``spec`` is ``[[fill]align][sign][0][width][.maxlen][case][R]``. A bracketed
section ``[...]`` is dropped unless every token inside it has a value.
``{{ }} [[ ]]`` stand for literal braces and brackets.

    >>> render(Gregorian(2025, 7, 26), "{weekday} {day} {month_name:.3U}")
    'Saturday 26 JUL'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from ..calendars.moment import Moment
from ..config import load_settings
from ..core.clock import MIDNIGHT, ClockTime
from ..core.errors import FeatureUnavailableError, TemplateSyntaxError
from .names import NameTable, get_table
from .tokens import CLOCK_TOKENS, TOKENS, Value, roman_numeral

_SPEC_RE = re.compile(
    r"^(?:(?P<fill>.)?(?P<align>[<>^]))?"
    r"(?P<sign>[+\-!])?"
    r"(?P<zero>0)?"
    r"(?P<width>[1-9]\d*)?"
    r"(?:\.(?P<maxlen>\d+))?"
    r"(?P<case>[ULT])?"
    r"(?P<roman>R)?$"
)


@dataclass(frozen=True)
class FieldSpec:
    fill: str = " "
    align: Optional[str] = None
    sign: str = "-"
    zero: bool = False
    width: int = 0
    maxlen: Optional[int] = None
    case: Optional[str] = None
    roman: bool = False


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Token:
    name: str
    spec: FieldSpec = FieldSpec()


@dataclass(frozen=True)
class Section:
    """Optional part of a template."""
    parts: Tuple[Union[Literal, Token], ...]


Segment = Union[Literal, Token, Section]


@dataclass(frozen=True)
class FormatTemplate:
    source: str
    segments: Tuple[Segment, ...]

    def tokens(self) -> List[str]:
        out: List[str] = []
        for seg in self.segments:
            parts = seg.parts if isinstance(seg, Section) else (seg,)
            out.extend(p.name for p in parts if isinstance(p, Token))
        return out


# ---------------------------------------------------------
# Parsing
# ---------------------------------------------------------

def parse_spec(text: str) -> FieldSpec:
    m = _SPEC_RE.match(text)
    if m is None:
        raise TemplateSyntaxError(f"bad field spec {text!r}")
    g = m.groupdict()
    return FieldSpec(
        fill=g["fill"] or " ",
        align=g["align"],
        sign=g["sign"] or "-",
        zero=g["zero"] is not None,
        width=int(g["width"] or 0),
        maxlen=None if g["maxlen"] is None else int(g["maxlen"]),
        case=g["case"],
        roman=g["roman"] is not None,
    )


def _parse_token(body: str, source: str) -> Token:
    name, _, spec = body.partition(":")
    if name not in TOKENS and name not in CLOCK_TOKENS:
        raise TemplateSyntaxError(f"unknown token {name!r} in {source!r}")
    return Token(name, parse_spec(spec) if spec else FieldSpec())


def parse_template(source: str) -> FormatTemplate:
    """Parse ``source``; raises TemplateSyntaxError on malformed input."""
    segments: List[Segment] = []
    section: Optional[List[Union[Literal, Token]]] = None
    buf: List[str] = []

    def flush() -> None:
        if buf:
            (segments if section is None else section).append(Literal("".join(buf)))
            buf.clear()

    i = 0
    while i < len(source):
        c = source[i]
        if c in "{}[]" and source[i + 1:i + 2] == c:
            buf.append(c)
            i += 2
            continue
        if c == "{":
            j = source.find("}", i + 1)
            if j < 0:
                raise TemplateSyntaxError(f"unclosed '{{' at position {i} in {source!r}")
            flush()
            token = _parse_token(source[i + 1:j], source)
            (segments if section is None else section).append(token)
            i = j + 1
            continue
        if c == "}":
            raise TemplateSyntaxError(f"unmatched '}}' at position {i} in {source!r}")
        if c == "[":
            if section is not None:
                raise TemplateSyntaxError(f"nested '[' at position {i} in {source!r}")
            flush()
            section = []
        elif c == "]":
            if section is None:
                raise TemplateSyntaxError(f"unmatched ']' at position {i} in {source!r}")
            flush()
            segments.append(Section(tuple(section)))
            section = None
        else:
            buf.append(c)
        i += 1

    if section is not None:
        raise TemplateSyntaxError(f"unclosed '[' in {source!r}")
    flush()
    return FormatTemplate(source, tuple(segments))


# ---------------------------------------------------------
# Rendering
# ---------------------------------------------------------

def _pad(text: str, spec: FieldSpec, default_align: str) -> str:
    if len(text) >= spec.width:
        return text
    align = spec.align or default_align
    if align == "<":
        return text.ljust(spec.width, spec.fill)
    if align == ">":
        return text.rjust(spec.width, spec.fill)
    return text.center(spec.width, spec.fill)


def _format_number(value: int, spec: FieldSpec) -> str:
    digits = str(abs(value))
    if spec.maxlen is not None:
        digits = digits[:spec.maxlen]
    if spec.sign == "+":
        sign = "-" if value < 0 else "+"
    elif spec.sign == "!":
        sign = ""
    else:
        sign = "-" if value < 0 else ""
    if spec.zero:
        return sign + digits.rjust(spec.width - len(sign), "0")
    return _pad(sign + digits, spec, ">")


def _format_text(text: str, spec: FieldSpec) -> str:
    if spec.maxlen is not None:
        text = text[:spec.maxlen]
    if spec.case == "U":
        text = text.upper()
    elif spec.case == "L":
        text = text.lower()
    elif spec.case == "T":
        text = text.title()
    return _pad(text, spec, "<")


def format_value(value: Value, spec: FieldSpec) -> str:
    if value is None:
        return ""
    if isinstance(value, int):
        if spec.roman and 0 < value < 4000:
            return _format_text(roman_numeral(value), spec)
        return _format_number(int(value), spec)
    return _format_text(value, spec)


def _render_part(date: Any, clock: ClockTime, part: Union[Literal, Token], table: NameTable) -> Optional[str]:
    if isinstance(part, Literal):
        return part.text
    if part.name in CLOCK_TOKENS:
        value = CLOCK_TOKENS[part.name](clock, table)
    else:
        value = TOKENS[part.name](date, table)
    if value is None:
        return None
    return format_value(value, part.spec)


def render(date: Any, template: Union[str, FormatTemplate], lang: Optional[str] = None) -> str:
    """Render ``date`` through ``template`` in language ``lang``.

    Args:
        date: Any calendar date, or a Moment (plain dates render at midnight).
        template: Template source or a parsed FormatTemplate.
        lang: Name-table language; defaults to ``CALCONV_LANG``.

    Raises:
        FeatureUnavailableError: If the display feature is disabled.
        TemplateSyntaxError: If ``template`` is a malformed string.
        UnknownLanguageError: If ``lang`` has no name table.
    """
    settings = load_settings()
    if not settings.has_feature("display"):
        raise FeatureUnavailableError("formatting requires the 'display' feature")
    if isinstance(template, str):
        template = parse_template(template)
    table = get_table(lang or settings.lang)
    date, clock = (date.date, date.time) if isinstance(date, Moment) else (date, MIDNIGHT)

    out: List[str] = []
    for seg in template.segments:
        if isinstance(seg, Section):
            parts = [_render_part(date, clock, p, table) for p in seg.parts]
            if all(p is not None for p in parts):
                out.extend(parts)  # type: ignore[arg-type]
            continue
        out.append(_render_part(date, clock, seg, table) or "")
    return "".join(out)
