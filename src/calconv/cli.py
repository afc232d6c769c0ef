from __future__ import annotations

import argparse
import logging
from typing import Any, List, Optional

from .config import LANGUAGES, load_settings
from .core.errors import CalconvError

logger = logging.getLogger("calconv.cli")

EXIT_ERROR = 2


def _parse_field(s: str) -> Any:
    low = s.lower()
    if low in ("true", "false"):
        return low == "true"
    try:
        return int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"calendar fields are integers (or true/false), got {s!r}") from None


def _parse_clock(s: str) -> Any:
    from .core.clock import ClockTime

    parts = s.split(":")
    try:
        if not (2 <= len(parts) <= 3):
            raise ValueError(s)
        return ClockTime(int(parts[0]), int(parts[1]), float(parts[2]) if len(parts) == 3 else 0.0)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected HH:MM or HH:MM:SS, got {s!r} ({e})") from None


def _fields_line(date: Any) -> str:
    return " ".join(str(int(v)) if not isinstance(v, bool) else str(v).lower() for v in date.fields().values())


def _print_date(date: Any) -> None:
    print(f"{date.NAME}: {_fields_line(date)}")
    if load_settings().has_feature("display"):
        print(date.format("long"))


def cmd_convert(argv: List[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv convert", description="Convert a date between calendars")
    p.add_argument("source", help="calendar of the given fields")
    p.add_argument("target", help="calendar to convert to")
    p.add_argument("fields", nargs="+", type=_parse_field, help="date fields, e.g. 2025 7 26")
    args = p.parse_args(argv)

    out = calconv.convert(args.source, args.fields, args.target)
    _print_date(out)
    return 0


def cmd_format(argv: List[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv format", description="Format a date with a preset or template")
    p.add_argument("calendar")
    p.add_argument("fields", nargs="+", type=_parse_field)
    g = p.add_mutually_exclusive_group()
    g.add_argument("--preset", default=None, help="preset name (see `calconv list --formats`)")
    g.add_argument("--template", default=None, help="template string, e.g. '{day} {month_name} {year}'")
    p.add_argument("--time", type=_parse_clock, default=None, help="clock time HH:MM[:SS]")
    p.add_argument("--lang", choices=LANGUAGES, default=None)
    args = p.parse_args(argv)

    date = calconv.make_date(args.calendar, *args.fields)
    if args.time is not None:
        date = calconv.Moment(date, args.time)
    if args.template is not None:
        print(calconv.render(date, args.template, lang=args.lang))
    else:
        print(calconv.format_date(date, args.preset, lang=args.lang))
    return 0


def cmd_weekday(argv: List[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv weekday", description="Day of the week of a date")
    p.add_argument("calendar")
    p.add_argument("fields", nargs="+", type=_parse_field)
    args = p.parse_args(argv)

    date = calconv.make_date(args.calendar, *args.fields)
    print(date.weekday().name.title())
    return 0


def cmd_list(argv: List[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv list", description="List calendars or formats")
    p.add_argument("--formats", action="store_true", help="list format presets instead")
    args = p.parse_args(argv)

    if args.formats:
        for name in calconv.list_formats():
            print(name)
        return 0

    for name in calconv.list_calendars():
        info = calconv.calendar_info(name)
        print(f"{name:<22} {info['family']:<10} {' '.join(info['fields'])}")
    return 0


def cmd_today(argv: List[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv today", description="Today's date in a calendar")
    p.add_argument("--calendar", default="gregorian")
    args = p.parse_args(argv)

    _print_date(calconv.today(args.calendar))
    return 0


def cmd_now(argv: List[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv now", description="Current UTC date and time in a calendar")
    p.add_argument("--calendar", default="gregorian")
    args = p.parse_args(argv)

    moment = calconv.now(args.calendar)
    clock = moment.time
    print(f"{moment.NAME}: {_fields_line(moment.date)} {clock.hours:02}:{clock.minutes:02}:{int(clock.seconds):02}")
    if load_settings().has_feature("display"):
        print(moment.format("long"))
    return 0


COMMANDS = {
    "convert": cmd_convert,
    "format": cmd_format,
    "weekday": cmd_weekday,
    "list": cmd_list,
    "today": cmd_today,
    "now": cmd_now,
}


def main(argv: Optional[List[str]] = None) -> int:
    from .logging import setup_logging

    p = argparse.ArgumentParser(prog="calconv", description="Calendar conversion and formatting")
    p.add_argument("-v", "--verbose", action="count", default=0, help="more log output (repeatable)")
    p.add_argument("--debug", action="store_true", help="debug logging with logger names")
    p.add_argument("--no-color", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", add_help=False, help="Convert a date: FROM TO FIELDS...")
    sub.add_parser("format", add_help=False, help="Format a date: CAL FIELDS... [--preset|--template]")
    sub.add_parser("weekday", add_help=False, help="Day of the week: CAL FIELDS...")
    sub.add_parser("list", add_help=False, help="List calendars (or --formats)")
    sub.add_parser("today", add_help=False, help="Today's date [--calendar NAME]")
    sub.add_parser("now", add_help=False, help="Current UTC date and time [--calendar NAME]")

    args, rest = p.parse_known_args(argv)
    handler = setup_logging(verbosity=args.verbose, debug_mode=args.debug, color=not args.no_color)

    try:
        return COMMANDS[args.cmd](rest)
    except CalconvError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return EXIT_ERROR
    finally:
        logging.getLogger().removeHandler(handler)


if __name__ == "__main__":
    raise SystemExit(main())
