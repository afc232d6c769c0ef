"""Console logging for the calconv command line.

The library itself only emits DEBUG records through module loggers; the CLI
attaches the Rich console handler built here to the root logger.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "calconv"


class ThirdPartyPrefixFilter(logging.Filter):
    """Prefix records from other libraries with their top-level package name."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (DEBUG when ``debug_mode``).
        debug_mode: Show logger names and source paths.
        color: Enable color output when True.

    Returns:
        RichHandler: handler ready to attach to the root logger.
    """
    console = Console(color_system="auto" if color else None, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    fmt = "%(prefix)s %(message)s" if not debug_mode else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def setup_logging(verbosity: int = 0, debug_mode: bool = False, color: bool = True) -> RichHandler:
    """Attach the console handler to the root logger; returns it for later removal."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug_mode else level)
    return handler
