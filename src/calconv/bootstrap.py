from __future__ import annotations
import logging
from typing import Optional

from .calendars.specs import ALL_CALENDARS, CORE_CALENDARS
from .config import Settings, load_settings
from .core.calendar import CalendarRegistry

logger = logging.getLogger(__name__)


def build_registry(settings: Optional[Settings] = None) -> CalendarRegistry:
    """Core calendars always; the rest only with the 'extra-calendars' feature."""
    settings = settings or load_settings()
    calendars = ALL_CALENDARS if settings.has_feature("extra-calendars") else CORE_CALENDARS
    registry = CalendarRegistry()
    for name, cls in calendars.items():
        registry.register(name, cls)
    logger.debug("calendar registry built with %d calendars", len(calendars))
    return registry
