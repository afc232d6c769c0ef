from __future__ import annotations
from typing import Dict, Type

from .base import CalendarDate
from .coptic import Coptic, Ethiopic
from .cotsworth import Cotsworth
from .daycounts import JulianDayNumber, ModifiedJulianDay, RataDie, UnixDay
from .egyptian import Armenian, Egyptian
from .french_rev import FrenchRevArith, FrenchRevArithAdjusted
from .gregorian import Gregorian
from .holocene import Holocene
from .iso import ISO
from .julian import Julian
from .positivist import Positivist
from .roman import Roman
from .symmetry import Symmetry010, Symmetry010Solstice, Symmetry454, Symmetry454Solstice
from .tranquility import Tranquility

_CLASSES = (
    Gregorian,
    Julian,
    ISO,
    JulianDayNumber,
    ModifiedJulianDay,
    RataDie,
    UnixDay,
    Holocene,
    Egyptian,
    Armenian,
    Coptic,
    Ethiopic,
    Cotsworth,
    Positivist,
    Symmetry454,
    Symmetry010,
    Symmetry454Solstice,
    Symmetry010Solstice,
    FrenchRevArith,
    FrenchRevArithAdjusted,
    Roman,
    Tranquility,
)

ALL_CALENDARS: Dict[str, Type[CalendarDate]] = {cls.NAME: cls for cls in _CLASSES}

# Always registered, whatever optional features are enabled.
CORE_CALENDARS: Dict[str, Type[CalendarDate]] = {
    name: cls for name, cls in ALL_CALENDARS.items() if not cls.ID.optional
}
