from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Protocol, Sequence, Type, TypeVar, Union

from .errors import UnknownCalendarError
from .types import CalendarId, DayCount

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="CalendarSystem")
Fields = Union[Mapping[str, Any], Sequence[Any]]

class CalendarSystem(Protocol):
    """What the registry and the dispatcher need from a calendar class."""
    NAME: str
    ID: CalendarId

    @classmethod
    def decode(cls: Type[T], n: DayCount | int) -> T: ...
    def encode(self) -> DayCount: ...
    def fields(self) -> Dict[str, Any]: ...

@dataclass
class CalendarRegistry:
    _calendars: Dict[str, Type[CalendarSystem]] = field(default_factory=dict)

    def get(self, name: str) -> Type[CalendarSystem]:
        if name not in self._calendars:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._calendars

    def register(self, name: str, cls: Type[CalendarSystem], *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("registering calendar %s -> %s", name, cls.__name__)
        self._calendars[name] = cls

    def make(self, name: str, fields: Fields) -> CalendarSystem:
        """Build a date of calendar ``name`` from positional or keyword fields."""
        cls = self.get(name)
        if isinstance(fields, Mapping):
            return cls(**fields)
        return cls(*fields)

    def convert(self, source: str, fields: Fields, target: str) -> CalendarSystem:
        src = self.make(source, fields)
        return self.get(target).decode(src.encode())
