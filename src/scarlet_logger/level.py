"""
Severity levels shared by every logger implementation.

The facade itself never filters on level. ``Level`` only fixes what "more
severe" means so that independently written sinks and filters agree.
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import Any, Optional, Tuple

from .exceptions import InvalidLevelError


class Ordering(IntEnum):
    """Result of comparing two levels."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Level(str, Enum):
    """Closed set of severities, ordered by declaration rank."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def values(cls) -> Tuple[Level, ...]:
        """All levels in rank order."""
        return tuple(cls)

    @classmethod
    def from_string(cls, value: str) -> Level:
        """Parse a level name, case-insensitively.

        ``"warning"`` is accepted as an alias of ``WARN`` so that names coming
        from the standard library round-trip.

        Raises:
            InvalidLevelError: If the string doesn't name a level
        """
        if isinstance(value, Level):
            return value
        if not isinstance(value, str):
            raise InvalidLevelError(value)
        name = value.strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls(name)
        except ValueError:
            raise InvalidLevelError(value) from None

    def to_stdlib_level(self) -> int:
        """Matching standard library logging level."""
        return _STDLIB_LEVELS[self]

    def compare(self, other: Level) -> Ordering:
        return compare(self, other)

    def _rank_of(self, other: Any) -> Optional[int]:
        # Plain strings are parsed so that str ordering never applies.
        if isinstance(other, str):
            return Level.from_string(other).rank
        return None

    def __lt__(self, other: Any) -> bool:
        rank = self._rank_of(other)
        return NotImplemented if rank is None else self.rank < rank

    def __le__(self, other: Any) -> bool:
        rank = self._rank_of(other)
        return NotImplemented if rank is None else self.rank <= rank

    def __gt__(self, other: Any) -> bool:
        rank = self._rank_of(other)
        return NotImplemented if rank is None else self.rank > rank

    def __ge__(self, other: Any) -> bool:
        rank = self._rank_of(other)
        return NotImplemented if rank is None else self.rank >= rank

    def __str__(self) -> str:
        return self.value


_RANKS = {level: rank for rank, level in enumerate(Level)}

_STDLIB_LEVELS = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}


def compare(a: Level, b: Level) -> Ordering:
    """Compare two levels by rank."""
    if not isinstance(a, Level):
        raise InvalidLevelError(a)
    if not isinstance(b, Level):
        raise InvalidLevelError(b)
    if a.rank < b.rank:
        return Ordering.LESS
    if a.rank > b.rank:
        return Ordering.GREATER
    return Ordering.EQUAL


__all__ = ["Level", "Ordering", "compare"]
