"""
Predicates over ``(level, tag)`` deciding whether a call is forwarded.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Callable, Optional, Union

from ..level import Level


class Filter(ABC):
    """Decides whether a log call with ``level`` and ``tag`` goes through."""

    def __init__(self, name: Optional[str] = None) -> None:
        self._name = name

    @abstractmethod
    def accept(self, level: Level, tag: str) -> bool:
        ...

    def __or__(self, other: Filter) -> Filter:
        """Accept when either filter accepts."""
        if not isinstance(other, Filter):
            return NotImplemented
        return CompositeFilter(
            lambda level, tag: self.accept(level, tag) or other.accept(level, tag),
            name=f"({self!r} | {other!r})",
        )

    def __and__(self, other: Filter) -> Filter:
        """Accept only when both filters accept."""
        if not isinstance(other, Filter):
            return NotImplemented
        return CompositeFilter(
            lambda level, tag: self.accept(level, tag) and other.accept(level, tag),
            name=f"({self!r} & {other!r})",
        )

    def __repr__(self) -> str:
        return self._name or type(self).__name__


class AnyFilter(Filter):
    """Ignores level and tag."""

    def __init__(self, predicate: Callable[[], bool], name: Optional[str] = None) -> None:
        super().__init__(name)
        self._predicate = predicate

    def accept(self, level: Level, tag: str) -> bool:
        return bool(self._predicate())


class LevelFilter(Filter):
    def __init__(self, predicate: Callable[[Level], bool], name: Optional[str] = None) -> None:
        super().__init__(name)
        self._predicate = predicate

    def accept(self, level: Level, tag: str) -> bool:
        return bool(self._predicate(level))


class TagFilter(Filter):
    def __init__(self, predicate: Callable[[str], bool], name: Optional[str] = None) -> None:
        super().__init__(name)
        self._predicate = predicate

    def accept(self, level: Level, tag: str) -> bool:
        return bool(self._predicate(tag))


class CompositeFilter(Filter):
    def __init__(self, predicate: Callable[[Level, str], bool], name: Optional[str] = None) -> None:
        super().__init__(name)
        self._predicate = predicate

    def accept(self, level: Level, tag: str) -> bool:
        return bool(self._predicate(level, tag))


ALL: Filter = AnyFilter(lambda: True, name="ALL")
NONE: Filter = AnyFilter(lambda: False, name="NONE")


def at_least(level: Union[Level, str]) -> Filter:
    """Accept ``level`` and everything more severe."""
    threshold = Level.from_string(level)
    if threshold is Level.DEBUG:
        return ALL
    return LevelFilter(lambda candidate: candidate >= threshold, name=f"at_least({threshold})")


def tags(*names: str) -> Filter:
    """Accept only the given tags."""
    allowed = frozenset(names)
    return TagFilter(lambda tag: tag in allowed, name=f"tags({', '.join(sorted(allowed))})")


# =============================================================================
# Process-wide default filter
# =============================================================================

_default_filter: Filter = ALL
_default_filter_lock = threading.Lock()


def get_default_filter() -> Filter:
    with _default_filter_lock:
        return _default_filter


def set_default_filter(value: Filter) -> None:
    """Replace the filter used by FilterLoggers built without one."""
    global _default_filter

    if not isinstance(value, Filter):
        raise TypeError(f"Expected a Filter, got {type(value).__name__}")
    with _default_filter_lock:
        _default_filter = value
