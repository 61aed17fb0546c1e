"""
The Logger capability and its base implementations.

Every sink, composite and proxy satisfies the same interface: four methods
taking a tag, a message and an optional cause. ``warn`` takes an optional
message so that ``warn(tag, cause=exc)`` covers the cause-only form.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Type, Union

from .level import Level


class Logger(ABC):
    """Abstract capability implemented by every logger."""

    @abstractmethod
    def debug(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def info(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def warn(self, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def error(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        ...

    def log(self, level: Level, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        """Dispatch to the operation matching ``level``.

        Raises:
            InvalidLevelError: If ``level`` is neither a Level nor a level name
        """
        level = Level.from_string(level)
        if level is Level.DEBUG:
            self.debug(tag, message, cause)
        elif level is Level.INFO:
            self.info(tag, message, cause)
        elif level is Level.WARN:
            self.warn(tag, message, cause)
        else:
            self.error(tag, message, cause)

    def __add__(self, other: Logger) -> Logger:
        from .composite import combine

        return combine(self, other)

    def __sub__(self, other: Union[Logger, Type[Logger]]) -> Logger:
        from .composite import remove

        return remove(self, other)


class BaseLogger(Logger):
    """Logger whose four operations all route to a single ``log`` hook.

    Subclasses only implement :meth:`log`::

        class ListLogger(BaseLogger):
            def __init__(self):
                self.records = []

            def log(self, level, tag, message="", cause=None):
                self.records.append((level, tag, message, cause))
    """

    def debug(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self.log(Level.DEBUG, tag, message, cause)

    def info(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self.log(Level.INFO, tag, message, cause)

    def warn(self, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        self.log(Level.WARN, tag, message, cause)

    def error(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self.log(Level.ERROR, tag, message, cause)

    @abstractmethod
    def log(self, level: Level, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        """Record one call. Concrete sinks decide formatting and delivery."""
        ...


class EmptyLogger(BaseLogger):
    """Logger that drops every call."""

    def log(self, level: Level, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        pass

    def __repr__(self) -> str:
        return "EmptyLogger"


EMPTY: Logger = EmptyLogger()


__all__ = ["Logger", "BaseLogger", "EmptyLogger", "EMPTY"]
