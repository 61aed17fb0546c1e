"""
Process-wide default logger.

``get_default()`` returns the logger installed right now; callers that keep
the returned reference keep using it after a later ``set_default()``. Use
``DEFAULT`` instead when every call should follow the current default.

Thread Safety:
    The slot is guarded by a threading.Lock held only for the read or the
    assignment, never while a logger is being called.
"""

from __future__ import annotations

import threading
from typing import Optional

from .composite import join, leaves
from .exceptions import InvalidLoggerError
from .level import Level
from .logger import Logger
from .logging import get_logger
from .platform import SYSTEM


class DefaultLoggerHolder:
    """Single-slot holder of the default logger.

    Starts unset, reading as the system logger. ``set_default`` moves it to
    the set state; there is no way back to unset.
    """

    def __init__(self, system: Logger = SYSTEM) -> None:
        if not isinstance(system, Logger):
            raise InvalidLoggerError(system, argument="system")
        self._system = system
        self._current: Optional[Logger] = None
        self._lock = threading.Lock()

    @property
    def system(self) -> Logger:
        return self._system

    @property
    def is_set(self) -> bool:
        with self._lock:
            return self._current is not None

    def get(self) -> Logger:
        with self._lock:
            current = self._current
        return current if current is not None else self._system

    def set(self, logger: Logger) -> None:
        """Install ``logger`` for all future reads.

        Proxies of this holder inside ``logger`` are replaced by the logger
        installed at the time of the call, so ``set_default(DEFAULT + sink)``
        adds ``sink`` to the current default.

        Raises:
            InvalidLoggerError: If ``logger`` is not a Logger
        """
        if not isinstance(logger, Logger):
            raise InvalidLoggerError(logger)
        diagnostics = get_logger(__name__)
        with self._lock:
            previous = self._current
            logger = self._pin(logger, previous if previous is not None else self._system)
            self._current = logger

        diagnostics.debug(
            "default_logger_changed",
            previous=repr(previous if previous is not None else self._system),
            current=repr(logger),
        )

    def _pin(self, logger: Logger, current: Logger) -> Logger:
        parts = leaves(logger)
        pinned = [current if self._owns(part) else part for part in parts]
        if all(new is old for new, old in zip(pinned, parts)):
            return logger
        return join(pinned)

    def _owns(self, logger: Logger) -> bool:
        return isinstance(logger, DefaultLogger) and logger.holder is self


class DefaultLogger(Logger):
    """Logger that forwards each call to the current default.

    Without an explicit holder the module-level holder is used.
    """

    def __init__(self, holder: Optional[DefaultLoggerHolder] = None) -> None:
        self._holder = holder

    @property
    def holder(self) -> DefaultLoggerHolder:
        return self._holder if self._holder is not None else _holder

    def _current(self) -> Logger:
        return self.holder.get()

    def debug(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self._current().debug(tag, message, cause)

    def info(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self._current().info(tag, message, cause)

    def warn(self, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        self._current().warn(tag, message, cause)

    def error(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self._current().error(tag, message, cause)

    def log(self, level: Level, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        self._current().log(level, tag, message, cause)

    def __repr__(self) -> str:
        return f"DefaultLogger({self._current()!r})"


# Module-level singleton holder
_holder = DefaultLoggerHolder()

DEFAULT: Logger = DefaultLogger()


def system_logger() -> Logger:
    """The fixed system logger; always available."""
    return _holder.system


def get_default() -> Logger:
    """The currently installed default logger (the system logger until set)."""
    return _holder.get()


def set_default(logger: Logger) -> None:
    """Replace the default logger for future ``get_default()`` calls."""
    _holder.set(logger)


__all__ = [
    "DefaultLoggerHolder",
    "DefaultLogger",
    "DEFAULT",
    "system_logger",
    "get_default",
    "set_default",
]
