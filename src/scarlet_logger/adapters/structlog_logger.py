"""
Sink that forwards facade calls into structlog.

The tag becomes the structlog logger name and is bound as ``tag`` on the
event; a cause is passed as ``exc_info`` so structlog's exception processors
render it.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import structlog

from ..level import Level
from ..logger import BaseLogger

_METHODS = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
}


def _default_factory(tag: str) -> Any:
    return structlog.get_logger(tag).bind(tag=tag)


class StructlogLogger(BaseLogger):
    """Bridges the Logger capability onto structlog.

    Args:
        factory: Maps a tag to a structlog logger; defaults to
            ``structlog.get_logger(tag).bind(tag=tag)``
    """

    def __init__(self, factory: Optional[Callable[[str], Any]] = None) -> None:
        self._factory = factory or _default_factory

    def log(self, level: Level, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        level = Level.from_string(level)
        emit = getattr(self._factory(tag), _METHODS[level])
        if cause is None:
            emit(message)
        else:
            emit(message, exc_info=cause)

    def __repr__(self) -> str:
        return "StructlogLogger"
