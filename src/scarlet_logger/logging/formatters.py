"""
Text rendering for diagnostic events and exception causes.
"""

from __future__ import annotations

import traceback
from datetime import datetime
from typing import Optional

from structlog.typing import EventDict


def render_cause(cause: Optional[BaseException]) -> str:
    """Render an exception and its chained causes as traceback text."""
    if cause is None:
        return ""
    return "".join(traceback.format_exception(type(cause), cause, cause.__traceback__)).rstrip("\n")


RESET = "\x1b[0m"
DIM = "\x1b[2m"
LEVEL_COLORS = {
    "DEBUG": "\x1b[36m",
    "INFO": "\x1b[32m",
    "WARNING": "\x1b[33m",
    "ERROR": "\x1b[31m",
}


def clip_left(text: str, width: int) -> str:
    """Right-align ``text`` in ``width`` columns, dropping its head if too long."""
    if width <= 0 or len(text) <= width:
        return text.rjust(max(width, 0))
    if width <= 3:
        return text[-width:]
    return "..." + text[3 - width :]


class ConsoleFormatter:
    """Renders an event as ``timestamp | LEVEL | logger | message key=value``.

    Each stdio sink owns its formatter, so two sinks can render with
    different column widths.
    """

    RESERVED_KEYS = frozenset({"level", "message", "event", "logger", "timestamp", "exception"})

    def __init__(
        self,
        *,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
        level_width: int = 8,
        logger_width: int = 32,
        separator: str = " | ",
    ) -> None:
        self.timestamp_format = timestamp_format
        self.level_width = level_width
        self.logger_width = logger_width
        self.separator = separator

    def _timestamp(self, raw: Optional[str]) -> str:
        try:
            moment = datetime.fromisoformat(raw).astimezone()
        except (TypeError, ValueError):
            moment = datetime.now()
        return moment.strftime(self.timestamp_format)

    def format(self, event_dict: EventDict, *, use_color: bool = False) -> str:
        level = str(event_dict.get("level", "info")).upper()
        logger_name = str(event_dict.get("logger", "scarlet_logger"))
        message = str(event_dict.get("message", event_dict.get("event", "")))

        extras = " ".join(
            f"{key}={value}" for key, value in event_dict.items() if key not in self.RESERVED_KEYS
        )
        if extras:
            message = f"{message} {extras}"

        level_column = clip_left(level, self.level_width)
        if use_color and level in LEVEL_COLORS:
            level_column = f"{LEVEL_COLORS[level]}{level_column}{RESET}"
        timestamp = self._timestamp(event_dict.get("timestamp"))
        if use_color:
            timestamp = f"{DIM}{timestamp}{RESET}"

        line = self.separator.join(
            [timestamp, level_column, clip_left(logger_name, self.logger_width), message]
        )
        exception = event_dict.get("exception")
        if exception:
            line = f"{line}\n{exception}"
        return line
