"""
The system logger: a console printer available before any configuration.

Lines look like ``[2026-10-19 08:15:02.113] [INFO /net] connected``.
DEBUG and INFO go to stdout, WARN and ERROR to stderr; a cause is followed by
its traceback.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import IO, Any, Optional

from .config import settings
from .level import Level
from .logger import BaseLogger
from .logging import render_cause

LABEL_WIDTH = 5


def format_timestamp(moment: datetime, fmt: str) -> str:
    text = moment.strftime(fmt)
    # %f renders microseconds; keep milliseconds.
    if fmt.endswith("%f"):
        text = text[:-3]
    return text


def format_line(timestamp: str, level: Level, tag: str, message: str) -> str:
    return f"[{timestamp}] [{level.value.ljust(LABEL_WIDTH)}/{tag}] {message}"


class SystemLogger(BaseLogger):
    """Prints every call to the standard streams.

    Args:
        out: Stream for DEBUG and INFO; ``sys.stdout`` at call time when omitted
        err: Stream for WARN and ERROR; ``sys.stderr`` at call time when omitted
        timestamp_format: strftime format; when omitted
            ``settings.logging.system_timestamp_format`` is read at call time
    """

    def __init__(
        self,
        out: Optional[IO[str]] = None,
        err: Optional[IO[str]] = None,
        timestamp_format: Optional[str] = None,
    ) -> None:
        self._out = out
        self._err = err
        self._timestamp_format = timestamp_format

    def stream_for(self, level: Level) -> Any:
        if level >= Level.WARN:
            return self._err or sys.stderr
        return self._out or sys.stdout

    def log(self, level: Level, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        level = Level.from_string(level)
        stream = self.stream_for(level)
        fmt = self._timestamp_format or settings.logging.system_timestamp_format
        timestamp = format_timestamp(datetime.now(), fmt)
        stream.write(format_line(timestamp, level, tag, message) + "\n")
        if cause is not None:
            stream.write(render_cause(cause) + "\n")
        stream.flush()

    def __repr__(self) -> str:
        return "SystemLogger"


SYSTEM: SystemLogger = SystemLogger()

__all__ = ["SystemLogger", "SYSTEM", "format_line", "format_timestamp"]
