"""
Output sinks for the library's own diagnostic events.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, Literal, Optional

import orjson
from structlog.typing import EventDict

from .formatters import ConsoleFormatter

LogFormat = Literal["console", "json"]


def orjson_dumps(v: Any, *, default: Any = str) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for diagnostic sinks."""

    @abstractmethod
    def emit(self, event_dict: EventDict) -> None:
        """Emit a log event to the sink."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class StdioSink(BaseSink):
    """Standard I/O sink with configurable format.

    Args:
        fmt: Output format - "console" (aligned, colored on a tty) or "json"
        stream: Output stream (default: stderr, resolved per event)
        formatter: Console column layout; defaults to ``ConsoleFormatter()``
    """

    def __init__(
        self,
        fmt: LogFormat = "console",
        stream: Any = None,
        formatter: Optional[ConsoleFormatter] = None,
    ):
        self._fmt = fmt
        self._stream = stream
        self._formatter = formatter or ConsoleFormatter()

    @property
    def stream(self) -> Any:
        return self._stream or sys.stderr

    def emit(self, event_dict: EventDict) -> None:
        stream = self.stream
        if self._fmt == "json":
            output = orjson_dumps(event_dict)
        else:
            use_color = bool(getattr(stream, "isatty", lambda: False)())
            output = self._formatter.format(event_dict, use_color=use_color)

        stream.write(output + "\n")
        stream.flush()

    def close(self) -> None:
        pass
