"""
structlog configuration for the library's diagnostics.

Nothing is configured at import. The first ``get_logger`` call applies
``settings.logging`` unless structlog was already configured, either by
``configure_logging`` or by the host application.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from structlog.typing import EventDict, WrappedLogger

from .formatters import ConsoleFormatter
from .sinks import BaseSink, LogFormat, StdioSink

_sinks: list[BaseSink] = []


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a diagnostics logger, configuring from settings on first use."""
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(_name=name or "scarlet_logger")


def shape_event(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp the event with a UTC timestamp and its logger name; ``event`` becomes ``message``."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    event_dict["logger"] = event_dict.pop("_name", "scarlet_logger")
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def multi_sink_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Hand the event to every sink; the wrapped logger receives an empty string."""
    for sink in _sinks:
        try:
            sink.emit(event_dict)
        except Exception:
            # Diagnostics never raise into the caller.
            pass
    return ""


def _install_sink(sink: BaseSink) -> None:
    for old in _sinks:
        old.close()
    _sinks[:] = [sink]


def configure_logging(
    *,
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    stream: Any = None,
) -> None:
    """
    Configure the library's diagnostic logging.

    Arguments left as ``None`` are read from ``settings.logging``.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Output format (console, json)
        stream: Output stream; stderr when omitted
    """
    from scarlet_logger.config import settings

    log_settings = settings.logging
    log_format: LogFormat = "json" if (fmt or log_settings.format.value).lower() == "json" else "console"
    formatter = ConsoleFormatter(
        timestamp_format=log_settings.console_timestamp_format,
        level_width=log_settings.console_level_width,
        logger_width=log_settings.console_logger_width,
        separator=log_settings.console_separator,
    )
    _install_sink(StdioSink(fmt=log_format, stream=stream, formatter=formatter))

    threshold = getattr(logging, (level or log_settings.level.value).upper(), logging.WARNING)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            shape_event,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            multi_sink_renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )
