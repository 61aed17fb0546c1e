"""
Lazy logging: the message is built only when the call will be forwarded.

    info_lazy(logger, "db", lambda: f"rows={expensive_count()}")
    error_lazy(logger, "db", lambda: with_cause("query failed", exc))
"""

from __future__ import annotations

from ..level import Level
from ..logger import Logger
from .filter_logger import FilterLogger, Supplier


def _as_filter(logger: Logger) -> FilterLogger:
    if isinstance(logger, FilterLogger):
        return logger
    return FilterLogger(logger)


def debug_lazy(logger: Logger, tag: str, supplier: Supplier) -> None:
    _as_filter(logger).log_lazy(Level.DEBUG, tag, supplier)


def info_lazy(logger: Logger, tag: str, supplier: Supplier) -> None:
    _as_filter(logger).log_lazy(Level.INFO, tag, supplier)


def warn_lazy(logger: Logger, tag: str, supplier: Supplier) -> None:
    _as_filter(logger).log_lazy(Level.WARN, tag, supplier)


def error_lazy(logger: Logger, tag: str, supplier: Supplier) -> None:
    _as_filter(logger).log_lazy(Level.ERROR, tag, supplier)
