"""
Level and tag filtering for any Logger.

Filters compose with ``|`` (either accepts) and ``&`` (both accept):

    from scarlet_logger.filter import at_least, tags, with_filter

    logger = with_filter(sink, at_least(Level.WARN) | tags("db"))
"""

from .filter_logger import FilterLogger, with_filter
from .filters import (
    ALL,
    NONE,
    AnyFilter,
    CompositeFilter,
    Filter,
    LevelFilter,
    TagFilter,
    at_least,
    get_default_filter,
    set_default_filter,
    tags,
)
from .lazy import debug_lazy, error_lazy, info_lazy, warn_lazy

__all__ = [
    "ALL",
    "NONE",
    "AnyFilter",
    "CompositeFilter",
    "Filter",
    "FilterLogger",
    "LevelFilter",
    "TagFilter",
    "at_least",
    "tags",
    "with_filter",
    "get_default_filter",
    "set_default_filter",
    "debug_lazy",
    "info_lazy",
    "warn_lazy",
    "error_lazy",
]
