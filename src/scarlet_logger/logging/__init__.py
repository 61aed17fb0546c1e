"""
Diagnostic logging for scarlet_logger itself.

The facade reports its own events (default logger swaps, composite child
failures) through structlog, rendered by a stdio sink:
- console: aligned, human-readable columns
- json: one orjson-encoded object per line

Library: structlog + orjson.
"""

from .core import configure_logging, get_logger
from .formatters import render_cause

__all__ = ["configure_logging", "get_logger", "render_cause"]
