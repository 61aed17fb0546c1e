"""
scarlet_logger: a pluggable logging facade.

Application code logs through the ``Logger`` capability and never depends on
a concrete sink:

    from scarlet_logger import get_default, set_default

    set_default(sink_a + sink_b)
    get_default().error("db", "timeout", TimeoutError("5s"))

Loggers combine with ``+`` (fan-out to both, left first) and ``-`` (remove).
"""

from .composite import CompositeLogger, combine, remove
from .content import Content, with_cause
from .exceptions import (
    CompositeLoggerError,
    InvalidLevelError,
    InvalidLoggerError,
    ScarletLoggerError,
)
from .level import Level, Ordering, compare
from .logger import EMPTY, BaseLogger, EmptyLogger, Logger
from .platform import SystemLogger
from .registry import (
    DEFAULT,
    DefaultLogger,
    DefaultLoggerHolder,
    get_default,
    set_default,
    system_logger,
)

__version__ = "1.0.0"

__all__ = [
    "Level",
    "Ordering",
    "compare",
    "Logger",
    "BaseLogger",
    "EmptyLogger",
    "EMPTY",
    "Content",
    "with_cause",
    "CompositeLogger",
    "combine",
    "remove",
    "SystemLogger",
    "DefaultLoggerHolder",
    "DefaultLogger",
    "DEFAULT",
    "system_logger",
    "get_default",
    "set_default",
    "ScarletLoggerError",
    "InvalidLoggerError",
    "InvalidLevelError",
    "CompositeLoggerError",
]
