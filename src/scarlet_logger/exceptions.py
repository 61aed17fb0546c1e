"""
Exception hierarchy for the logging facade.

The facade never interprets failures raised by sinks; it only reports
programmer errors (wrong argument types, unknown level names) and the
per-child failures collected by a composite logger.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

if TYPE_CHECKING:
    from .logger import Logger


class ScarletLoggerError(Exception):
    """Root of every error raised by the facade itself."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class InvalidLoggerError(ScarletLoggerError, TypeError):
    """Raised when something that is not a Logger is offered where one is required."""

    def __init__(self, value: Any, *, argument: str = "logger") -> None:
        super().__init__(
            f"Expected a Logger for '{argument}', got {type(value).__name__}",
            code="INVALID_LOGGER",
            details={"argument": argument, "type": type(value).__name__},
        )


class InvalidLevelError(ScarletLoggerError, ValueError):
    """Raised when a level name cannot be parsed."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Invalid log level: {value!r}",
            code="INVALID_LEVEL",
            details={"value": value},
        )


class CompositeLoggerError(ScarletLoggerError):
    """One or more children of a composite logger raised.

    Every child has already been called when this is raised. ``failures``
    lists ``(logger, exception)`` pairs in invocation order and ``__cause__``
    is the first failure.
    """

    def __init__(self, failures: Tuple[Tuple["Logger", Exception], ...]) -> None:
        names = ", ".join(f"{logger!r}: {exc!r}" for logger, exc in failures)
        super().__init__(
            f"{len(failures)} child logger(s) failed: {names}",
            code="COMPOSITE_CHILD_FAILED",
            details={"count": len(failures)},
        )
        self.failures = failures


__all__ = [
    "ScarletLoggerError",
    "InvalidLoggerError",
    "InvalidLevelError",
    "CompositeLoggerError",
]
