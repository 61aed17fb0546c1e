"""
Fan-out composition of loggers.

``combine(a, b)`` (or ``a + b``) builds a logger that forwards every call to
``a`` and then to ``b``. Composites are ordinary loggers, so they nest:
``a + b + c`` forwards to a, b and c in that order.

Failure policy: every child is called even when an earlier one raises. Once
all children have run, the collected failures are raised together as a
:class:`CompositeLoggerError` whose ``__cause__`` is the first failure.
Failures of nested composites are merged into the outer error.

``remove(logger, target)`` (or ``logger - target``) is the inverse: it drops
leaves by identity, by the leaves of another composite, or by type.
"""

from __future__ import annotations

from functools import cached_property
from typing import List, Optional, Tuple, Type, Union

from .exceptions import CompositeLoggerError, InvalidLoggerError
from .logger import EMPTY, Logger
from .logging import get_logger

RemovalTarget = Union[Logger, Type[Logger]]


class CompositeLogger(Logger):
    """Logger that delegates each call to ``head`` and then ``tail``."""

    def __init__(self, head: Logger, tail: Logger) -> None:
        self._head = head
        self._tail = tail

    @property
    def head(self) -> Logger:
        return self._head

    @property
    def tail(self) -> Logger:
        return self._tail

    @cached_property
    def loggers(self) -> Tuple[Logger, ...]:
        """Leaf loggers in delegation order."""
        return leaves(self._head) + leaves(self._tail)

    def debug(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self._dispatch("debug", tag, message, cause)

    def info(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self._dispatch("info", tag, message, cause)

    def warn(self, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        self._dispatch("warn", tag, message, cause)

    def error(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self._dispatch("error", tag, message, cause)

    def _dispatch(self, method: str, tag: str, message: str, cause: Optional[BaseException]) -> None:
        failures: List[Tuple[Logger, Exception]] = []
        direct: List[Logger] = []
        for child in (self._head, self._tail):
            try:
                getattr(child, method)(tag, message, cause)
            except CompositeLoggerError as exc:
                # Already reported by the nested composite.
                failures.extend(exc.failures)
            except Exception as exc:
                failures.append((child, exc))
                direct.append(child)

        if direct:
            get_logger(__name__).warning(
                "composite_child_failed",
                method=method,
                tag=tag,
                failed=[repr(child) for child in direct],
            )
        if failures:
            raise CompositeLoggerError(tuple(failures)) from failures[0][1]

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(logger) for logger in self.loggers) + "]"


def leaves(logger: Logger) -> Tuple[Logger, ...]:
    """Flatten a logger into the non-composite loggers it delegates to."""
    if isinstance(logger, CompositeLogger):
        return logger.loggers
    return (logger,)


def combine(a: Logger, b: Logger) -> Logger:
    """Build a logger that forwards every call to ``a``, then ``b``.

    Raises:
        InvalidLoggerError: If either argument is not a Logger
    """
    if not isinstance(a, Logger):
        raise InvalidLoggerError(a, argument="a")
    if not isinstance(b, Logger):
        raise InvalidLoggerError(b, argument="b")
    return CompositeLogger(a, b)


def remove(logger: Logger, target: RemovalTarget) -> Logger:
    """Return ``logger`` without the leaves matched by ``target``.

    Args:
        logger: Logger to remove from; never mutated
        target: A logger (its leaves are removed by identity, every
            occurrence) or a Logger subclass (every instance is removed)

    Returns:
        ``logger`` itself when nothing matched, ``EMPTY`` when nothing is
        left, the single remaining leaf, or a new composite of the remaining
        leaves in their original order.
    """
    if not isinstance(logger, Logger):
        raise InvalidLoggerError(logger, argument="logger")

    current = leaves(logger)
    if isinstance(target, type) and issubclass(target, Logger):
        remaining = [leaf for leaf in current if not isinstance(leaf, target)]
    elif isinstance(target, Logger):
        doomed = {id(leaf) for leaf in leaves(target)}
        remaining = [leaf for leaf in current if id(leaf) not in doomed]
    else:
        raise InvalidLoggerError(target, argument="target")

    if len(remaining) == len(current):
        return logger
    return join(remaining)


def join(loggers: List[Logger]) -> Logger:
    """Combine a sequence of loggers left to right."""
    if not loggers:
        return EMPTY
    result = loggers[0]
    for logger in loggers[1:]:
        result = combine(result, logger)
    return result


__all__ = ["CompositeLogger", "combine", "remove", "join", "leaves", "RemovalTarget"]
