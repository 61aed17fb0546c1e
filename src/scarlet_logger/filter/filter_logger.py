"""
Logger wrapper that consults a Filter before forwarding.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

from ..content import Content
from ..exceptions import InvalidLoggerError
from ..level import Level
from ..logger import Logger
from .filters import Filter, get_default_filter

Supplier = Callable[[], Union[str, Content]]


class FilterLogger(Logger):
    """Forwards calls to ``logger`` only when the filter accepts them.

    Without an explicit filter the process-wide default filter is looked up
    on every call, so ``set_default_filter`` applies to existing wrappers.
    """

    def __init__(self, logger: Logger, filter: Optional[Filter] = None) -> None:
        if not isinstance(logger, Logger):
            raise InvalidLoggerError(logger)
        if filter is not None and not isinstance(filter, Filter):
            raise TypeError(f"Expected a Filter, got {type(filter).__name__}")
        self._logger = logger
        self._filter = filter

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def filter(self) -> Filter:
        return self._filter if self._filter is not None else get_default_filter()

    def debug(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self.log(Level.DEBUG, tag, message, cause)

    def info(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self.log(Level.INFO, tag, message, cause)

    def warn(self, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        self.log(Level.WARN, tag, message, cause)

    def error(self, tag: str, message: str, cause: Optional[BaseException] = None) -> None:
        self.log(Level.ERROR, tag, message, cause)

    def log(self, level: Level, tag: str, message: str = "", cause: Optional[BaseException] = None) -> None:
        level = Level.from_string(level)
        if self.filter.accept(level, tag):
            self._logger.log(level, tag, message, cause)

    def log_lazy(self, level: Level, tag: str, supplier: Supplier) -> None:
        """Evaluate ``supplier`` only if the call passes the filter."""
        if not self.filter.accept(level, tag):
            return
        value = supplier()
        if isinstance(value, Content):
            self._logger.log(level, tag, value.message, value.cause)
        else:
            self._logger.log(level, tag, str(value))

    def __repr__(self) -> str:
        return f"FilterLogger(filter={self.filter!r}, logger={self._logger!r})"


def with_filter(logger: Logger, filter: Filter) -> Logger:
    return FilterLogger(logger, filter)
