from __future__ import annotations

import io
from typing import List, Optional, Tuple

import pytest

from scarlet_logger import registry
from scarlet_logger.filter import ALL, set_default_filter
from scarlet_logger.level import Level
from scarlet_logger.logger import BaseLogger
from scarlet_logger.logging import configure_logging

Record = Tuple[Level, str, str, Optional[BaseException]]


class RecordingLogger(BaseLogger):
    """Keeps every call; optionally appends its name to a shared journal."""

    def __init__(self, name: str, journal: Optional[List[str]] = None) -> None:
        self.name = name
        self.records: List[Record] = []
        self._journal = journal

    def log(self, level, tag, message="", cause=None) -> None:
        self.records.append((level, tag, message, cause))
        if self._journal is not None:
            self._journal.append(self.name)

    @property
    def messages(self) -> List[str]:
        return [f"{self.name}: {message}" for _, _, message, _ in self.records]

    def __repr__(self) -> str:
        return self.name


class FailingLogger(BaseLogger):
    def __init__(self, name: str, journal: Optional[List[str]] = None) -> None:
        self.name = name
        self._journal = journal

    def log(self, level, tag, message="", cause=None) -> None:
        if self._journal is not None:
            self._journal.append(self.name)
        raise RuntimeError(f"{self.name} is broken")

    def __repr__(self) -> str:
        return self.name


@pytest.fixture(scope="session", autouse=True)
def diagnostics_stream():
    """Route the library's own diagnostics into a buffer for the whole run."""
    stream = io.StringIO()
    configure_logging(level="WARNING", fmt="console", stream=stream)
    return stream


@pytest.fixture
def debug_diagnostics(diagnostics_stream):
    """Diagnostics at DEBUG into a fresh buffer; restores the session setup afterwards."""
    stream = io.StringIO()
    configure_logging(level="DEBUG", fmt="console", stream=stream)
    yield stream
    configure_logging(level="WARNING", fmt="console", stream=diagnostics_stream)


@pytest.fixture
def journal() -> List[str]:
    return []


@pytest.fixture
def recorder():
    """Factory for named recording loggers sharing the test's journal."""

    def _make(name: str, journal: Optional[List[str]] = None) -> RecordingLogger:
        return RecordingLogger(name, journal)

    return _make


@pytest.fixture
def failing():
    """Factory for named loggers that raise on every call."""

    def _make(name: str, journal: Optional[List[str]] = None) -> FailingLogger:
        return FailingLogger(name, journal)

    return _make


@pytest.fixture
def fresh_holder(monkeypatch):
    """
    Replace the module-level default holder with an unset one.
    Module functions (get_default/set_default) read the patched holder.
    """
    holder = registry.DefaultLoggerHolder()
    monkeypatch.setattr(registry, "_holder", holder)
    yield holder


@pytest.fixture(autouse=True)
def restore_default_filter():
    yield
    set_default_filter(ALL)
