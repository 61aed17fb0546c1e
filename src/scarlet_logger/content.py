"""
Message payload returned by lazy log suppliers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Content:
    """A message with an optional cause."""

    message: str
    cause: Optional[BaseException] = None

    @classmethod
    def of(cls, message: str, cause: Optional[BaseException] = None) -> Content:
        return cls(message=message, cause=cause)

    def __str__(self) -> str:
        return self.message


def with_cause(message: str, cause: BaseException) -> Content:
    """Pair a message with the exception it describes."""
    return Content(message=message, cause=cause)


__all__ = ["Content", "with_cause"]
