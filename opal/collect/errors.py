"""Argument error values and the exceptions that carry them.

ArgumentError is a frozen value that can be returned inside Err, compared,
and serialized. InvalidArgumentError is the exception raised at API
boundaries; callers branch on its ``code``, never on the message text.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import final


class ErrorCode(Enum):
    """Discriminant for every argument failure raised by opal."""

    NULL_ARGUMENT = "NULL_ARGUMENT"
    INVALID_VALUE = "INVALID_VALUE"
    UNKNOWN_KEY = "UNKNOWN_KEY"
    MULTIPLE_VALUES = "MULTIPLE_VALUES"
    UNKNOWN_NAME = "UNKNOWN_NAME"


@final
@dataclass(frozen=True, slots=True)
class ArgumentError:
    """A rejected argument: what was wrong, which kind, and which parameter."""

    message: str
    code: ErrorCode
    argument: str  # parameter name, e.g. "key"

    def with_context(self, context: str) -> ArgumentError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code.value,
            "argument": self.argument,
        }


class InvalidArgumentError(ValueError):
    """Raised when a public operation is called with an unacceptable argument."""

    def __init__(self, error: ArgumentError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def argument(self) -> str:
        return self.error.argument


class UncheckedError(RuntimeError):
    """An Err payload with no exception of its own, forced into a raise."""

    def __init__(self, error: object) -> None:
        super().__init__(f"Unchecked error: {error!r}")
        self.error = error
