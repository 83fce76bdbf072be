"""Result[T, E] — the non-raising failure channel.

Lookups that callers are expected to recover from (an unknown key, an
unrecognised convention name) return Ok or Err instead of raising.
Use opal.collect.unchecked to cross back into the raising world.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant of Result."""

    value: T

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply f to the value, returning Ok(f(value))."""
        return Ok(f(self.value))

    def bind[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply f to the value, where f itself returns a Result."""
        return f(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Error variant of Result."""

    error: E

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def bind(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def unwrap(self) -> NoReturn:
        """Raise the exception matching the error payload.

        ArgumentError becomes InvalidArgumentError, an exception payload is
        re-raised as is, anything else is wrapped in UncheckedError.
        """
        from opal.collect.unchecked import raise_error

        raise_error(self.error)

    def unwrap_or[T](self, default: T) -> T:
        return default

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply f to the error, returning Err(f(error))."""
        return Err(f(self.error))


type Result[T, E] = Ok[T] | Err[E]


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise as Err.unwrap does."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        result.unwrap()
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
