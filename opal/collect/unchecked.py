"""Bridges between Result-returning and raising callables.

A function returning Ok/Err makes its failure part of the signature, much
like a checked exception. ``unchecked`` turns such a function into one that
returns the plain value and raises on Err; ``checked`` goes the other way
for InvalidArgumentError.

Usage::

    lookup = unchecked(property_set.find_value)
    lookup("currency")  # -> "GBP", or raises InvalidArgumentError
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, NoReturn

from opal.collect.errors import ArgumentError, InvalidArgumentError, UncheckedError
from opal.collect.result import Err, Ok

logger = logging.getLogger(__name__)


def raise_error(error: object) -> NoReturn:
    """Raise the exception that corresponds to an Err payload."""
    if isinstance(error, ArgumentError):
        raise InvalidArgumentError(error)
    if isinstance(error, BaseException):
        raise error
    logger.debug("Wrapping non-exception error payload %r in UncheckedError", error)
    raise UncheckedError(error)


def unchecked[**P, T](fn: Callable[P, Ok[T] | Err[Any]]) -> Callable[P, T]:
    """Decorate a Result-returning callable so that it raises on Err.

    Exceptions raised by ``fn`` itself propagate unchanged. A return value
    that is neither Ok nor Err raises TypeError.
    """

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        match fn(*args, **kwargs):
            case Ok(value):
                return value
            case Err(error):
                raise_error(error)
            case other:
                raise TypeError(
                    f"{getattr(fn, '__qualname__', fn)!s} returned "
                    f"{type(other).__name__}, expected Ok or Err"
                )

    return wrapper


def checked[**P, T](fn: Callable[P, T]) -> Callable[P, Ok[T] | Err[ArgumentError]]:
    """Decorate a raising callable so that InvalidArgumentError becomes Err.

    Any other exception propagates.
    """

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Ok[T] | Err[ArgumentError]:
        try:
            return Ok(fn(*args, **kwargs))
        except InvalidArgumentError as e:
            return Err(e.error)

    return wrapper
