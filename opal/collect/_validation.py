"""Shared argument checks for the public opal API.

Each helper returns its argument so checks can be used inline.
"""

from __future__ import annotations

from opal.collect.errors import ArgumentError, ErrorCode, InvalidArgumentError


def invalid(message: str, code: ErrorCode, argument: str) -> InvalidArgumentError:
    """Build an InvalidArgumentError around a fresh ArgumentError value."""
    return InvalidArgumentError(ArgumentError(message=message, code=code, argument=argument))


def require_not_none[T](value: T | None, argument: str) -> T:
    if value is None:
        raise invalid(f"Argument '{argument}' must not be None", ErrorCode.NULL_ARGUMENT, argument)
    return value


def require_str(value: object, argument: str) -> str:
    """Reject None and anything that is not a str."""
    require_not_none(value, argument)
    if not isinstance(value, str):
        raise invalid(
            f"Argument '{argument}' must be a str, got {type(value).__name__}",
            ErrorCode.INVALID_VALUE,
            argument,
        )
    return value
