"""LongShort — the direction of a position."""

from __future__ import annotations

from enum import Enum

from opal.collect._validation import require_str
from opal.collect.errors import ArgumentError, ErrorCode
from opal.collect.result import Err, Ok


class LongShort(Enum):
    """Flag indicating whether a position is long or short."""

    LONG = "Long"
    SHORT = "Short"

    @staticmethod
    def of_long(is_long: bool) -> LongShort:
        return LongShort.LONG if is_long else LongShort.SHORT

    @staticmethod
    def parse(name: str) -> Ok[LongShort] | Err[ArgumentError]:
        """Look up a member by name, ignoring case."""
        require_str(name, "name")
        for member in LongShort:
            if member.value.upper() == name.upper():
                return Ok(member)
        return Err(ArgumentError(f"Unknown LongShort: {name}", ErrorCode.UNKNOWN_NAME, "name"))

    @staticmethod
    def of(name: str) -> LongShort:
        """Look up a member by name, raising InvalidArgumentError if unknown."""
        return LongShort.parse(name).unwrap()

    def is_long(self) -> bool:
        return self is LongShort.LONG

    def is_short(self) -> bool:
        return self is LongShort.SHORT

    def __str__(self) -> str:
        return self.value
