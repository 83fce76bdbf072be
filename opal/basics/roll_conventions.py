"""Roll conventions: the day of the month a periodic schedule rolls on.

A roll convention adjusts an unadjusted schedule date to the day that the
convention requires (end of month, third Wednesday, the 15th, ...). Business
day adjustment is a separate, later step.

Names accepted by parse_roll_convention:
  None, EOM, IMM, IMMAUD, IMMNZD, SFE   standard conventions
  Day1 .. Day30                         day of month, clamped to month end
  DayMon .. DaySun                      next or same day of week
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Protocol, assert_never, final, runtime_checkable

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from opal.collect._validation import require_not_none, require_str
from opal.collect.errors import ArgumentError, ErrorCode
from opal.collect.result import Err, Ok
from opal.collect.unchecked import unchecked

_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)
_WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@runtime_checkable
class RollConvention(Protocol):
    """Adjusts a date to the day of the month a schedule rolls on."""

    @property
    def convention_name(self) -> str: ...

    def adjust(self, d: date) -> date: ...


def matches(convention: RollConvention, d: date) -> bool:
    """True if ``d`` is already on the convention's roll day."""
    return convention.adjust(d) == d


def next_roll(convention: RollConvention, d: date, period: relativedelta) -> date:
    """Move ``d`` forward by ``period`` and adjust to the roll day."""
    require_not_none(d, "date")
    return convention.adjust(d + period)


def previous_roll(convention: RollConvention, d: date, period: relativedelta) -> date:
    """Move ``d`` back by ``period`` and adjust to the roll day."""
    require_not_none(d, "date")
    return convention.adjust(d - period)


# ---------------------------------------------------------------------------
# Standard named conventions
# ---------------------------------------------------------------------------


class StandardRollConvention(Enum):
    """Named roll conventions used by exchange-traded and OTC schedules."""

    NONE = "None"      # No adjustment
    EOM = "EOM"        # Last day of month
    IMM = "IMM"        # 3rd Wednesday
    IMMAUD = "IMMAUD"  # Day before 2nd Friday (ASX)
    IMMNZD = "IMMNZD"  # Wednesday on or after the 9th (NZFE)
    SFE = "SFE"        # 2nd Friday (Sydney Futures Exchange)

    @property
    def convention_name(self) -> str:
        return self.value

    def adjust(self, d: date) -> date:
        require_not_none(d, "date")
        match self:
            case StandardRollConvention.NONE:
                return d
            case StandardRollConvention.EOM:
                return d + relativedelta(day=31)
            case StandardRollConvention.IMM:
                return d + relativedelta(day=1, weekday=WE(+3))
            case StandardRollConvention.IMMAUD:
                # weekday is applied after days in relativedelta, so two steps
                return d + relativedelta(day=1, weekday=FR(+2)) - timedelta(days=1)
            case StandardRollConvention.IMMNZD:
                return d + relativedelta(day=9, weekday=WE(+1))
            case StandardRollConvention.SFE:
                return d + relativedelta(day=1, weekday=FR(+2))
            case _never:
                assert_never(_never)

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Day of month / day of week conventions
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class DayOfMonthRollConvention:
    """Roll on a fixed day of the month (1-30).

    Months shorter than ``day`` roll on their last day instead.
    Day 31 is not a convention of its own; use EOM.
    """

    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.day <= 30:
            raise TypeError(f"DayOfMonthRollConvention.day must be in 1..30, got {self.day}")

    @property
    def convention_name(self) -> str:
        return f"Day{self.day}"

    def adjust(self, d: date) -> date:
        require_not_none(d, "date")
        return d + relativedelta(day=self.day)

    def __str__(self) -> str:
        return self.convention_name


@final
@dataclass(frozen=True, slots=True)
class DayOfWeekRollConvention:
    """Roll on the next or same given weekday (Monday = 0)."""

    weekday: int

    def __post_init__(self) -> None:
        if not 0 <= self.weekday <= 6:
            raise TypeError(
                f"DayOfWeekRollConvention.weekday must be in 0..6, got {self.weekday}"
            )

    @property
    def convention_name(self) -> str:
        return f"Day{_WEEKDAY_NAMES[self.weekday]}"

    def adjust(self, d: date) -> date:
        require_not_none(d, "date")
        return d + relativedelta(weekday=_WEEKDAYS[self.weekday](+1))

    def __str__(self) -> str:
        return self.convention_name


# ---------------------------------------------------------------------------
# Lookup by name
# ---------------------------------------------------------------------------


def parse_roll_convention(name: str) -> Ok[RollConvention] | Err[ArgumentError]:
    """Find the roll convention with the given name, ignoring case."""
    require_str(name, "name")
    upper = name.upper()
    for standard in StandardRollConvention:
        if standard.value.upper() == upper:
            return Ok(standard)
    if upper.startswith("DAY"):
        suffix = upper[3:]
        # no leading zeros, so accepted names round-trip through convention_name
        if suffix.isascii() and suffix.isdigit() and suffix[0] != "0" and int(suffix) <= 30:
            return Ok(DayOfMonthRollConvention(day=int(suffix)))
        for i, day_name in enumerate(_WEEKDAY_NAMES):
            if suffix == day_name.upper():
                return Ok(DayOfWeekRollConvention(weekday=i))
    return Err(ArgumentError(
        f"Unknown RollConvention name: {name}", ErrorCode.UNKNOWN_NAME, "name",
    ))


def roll_convention_of(name: str) -> RollConvention:
    """Find the roll convention with the given name.

    Raises InvalidArgumentError with code UNKNOWN_NAME if there is none.
    """
    return unchecked(parse_roll_convention)(name)
