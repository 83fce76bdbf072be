"""opal.basics — position direction and schedule roll conventions."""

from opal.basics.long_short import LongShort as LongShort
from opal.basics.roll_conventions import (
    DayOfMonthRollConvention as DayOfMonthRollConvention,
)
from opal.basics.roll_conventions import (
    DayOfWeekRollConvention as DayOfWeekRollConvention,
)
from opal.basics.roll_conventions import (
    RollConvention as RollConvention,
)
from opal.basics.roll_conventions import (
    StandardRollConvention as StandardRollConvention,
)
from opal.basics.roll_conventions import (
    matches as matches,
)
from opal.basics.roll_conventions import (
    next_roll as next_roll,
)
from opal.basics.roll_conventions import (
    parse_roll_convention as parse_roll_convention,
)
from opal.basics.roll_conventions import (
    previous_roll as previous_roll,
)
from opal.basics.roll_conventions import (
    roll_convention_of as roll_convention_of,
)
