"""
Combodate - Data Schema Module.

This module defines the small set of value types that flow between the
Combodate components. Everything here is immutable once created.

Classes:
    Period: Enumeration of the calendar periods a proportion is taken over.
    Row: A single (label, value) line of the output table.
"""

from dataclasses import astuple, dataclass
from enum import Enum
from typing import Iterator


# Fixed-point proportion settings
PROPORTION_SCALE = 100_000
PROPORTION_DIGITS = 5

# Digit grouping used for every grouped number in the table
GROUP_SIZE = 3
GROUP_SEPARATOR = " "


class Period(Enum):
    """
    Calendar periods over which an elapsed proportion is computed.

    Attributes:
        DAY: From local midnight to the next local midnight.
        WEEK: ISO week, starting Monday 00:00 local time.
        MONTH: Calendar month, starting on the 1st at 00:00 local time.
        YEAR: Calendar year, starting 1 January 00:00 local time.
    """

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class Row:
    """
    One line of the output table.

    Unpacks like a ``(label, value)`` tuple so plain pairs and Row
    objects can be mixed freely when rendering.

    Attributes:
        label: Text of the left-hand column.
        value: Text of the right-hand column.
    """

    label: str
    value: str

    def __iter__(self) -> Iterator[str]:
        return iter(astuple(self))
