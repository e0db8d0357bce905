"""Weekday enumeration with ISO 8601 numbering.

This module provides the Weekday enum, where the week starts on Monday.
"""

from __future__ import annotations

from enum import IntEnum

from diem._internal.constants import LONG_DAY_NAMES, SHORT_DAY_NAMES


class Weekday(IntEnum):
    """A day of the week, as per ISO 8601 (Monday = 1, ..., Sunday = 7).

    Unlike ``datetime.date.weekday()``, which counts from zero, the values
    here match ``datetime.date.isoweekday()``.

    Examples:
        >>> Weekday.SUNDAY
        <Weekday.SUNDAY: 7>
        >>> str(Weekday.MONDAY)
        'Monday'
        >>> Weekday.FRIDAY.short_name
        'Fri'
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def short_name(self) -> str:
        """Return the three-letter English abbreviation ("Mon")."""
        return SHORT_DAY_NAMES[self.value]

    def __str__(self) -> str:
        return LONG_DAY_NAMES[self.value]


__all__ = ["Weekday"]
