"""Month enumeration.

This module provides the Month enum (January = 1, ..., December = 12).
"""

from __future__ import annotations

from enum import IntEnum

from diem._internal.constants import LONG_MONTH_NAMES, SHORT_MONTH_NAMES


class Month(IntEnum):
    """A month of the year (January = 1, ...).

    Members compare and do arithmetic as plain integers, so ``Date`` accepts
    either a ``Month`` or an ``int`` wherever a month is expected.

    Examples:
        >>> Month(2)
        <Month.FEBRUARY: 2>
        >>> str(Month.MARCH)
        'March'
        >>> Month.SEPTEMBER.short_name
        'Sep'
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def short_name(self) -> str:
        """Return the three-letter English abbreviation ("Jan")."""
        return SHORT_MONTH_NAMES[self.value]

    def __str__(self) -> str:
        return LONG_MONTH_NAMES[self.value]


__all__ = ["Month"]
