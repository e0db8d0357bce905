"""Duration class representing a whole number of days.

This module provides the Duration class, the elapsed time between two
dates, and the DAY and WEEK units.
"""

from __future__ import annotations


class Duration:
    """A signed span of whole days.

    Duration has no sub-day resolution. It is the operand of ``Date.add``
    and the result of subtracting one Date from another.

    Attributes:
        days: The number of days (can be negative).

    Examples:
        >>> Duration(3).days
        3
        >>> 2 * WEEK
        Duration(14)
        >>> WEEK - DAY
        Duration(6)
    """

    __slots__ = ("_days",)

    def __init__(self, days: int = 0) -> None:
        """Create a Duration of the given number of days.

        Raises:
            TypeError: If days is not an integer.
        """
        if isinstance(days, bool) or not isinstance(days, int):
            raise TypeError(f"days must be an int, got {type(days).__name__}")
        self._days = int(days)

    @property
    def days(self) -> int:
        """Return the number of days."""
        return self._days

    @property
    def is_negative(self) -> bool:
        """Return True if this duration is negative."""
        return self._days < 0

    @property
    def is_zero(self) -> bool:
        """Return True if this duration is zero."""
        return self._days == 0

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._days + other._days)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if isinstance(other, int) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._days - other._days)

    def __mul__(self, other: object) -> Duration:
        """Multiply a duration by an integer.

        Examples:
            >>> WEEK * 3
            Duration(21)
        """
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(self._days * other)

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> Duration | int:
        """Divide by an integer (giving a Duration) or by a Duration (giving a count).

        Examples:
            >>> Duration(15) // 2
            Duration(7)
            >>> Duration(15) // WEEK
            2
        """
        if isinstance(other, Duration):
            if other._days == 0:
                raise ZeroDivisionError("division by zero duration")
            return self._days // other._days
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("division by zero")
        return Duration(self._days // other)

    def __neg__(self) -> Duration:
        return Duration(-self._days)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return Duration(abs(self._days))

    def __int__(self) -> int:
        return self._days

    def __index__(self) -> int:
        return self._days

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._days == other._days

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        return f"Duration({self._days})"

    def __str__(self) -> str:
        """Return a human-readable string like "1 day" or "-3 days"."""
        if abs(self._days) == 1:
            return f"{self._days} day"
        return f"{self._days} days"

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return self._days != 0


DAY = Duration(1)
WEEK = Duration(7)


__all__ = ["Duration", "DAY", "WEEK"]
