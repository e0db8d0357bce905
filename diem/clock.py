"""Time sources for ``Date.today``.

The current day is read through a Clock so callers and tests can pin it.
A process-wide default clock is used when none is passed explicitly.

Examples:
    >>> from datetime import datetime, timezone
    >>> from diem import Date
    >>> from diem.clock import FixedClock, use_clock

    >>> with use_clock(FixedClock(datetime(2024, 3, 10, tzinfo=timezone.utc))):
    ...     Date.today()
    Date(2024, 3, 10)
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from loguru import logger


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current instant."""

    def now(self) -> datetime:
        """Return the current instant."""
        ...


class SystemClock:
    """Clock backed by the host's wall clock, in the local zone."""

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock that always reports the same instant.

    Naive instants are taken to be UTC.

    Examples:
        >>> FixedClock(datetime(2021, 1, 4)).now()
        datetime.datetime(2021, 1, 4, 0, 0, tzinfo=datetime.timezone.utc)
    """

    __slots__ = ("_instant",)

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant!r})"


_clock: Clock = SystemClock()


def get_clock() -> Clock:
    """Return the process-wide default clock."""
    return _clock


def set_clock(clock: Clock) -> Clock:
    """Replace the process-wide default clock.

    Args:
        clock: The new default clock.

    Returns:
        The clock that was previously installed.

    Raises:
        TypeError: If clock has no ``now`` method.
    """
    global _clock

    if not isinstance(clock, Clock):
        raise TypeError(f"expected a Clock, got {type(clock).__name__}")

    previous = _clock
    _clock = clock
    logger.debug("Default clock replaced", previous=repr(previous), clock=repr(clock))
    return previous


@contextmanager
def use_clock(clock: Clock) -> Iterator[Clock]:
    """Install a default clock for the duration of a ``with`` block."""
    previous = set_clock(clock)
    try:
        yield clock
    finally:
        set_clock(previous)


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_clock",
    "set_clock",
    "use_clock",
]
