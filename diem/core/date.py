"""Date class representing a calendar date.

This module provides the Date class for representing calendar days in
the proleptic Gregorian calendar, following ISO 8601 conventions.
"""

from __future__ import annotations

import datetime as _dt
import operator
from typing import TYPE_CHECKING, overload

from diem._internal.calendar import (
    is_leap_year,
    iso_week,
    normalize,
    ordinal_to_weekday,
    ordinal_to_year_day,
    ordinal_to_ymd,
)
from diem._internal.constants import ZERO_ORDINAL
from diem.clock import get_clock
from diem.core.duration import Duration
from diem.format.layout import format_ymd, parse_ymd
from diem.format.layouts import RFC3339
from diem.units.month import Month
from diem.units.weekday import Weekday

if TYPE_CHECKING:
    from diem.clock import Clock


class Date:
    """A calendar day in the proleptic Gregorian calendar.

    A Date has no time-of-day and no zone. Where an instant is needed it
    stands for midnight UTC at the start of the day. Dates are immutable;
    every transformation returns a new Date.

    Out-of-range month and day values roll over into neighbouring months
    and years instead of raising, so ``Date(2021, 4, 31)`` is May 1 and
    ``Date(2021, 3, 0)`` is the last day of February.

    The zero value ``Date()`` is January 1, year 1.

    Internal representation is the proleptic ordinal, where 0001-01-01
    is day 1.

    Attributes:
        year: The year (can be 0 or negative).
        month: The month, as a Month.
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, Month.JANUARY, 15)
        >>> d.year, d.month, d.day
        (2024, <Month.JANUARY: 1>, 15)

        >>> Date(2021, 2, 29)  # 2021 is not a leap year
        Date(2021, 3, 1)

        >>> Date().is_zero()
        True
    """

    __slots__ = ("_ordinal",)

    def __init__(self, year: int = 1, month: Month | int = Month.JANUARY, day: int = 1) -> None:
        """Create the Date for year, month and day, normalizing overflow.

        Args:
            year: The year (can be 0 or negative).
            month: The month; values outside 1-12 carry into the year.
            day: The day; values outside the month carry into the
                neighbouring months.

        Examples:
            >>> Date(2024, 13, 1)
            Date(2025, 1, 1)

            >>> Date(2024, 1, 0)
            Date(2023, 12, 31)
        """
        self._ordinal = normalize(operator.index(year), operator.index(month), operator.index(day))

    @classmethod
    def _from_ordinal(cls, ordinal: int) -> Date:
        date = cls.__new__(cls)
        date._ordinal = ordinal
        return date

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Date:
        """Create a Date from an ordinal day number.

        Ordinal 1 is 0001-01-01; ordinals below 1 reach into year 0 and
        earlier.

        Examples:
            >>> Date.from_ordinal(1)
            Date(1, 1, 1)

            >>> Date.from_ordinal(738886)
            Date(2024, 1, 1)
        """
        return cls._from_ordinal(operator.index(ordinal))

    @classmethod
    def from_datetime(cls, value: _dt.date) -> Date:
        """Return the Date on which a ``datetime`` (or ``date``) falls.

        The calendar day is read in the value's own zone; time-of-day and
        zone are then discarded.

        Examples:
            >>> import datetime
            >>> Date.from_datetime(datetime.datetime(2024, 1, 15, 23, 59))
            Date(2024, 1, 15)
        """
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls, clock: Clock | None = None) -> Date:
        """Return the current date.

        Args:
            clock: Time source to read; defaults to the process-wide clock
                (see ``diem.clock.set_clock``).

        Returns:
            The calendar day of the clock's current instant.
        """
        if clock is None:
            clock = get_clock()
        return cls.from_datetime(clock.now())

    @classmethod
    def parse(cls, layout: str, value: str) -> Date:
        """Parse a formatted string and return the date value it represents.

        The layout defines the format by showing how the reference date,

            Mon Jan 2 2006

        would be interpreted if it were the value. Any time-of-day or
        zone in value is validated then discarded.

        Args:
            layout: The layout, e.g. ``diem.RFC3339``.
            value: The string to parse.

        Returns:
            The parsed Date.

        Raises:
            ParseError: If value does not match layout or a field is out of
                range.

        Examples:
            >>> Date.parse("2006-01-02", "2024-01-15")
            Date(2024, 1, 15)

            >>> Date.parse("Mon, 02 Jan 2006", "Fri, 01 Jan 2021")
            Date(2021, 1, 1)

            >>> Date.parse("2006-01-02", "2024-04-31")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ParseError: parsing date "2024-04-31": day out of range
        """
        year, month, day = parse_ymd(layout, value)
        return cls(year, month, day)

    @classmethod
    def strptime(cls, value: str, fmt: str) -> Date:
        """Parse a string using a strftime-style format string.

        Examples:
            >>> Date.strptime("15 January 2024", "%d %B %Y")
            Date(2024, 1, 15)
        """
        from diem.format.strftime import strptime

        return strptime(value, fmt)

    @property
    def year(self) -> int:
        """Return the year component."""
        year, _, _ = ordinal_to_ymd(self._ordinal)
        return year

    @property
    def month(self) -> Month:
        """Return the month component."""
        _, month, _ = ordinal_to_ymd(self._ordinal)
        return Month(month)

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = ordinal_to_ymd(self._ordinal)
        return day

    def ymd(self) -> tuple[int, Month, int]:
        """Return the year, month, and day of the date.

        Examples:
            >>> Date(2024, 1, 15).ymd()
            (2024, <Month.JANUARY: 1>, 15)
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        return year, Month(month), day

    @property
    def weekday(self) -> Weekday:
        """Return the ISO 8601 day of the week.

        Monday is 1 and Sunday is 7.

        Examples:
            >>> Date(2023, 1, 1).weekday
            <Weekday.SUNDAY: 7>
            >>> Date(2023, 1, 2).weekday
            <Weekday.MONDAY: 1>
        """
        return Weekday(ordinal_to_weekday(self._ordinal))

    @property
    def week(self) -> int:
        """Return the ISO 8601 week number (1-53).

        Week 1 is the week containing the year's first Thursday, so the
        first days of January can belong to the last week of the previous
        year.

        Examples:
            >>> Date(2021, 1, 1).week
            53
            >>> Date(2021, 1, 4).week
            1
        """
        _, week = iso_week(self._ordinal)
        return week

    def iso_week(self) -> tuple[int, int]:
        """Return the ISO 8601 week-based year and week number.

        Examples:
            >>> Date(2021, 1, 1).iso_week()
            (2020, 53)
            >>> Date(2024, 12, 30).iso_week()
            (2025, 1)
        """
        return iso_week(self._ordinal)

    @property
    def year_day(self) -> int:
        """Return the day of the year (1-366)."""
        return ordinal_to_year_day(self._ordinal)

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    def is_zero(self) -> bool:
        """Report whether this is the zero date, January 1, year 1."""
        return self._ordinal == ZERO_ORDINAL

    def to_ordinal(self) -> int:
        """Return the ordinal day number; 0001-01-01 is 1."""
        return self._ordinal

    def time(self) -> _dt.datetime:
        """Return the instant at which this date begins, midnight UTC.

        Raises:
            OverflowError: If the year is outside 1-9999, the range
                ``datetime`` can represent.

        Examples:
            >>> Date(2024, 1, 15).time()
            datetime.datetime(2024, 1, 15, 0, 0, tzinfo=datetime.timezone.utc)
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        if not _dt.MINYEAR <= year <= _dt.MAXYEAR:
            raise OverflowError(f"year {year} is outside the range of datetime")
        return _dt.datetime(year, month, day, tzinfo=_dt.timezone.utc)

    def format(self, layout: str) -> str:
        """Return the date formatted according to layout.

        The layout shows how the reference date,

            Mon Jan 2 2006

        would be displayed if it were the value. Time-of-day and zone
        tokens render midnight UTC.

        Examples:
            >>> Date(2021, 1, 4).format("Mon Jan _2 2006")
            'Mon Jan  4 2021'

            >>> Date(2021, 1, 4).format("2006-01-02 15:04 MST")
            '2021-01-04 00:00 UTC'
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        return format_ymd(year, month, day, layout)

    def strftime(self, fmt: str) -> str:
        """Format the date using a strftime-style format string.

        Examples:
            >>> Date(2024, 1, 15).strftime("%d/%m/%Y")
            '15/01/2024'
        """
        from diem.format.strftime import strftime

        return strftime(self, fmt)

    def add(self, d: Duration | int) -> Date:
        """Return the date d days after this one (before, if negative).

        Examples:
            >>> from diem import WEEK
            >>> Date(2024, 2, 26).add(WEEK)
            Date(2024, 3, 4)

            >>> Date(2024, 1, 1).add(-1)
            Date(2023, 12, 31)
        """
        days = d.days if isinstance(d, Duration) else operator.index(d)
        return Date._from_ordinal(self._ordinal + days)

    def add_date(self, years: int = 0, months: int = 0, days: int = 0) -> Date:
        """Return the date offset by the given years, months and days.

        Years and months are added to the fields first and the month is
        normalized; days are then added as an offset. The day is not
        clamped to the end of a shorter month, it rolls over.

        Examples:
            >>> Date(2021, 1, 31).add_date(months=1)  # February 31
            Date(2021, 3, 3)

            >>> Date(2024, 2, 29).add_date(years=1)
            Date(2025, 3, 1)

            >>> Date(2024, 3, 31).add_date(0, -1, 1)
            Date(2024, 3, 3)
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        return Date(year + years, month + months, day + days)

    def after(self, other: Date) -> bool:
        """Report whether this date is after other."""
        return self._ordinal > other._ordinal

    def before(self, other: Date) -> bool:
        """Report whether this date is before other."""
        return self._ordinal < other._ordinal

    def equal(self, other: Date) -> bool:
        """Report whether this date and other are the same day."""
        return self._ordinal == other._ordinal

    def __add__(self, other: object) -> Date:
        """Add a Duration to this date.

        Examples:
            >>> Date(2024, 1, 15) + Duration(10)
            Date(2024, 1, 25)
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> Date:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Duration) -> Date: ...

    @overload
    def __sub__(self, other: Date) -> Duration: ...

    def __sub__(self, other: object) -> Date | Duration:
        """Subtract a Duration (giving a Date) or a Date (giving a Duration).

        Examples:
            >>> Date(2024, 1, 25) - Duration(10)
            Date(2024, 1, 15)

            >>> Date(2024, 3, 1) - Date(2024, 2, 1)
            Duration(29)
        """
        if isinstance(other, Duration):
            return self.add(-other)
        if isinstance(other, Date):
            return Duration(self._ordinal - other._ordinal)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal >= other._ordinal

    def __hash__(self) -> int:
        return hash(self._ordinal)

    def __reduce__(self) -> tuple[object, tuple[int]]:
        return (Date.from_ordinal, (self._ordinal,))

    def __repr__(self) -> str:
        """Return a string like 'Date(2024, 1, 15)'."""
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return the ISO 8601 form, e.g. '2024-01-15'.

        This always round-trips through ``Date.parse(RFC3339, ...)``.
        """
        return self.format(RFC3339)


__all__ = ["Date"]
