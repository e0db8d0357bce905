"""Calendar utilities for Diem.

Ordinal arithmetic over the proleptic Gregorian calendar. A day is
identified by its ordinal, where ordinal 1 = 0001-01-01. Year 0 and
negative years are valid (astronomical numbering); Python's floor
division keeps every formula here correct on both sides of ordinal 1.

This module is not part of the public API.
"""

from __future__ import annotations

from diem._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_4_YEARS,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert a valid year, month, day to its ordinal.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number; 0001-01-01 is 1.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(1970, 1, 1)
        719163
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal to year, month, day.

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, DAYS_PER_400_YEARS)
    n100, n = divmod(n, DAYS_PER_100_YEARS)
    n4, n = divmod(n, DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year closing a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert day-of-year (1-366) to month and day."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def normalize(year: int, month: int, day: int) -> int:
    """Return the ordinal of year/month/day, rolling over out-of-range fields.

    The month is folded into 1-12 first, carrying whole years; the day is
    then applied as an offset from the first of that month, so day 0 is the
    last day of the previous month and April 31 is May 1.

    Examples:
        >>> ordinal_to_ymd(normalize(2021, 2, 29))
        (2021, 3, 1)
        >>> ordinal_to_ymd(normalize(2021, 13, 1))
        (2022, 1, 1)
    """
    carry, month_index = divmod(month - 1, 12)
    return ymd_to_ordinal(year + carry, month_index + 1, 1) + day - 1


def ordinal_to_weekday(ordinal: int) -> int:
    """Return the ISO 8601 day of week (Monday=1, Sunday=7)."""
    # Ordinal 1 (0001-01-01) was a Monday
    return (ordinal - 1) % 7 + 1


def ordinal_to_year_day(ordinal: int) -> int:
    """Return the day of the year (1-366)."""
    year, _, _ = ordinal_to_ymd(ordinal)
    return ordinal - ymd_to_ordinal(year, 1, 1) + 1


def iso_week(ordinal: int) -> tuple[int, int]:
    """Return the ISO 8601 (year, week) the ordinal falls in.

    Weeks run Monday to Sunday and belong to the year holding their
    Thursday, so week 1 is the week containing January 4th.

    Examples:
        >>> iso_week(ymd_to_ordinal(2021, 1, 1))
        (2020, 53)
        >>> iso_week(ymd_to_ordinal(2021, 1, 4))
        (2021, 1)
    """
    thursday = ordinal + 4 - ordinal_to_weekday(ordinal)
    year, _, _ = ordinal_to_ymd(thursday)
    week = (thursday - ymd_to_ordinal(year, 1, 1)) // 7 + 1
    return (year, week)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "normalize",
    "ordinal_to_weekday",
    "ordinal_to_year_day",
    "iso_week",
]
