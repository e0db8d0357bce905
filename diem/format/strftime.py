"""strftime-style formatting and parsing for dates.

An alternative to reference-pattern layouts for callers used to
%-directives. Names are always English, so output does not depend on
the process locale.

Supported Directives:
    %Y - Year, at least 4 digits (e.g., 2024, -0044)
    %y - 2-digit year (00-99)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %e - Space-padded day ( 1-31)
    %j - 3-digit day of year (001-366)
    %b - Abbreviated month name (Jan)
    %B - Full month name (January)
    %a - Abbreviated weekday name (Mon)
    %A - Full weekday name (Monday)
    %u - ISO 8601 weekday (1-7, Monday is 1)         [format only]
    %V - ISO 8601 week number (01-53)                 [format only]
    %G - ISO 8601 week-based year                     [format only]
    %% - Literal %

Other directives are copied through unchanged by strftime and rejected
by strptime.

Functions:
    strftime: Format a Date using a strftime-style format string.
    strptime: Parse a string using a strftime-style format string.

Examples:
    >>> from diem import Date
    >>> strftime(Date(2024, 1, 15), "%a %d %B %Y")
    'Mon 15 January 2024'

    >>> strptime("15/01/2024", "%d/%m/%Y")
    Date(2024, 1, 15)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from loguru import logger

from diem._internal.calendar import days_in_month, days_in_year, ordinal_to_ymd, ymd_to_ordinal
from diem._internal.constants import (
    LONG_DAY_NAMES,
    LONG_MONTH_NAMES,
    SHORT_DAY_NAMES,
    SHORT_MONTH_NAMES,
)
from diem.errors import ParseError

if TYPE_CHECKING:
    from diem.core.date import Date


def _names(table: tuple[str, ...]) -> str:
    return "|".join(name for name in table if name)


# Mapping of format directives to their patterns for parsing
_PARSE_PATTERNS: dict[str, str] = {
    "%Y": r"(?P<year>[+-]?\d{4,})",
    "%y": r"(?P<year2>\d{2})",
    "%m": r"(?P<month>\d{2})",
    "%d": r"(?P<day>\d{2})",
    "%e": r"(?P<day_e> ?\d{1,2})",
    "%j": r"(?P<yday>\d{3})",
    "%b": rf"(?P<month_abbr>{_names(SHORT_MONTH_NAMES)})",
    "%B": rf"(?P<month_name>{_names(LONG_MONTH_NAMES)})",
    "%a": rf"(?:{_names(SHORT_DAY_NAMES)})",
    "%A": rf"(?:{_names(LONG_DAY_NAMES)})",
    "%%": r"%",
}

_SUPPORTED_PARSE = "%Y, %y, %m, %d, %e, %j, %b, %B, %a, %A, %%"


def strftime(value: Date, fmt: str) -> str:
    """Format a Date using a strftime-style format string.

    Args:
        value: The Date to format.
        fmt: Format string with %-directives.

    Returns:
        Formatted string. Directives outside the module's list, such as %H, are
        copied through unchanged.

    Examples:
        >>> from diem import Date
        >>> strftime(Date(2021, 1, 1), "%G-W%V-%u")
        '2020-W53-5'
    """
    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            result.append(_format_directive(value, fmt[i : i + 2]))
            i += 2
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(value: Date, directive: str) -> str:
    """Format a single directive."""
    year, month, day = value.ymd()

    if directive == "%%":
        return "%"
    elif directive == "%Y":
        return f"{year:04d}" if year >= 0 else f"{year:05d}"
    elif directive == "%y":
        return f"{abs(year) % 100:02d}"
    elif directive == "%m":
        return f"{int(month):02d}"
    elif directive == "%d":
        return f"{day:02d}"
    elif directive == "%e":
        return f"{day:2d}"
    elif directive == "%j":
        return f"{value.year_day:03d}"
    elif directive == "%b":
        return month.short_name
    elif directive == "%B":
        return str(month)
    elif directive == "%a":
        return value.weekday.short_name
    elif directive == "%A":
        return str(value.weekday)
    elif directive == "%u":
        return str(int(value.weekday))
    elif directive == "%V":
        return f"{value.week:02d}"
    elif directive == "%G":
        iso_year, _ = value.iso_week()
        return f"{iso_year:04d}" if iso_year >= 0 else f"{iso_year:05d}"
    else:
        # Unknown directives are copied through unchanged
        return directive


def strptime(s: str, fmt: str) -> Date:
    """Parse a string using a strftime-style format string.

    Missing year defaults to 1, missing month and day to 1. Weekday names
    are matched but not checked against the date.

    Args:
        s: The string to parse.
        fmt: Format string with %-directives.

    Returns:
        The parsed Date.

    Raises:
        ParseError: If the string doesn't match the format, or a field is
            out of range.
        ValueError: If format contains unsupported or repeated directives.

    Examples:
        >>> strptime("2024-060", "%Y-%j")
        Date(2024, 2, 29)

        >>> strptime("2024-13-01", "%Y-%m-%d")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: parsing date "2024-13-01": month out of range
    """
    from diem.core.date import Date

    match = re.fullmatch(_format_to_regex(fmt), s, re.IGNORECASE | re.ASCII)
    if not match:
        logger.debug("Date parse failed", format=fmt, value=s)
        raise ParseError(fmt, s, fmt, s)

    groups = match.groupdict()

    year = 1
    if groups.get("year"):
        year = int(groups["year"])
    elif groups.get("year2"):
        two = int(groups["year2"])
        year = two + (1900 if two >= 69 else 2000)

    month = None
    if groups.get("month"):
        month = int(groups["month"])
    elif groups.get("month_abbr"):
        month = _index_of(SHORT_MONTH_NAMES, groups["month_abbr"])
    elif groups.get("month_name"):
        month = _index_of(LONG_MONTH_NAMES, groups["month_name"])

    day = None
    if groups.get("day"):
        day = int(groups["day"])
    elif groups.get("day_e"):
        day = int(groups["day_e"])

    if month is not None and not 1 <= month <= 12:
        raise _range_error(fmt, s, "month")

    if groups.get("yday"):
        yday = int(groups["yday"])
        if not 1 <= yday <= days_in_year(year):
            raise _range_error(fmt, s, "day-of-year")
        _, yd_month, yd_day = ordinal_to_ymd(ymd_to_ordinal(year, 1, 1) + yday - 1)
        if (month is not None and month != yd_month) or (day is not None and day != yd_day):
            raise ParseError(fmt, s, "", "", ": day-of-year does not match date")
        month, day = yd_month, yd_day

    month = month or 1
    day = 1 if day is None else day
    if not 1 <= day <= days_in_month(year, month):
        raise _range_error(fmt, s, "day")

    return Date(year, month, day)


def _index_of(table: tuple[str, ...], name: str) -> int:
    lowered = name.lower()
    return next(i for i, candidate in enumerate(table) if candidate.lower() == lowered)


def _range_error(fmt: str, s: str, field: str) -> ParseError:
    logger.debug("Date field out of range", format=fmt, value=s, field=field)
    return ParseError(fmt, s, "", "", f": {field} out of range")


def _format_to_regex(fmt: str) -> str:
    """Convert a strftime format string to a regex pattern.

    The pattern is matched with re.ASCII against the whole input, so only
    ASCII digits are accepted and nothing may trail the date.

    Raises:
        ValueError: If format contains unsupported directives, or repeats
            one that captures a field.
    """
    result = []
    seen: set[str] = set()
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            directive = fmt[i : i + 2]
            if directive not in _PARSE_PATTERNS:
                raise ValueError(
                    f"unsupported strptime directive: {directive}. Supported: {_SUPPORTED_PARSE}"
                )
            pattern = _PARSE_PATTERNS[directive]
            if pattern.startswith("(?P<"):
                if directive in seen:
                    raise ValueError(f"repeated strptime directive: {directive}")
                seen.add(directive)
            result.append(pattern)
            i += 2
        else:
            result.append(re.escape(fmt[i]))
            i += 1

    return "".join(result)


__all__ = ["strftime", "strptime"]
