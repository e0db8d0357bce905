"""Diem: an ISO 8601 calendar date type for Python.

Diem provides Date, a calendar day with no time-of-day, distinct from a
timestamp. Weeks start on Monday and are numbered per ISO 8601.

Core Types:
    Date: Calendar day (year, month, day), immutable
    Duration: Signed whole-day span (DAY, WEEK)

Units:
    Weekday: ISO 8601 day of week (MONDAY=1 ... SUNDAY=7)
    Month: Month of the year (JANUARY=1 ... DECEMBER=12)

Layouts:
    ANSIC, RFC822, RFC850, RFC1123, RFC3339

Exceptions:
    DiemError: Base exception
    ParseError: Failed to parse string

Logging:
    Diem logs through loguru and is disabled by default, as befits a
    library. Call ``logger.enable("diem")`` to see its debug records.

Example:
    >>> from diem import Date, Month, RFC1123, WEEK
    >>> d = Date(2021, Month.JANUARY, 31)
    >>> d.add_date(months=1)
    Date(2021, 3, 3)
    >>> (d + WEEK).format(RFC1123)
    'Sun, 07 Feb 2021'
"""

from __future__ import annotations

from loguru import logger

__version__ = "0.1.0"

# Core types
from diem.core.date import Date
from diem.core.duration import DAY, WEEK, Duration

# Units
from diem.units.month import Month
from diem.units.weekday import Weekday

# Exceptions
from diem.errors import DiemError, ParseError

# Layouts
from diem.format.layouts import ANSIC, RFC822, RFC850, RFC1123, RFC3339

logger.disable("diem")

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "Duration",
    "DAY",
    "WEEK",
    # Units
    "Month",
    "Weekday",
    # Exceptions
    "DiemError",
    "ParseError",
    # Layouts
    "ANSIC",
    "RFC822",
    "RFC850",
    "RFC1123",
    "RFC3339",
]
