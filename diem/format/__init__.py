"""Date formatting and parsing.

This module provides two ways of converting dates to and from strings:
    - Reference-pattern layouts, where the format is the reference date
      "Mon Jan 2 2006" written the way the value should look
    - strftime-style %-directives

Functions:
    format_ymd: Render a calendar day using a layout.
    parse_ymd: Parse a string against a layout.
    strftime: Format a Date using a strftime pattern.
    strptime: Parse a string using a strftime pattern.

Layouts:
    ANSIC, RFC822, RFC850, RFC1123, RFC3339 (= ISO8601)

Examples:
    >>> from diem.format import RFC850, format_ymd, parse_ymd
    >>> format_ymd(2021, 1, 4, RFC850)
    'Monday, 04-Jan-21'
    >>> parse_ymd(RFC850, "Monday, 04-Jan-21")
    (2021, 1, 4)
"""

from __future__ import annotations

from diem.format.layout import format_ymd, parse_ymd
from diem.format.layouts import ANSIC, ISO8601, RFC822, RFC850, RFC1123, RFC3339
from diem.format.strftime import strftime, strptime

__all__: list[str] = [
    # Layouts
    "ANSIC",
    "RFC822",
    "RFC850",
    "RFC1123",
    "RFC3339",
    "ISO8601",
    # Reference-pattern layouts
    "format_ymd",
    "parse_ymd",
    # strftime
    "strftime",
    "strptime",
]
