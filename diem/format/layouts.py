"""Predefined layouts for ``Date.format`` and ``Date.parse``.

The reference date used in the layouts is the specific date:

    Mon Jan 2 2006

Examples:
    >>> from diem import Date
    >>> Date(2021, 1, 4).format(RFC1123)
    'Mon, 04 Jan 2021'
"""

from __future__ import annotations

ANSIC: str = "Mon Jan _2 2006"
RFC822: str = "02 Jan 06"
RFC850: str = "Monday, 02-Jan-06"
RFC1123: str = "Mon, 02 Jan 2006"
RFC3339: str = "2006-01-02"

# The canonical textual form of a Date
ISO8601: str = RFC3339


__all__ = [
    "ANSIC",
    "RFC822",
    "RFC850",
    "RFC1123",
    "RFC3339",
    "ISO8601",
]
