"""Core value types.

This module provides:
    - Date: Calendar day in the proleptic Gregorian calendar
    - Duration: Signed whole-day span, with the DAY and WEEK units
"""

from __future__ import annotations

from diem.core.date import Date
from diem.core.duration import DAY, WEEK, Duration

__all__: list[str] = [
    "Date",
    "Duration",
    "DAY",
    "WEEK",
]
