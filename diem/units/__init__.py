"""Calendar enumerations.

This module provides:
    - Weekday: ISO 8601 day of week (MONDAY=1 ... SUNDAY=7)
    - Month: Month of the year (JANUARY=1 ... DECEMBER=12)
"""

from __future__ import annotations

from diem.units.month import Month
from diem.units.weekday import Weekday

__all__: list[str] = [
    "Month",
    "Weekday",
]
