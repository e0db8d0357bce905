"""Internal utilities for Diem.

This module contains private implementation details:
    - Proleptic Gregorian ordinal arithmetic
    - Constants and name tables

Note: This module is not part of the public API.
"""

from __future__ import annotations

from diem._internal.calendar import (
    days_in_month,
    is_leap_year,
    normalize,
    ordinal_to_ymd,
    ymd_to_ordinal,
)

__all__: list[str] = [
    "days_in_month",
    "is_leap_year",
    "normalize",
    "ordinal_to_ymd",
    "ymd_to_ordinal",
]
