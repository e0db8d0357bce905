"""Internal constants for Diem.

Month lengths, the fixed English name tables used by layouts, and the
ordinals of a few reference days. This module is not part of the public API.
"""

from __future__ import annotations

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days before each month (cumulative), for non-leap years
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

# Days in complete Gregorian cycles
DAYS_PER_400_YEARS: int = 146_097
DAYS_PER_100_YEARS: int = 36_524
DAYS_PER_4_YEARS: int = 1_461

# Index 0 is unused so Month/Weekday values index directly
LONG_MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
SHORT_MONTH_NAMES: tuple[str, ...] = tuple(name[:3] for name in LONG_MONTH_NAMES)

LONG_DAY_NAMES: tuple[str, ...] = (
    "",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
SHORT_DAY_NAMES: tuple[str, ...] = tuple(name[:3] for name in LONG_DAY_NAMES)

# Ordinal 1 is 0001-01-01, a Monday
ZERO_ORDINAL: int = 1


__all__ = [
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "DAYS_PER_400_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_4_YEARS",
    "LONG_MONTH_NAMES",
    "SHORT_MONTH_NAMES",
    "LONG_DAY_NAMES",
    "SHORT_DAY_NAMES",
    "ZERO_ORDINAL",
]
