"""Internal constants for Almanac.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Year limits (0001-01-01 through 9999-12-31)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Day numbers of 0001-01-01 and 9999-12-31
MIN_DAY_NUMBER: int = 0
MAX_DAY_NUMBER: int = 3_652_058

MONTHS_PER_YEAR: int = 12
JANUARY: int = 1
FEBRUARY: int = 2
DECEMBER: int = 12

DAYS_PER_WEEK: int = 7
DAYS_PER_YEAR: int = 365
DAYS_PER_4_YEARS: int = DAYS_PER_YEAR * 4 + 1  # one leap day every four years
DAYS_PER_100_YEARS: int = DAYS_PER_4_YEARS * 25 - 1  # ...except every 100 years
DAYS_PER_400_YEARS: int = DAYS_PER_100_YEARS * 4 + 1  # ...except every 400 years

MIN_DAYS_PER_MONTH: int = 28
MAX_DAYS_PER_MONTH: int = 31

# Days from March 1 through December 31; moves an epoch between
# January 1 and March 1.
DAYS_MARCH_THROUGH_DECEMBER: int = DAYS_PER_YEAR - 31 - 28

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

# Packed date layout: year << 16 | month << 8 | day
YEAR_SHIFT: int = 16
MONTH_SHIFT: int = 8
FIELD_MASK: int = 0xFF


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_DAY_NUMBER",
    "MAX_DAY_NUMBER",
    "MONTHS_PER_YEAR",
    "JANUARY",
    "FEBRUARY",
    "DECEMBER",
    "DAYS_PER_WEEK",
    "DAYS_PER_YEAR",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_400_YEARS",
    "MIN_DAYS_PER_MONTH",
    "MAX_DAYS_PER_MONTH",
    "DAYS_MARCH_THROUGH_DECEMBER",
    "DAYS_IN_MONTH",
    "YEAR_SHIFT",
    "MONTH_SHIFT",
    "FIELD_MASK",
]
