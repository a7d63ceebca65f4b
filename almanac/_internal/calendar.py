"""Calendar kernels for Almanac.

This module provides the unchecked calendar calculations that the
public ``almanac.gregorian`` functions and the Date class are built
on: leap years, month lengths, day numbers and day of week.

Day numbers count days since 0001-01-01 (day number 0). Several
functions reframe the year to start on March 1, with January and
February counted as months 13 and 14 of the previous year. That puts
the leap day at the end of the internal year, so the month offsets
become an affine function of the month number.

None of these functions validate their arguments. This module is not
part of the public API.
"""

from __future__ import annotations

from almanac._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_MARCH_THROUGH_DECEMBER,
    DAYS_PER_4_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_WEEK,
    FEBRUARY,
    MONTHS_PER_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    A multiple of 4 is a multiple of 400 exactly when it is a multiple of
    16 and of 25, so the test only needs the low bits and one remainder.

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    if year & 3:
        return False
    if not year & 15:
        return True
    return year % 25 != 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    if month == FEBRUARY and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year (1-366)."""
    result = _DAYS_BEFORE_MONTH[month] + day
    if month > FEBRUARY and is_leap_year(year):
        result += 1
    return result


def days_before_march_month(month: int) -> int:
    """Return the days between March 1 and the first of a March-based month.

    January and February are passed as months 13 and 14.

    Maps (3, 4, 5, ..., 12, 13, 14) to (0, 31, 61, ..., 275, 306, 337).
    """
    return (month * 979 - 2919) >> 5


def days_before_march_year(year: int) -> int:
    """Return the days from 0001-01-01 to March 1 of ``year``, minus one.

    The "minus one" lets callers add a 1-based day of month directly.
    Valid for year >= 0; year 0 yields a negative number.
    """
    century = year // 100
    # Days between March 1, 0000, and March 1 of the given year
    days = (year * DAYS_PER_4_YEARS >> 2) - century + (century >> 2)
    # Move the epoch from March 1, 0000, to January 1, 0001, and subtract one
    return days - (DAYS_MARCH_THROUGH_DECEMBER + 1)


def ymd_to_day_number(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a day number (0 = 0001-01-01).

    Args:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The number of days since January 1, 0001.
    """
    if month <= FEBRUARY:
        year -= 1
        month += MONTHS_PER_YEAR
    return days_before_march_year(year) + days_before_march_month(month) + day


def day_number_to_ymd(day_number: int) -> tuple[int, int, int]:
    """Convert a day number (0 = 0001-01-01) to year, month, day.

    Uses the Euclidean affine functions of Neri and Schneider
    ("Euclidean affine functions and applications to calendar
    algorithms", 2021): the day number is moved to a March 1, 0000
    epoch, split into 400-year cycles, then into years of the cycle
    and days since March 1, and finally into month and day.

    Args:
        day_number: Days since January 1, 0001 (0-3652058).

    Returns:
        Tuple of (year, month, day).
    """
    n1 = (day_number + DAYS_MARCH_THROUGH_DECEMBER) * 4 + 3
    century, n2 = divmod(n1, DAYS_PER_400_YEARS)
    # n2 is now (day of century) * 4 + 3
    year_of_century, n2 = divmod(n2 | 3, DAYS_PER_4_YEARS)
    days_since_march_1 = n2 >> 2

    year = century * 100 + year_of_century
    month, n3 = divmod(days_since_march_1 * 5 + 461, 153)  # month in [3, 14]
    day = n3 // 5 + 1

    # Move January and February to the beginning of the next year
    if month > MONTHS_PER_YEAR:
        year += 1
        month -= MONTHS_PER_YEAR
    return (year, month, day)


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the day of the week (0=Sunday, 6=Saturday).

    A Zeller-style congruence: January and February belong to the
    previous year, (month * 81 + 72) >> 5 supplies the month offsets,
    and the year contributes its own value plus its leap days.
    """
    total = day
    if month <= FEBRUARY:
        year -= 1
        total += 3
    total += (month * 81 + 72) >> 5
    total += year + (year >> 2)
    century = year // 100
    total += -century + (century >> 2)
    return total % DAYS_PER_WEEK


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "days_before_march_month",
    "days_before_march_year",
    "ymd_to_day_number",
    "day_number_to_ymd",
    "day_of_week",
]
