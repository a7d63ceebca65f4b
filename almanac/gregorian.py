"""Proleptic Gregorian calendar functions.

These are the validated counterparts of the internal calendar
kernels. They accept years 1-9999 and months 1-12, and raise
OutOfRangeError for anything else.

Functions:
    is_leap_year: Leap-year test
    days_in_month: Length of a month
    days_in_year: Length of a year
    day_of_week: Weekday of a date (0=Sunday)
    day_of_year: 1-based ordinal of a date within its year
    day_number: Days since 0001-01-01
    from_day_number: Inverse of day_number
"""

from __future__ import annotations

from almanac._internal import calendar as _calendar
from almanac._internal.validation import (
    validate_day,
    validate_day_number,
    validate_month,
    validate_year,
)
from almanac.units.weekday import DayOfWeek


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a leap year.

    Args:
        year: A year between 1 and 9999.

    Raises:
        OutOfRangeError: If year is out of range.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(2100)
        False
    """
    validate_year(year)
    return _calendar.is_leap_year(year)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Raises:
        OutOfRangeError: If year or month is out of range.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 2)
        28
    """
    validate_year(year)
    validate_month(month)
    return _calendar.days_in_month(year, month)


def days_in_year(year: int) -> int:
    """Return 366 for leap years and 365 otherwise.

    Raises:
        OutOfRangeError: If year is out of range.
    """
    validate_year(year)
    return _calendar.days_in_year(year)


def _validate_date(year: int, month: int, day: int) -> None:
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


def day_of_week(year: int, month: int, day: int) -> DayOfWeek:
    """Return the day of the week of a date.

    Raises:
        OutOfRangeError: If the components do not form a valid date.

    Examples:
        >>> day_of_week(2024, 5, 27)
        <DayOfWeek.MONDAY: 1>
        >>> day_of_week(1, 1, 1)
        <DayOfWeek.MONDAY: 1>
    """
    _validate_date(year, month, day)
    return DayOfWeek(_calendar.day_of_week(year, month, day))


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the day of the year (1-366) of a date.

    Raises:
        OutOfRangeError: If the components do not form a valid date.
    """
    _validate_date(year, month, day)
    return _calendar.day_of_year(year, month, day)


def day_number(year: int, month: int, day: int) -> int:
    """Return the number of days between 0001-01-01 and a date.

    Args:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        A day number between 0 and 3652058.

    Raises:
        OutOfRangeError: If the components do not form a valid date.

    Examples:
        >>> day_number(1, 1, 1)
        0
        >>> day_number(9999, 12, 31)
        3652058
    """
    _validate_date(year, month, day)
    return _calendar.ymd_to_day_number(year, month, day)


def from_day_number(day_number: int) -> tuple[int, int, int]:
    """Return the (year, month, day) whose day number is ``day_number``.

    Args:
        day_number: Days since 0001-01-01, between 0 and 3652058.

    Returns:
        Tuple of (year, month, day).

    Raises:
        OutOfRangeError: If day_number is out of range.

    Examples:
        >>> from_day_number(0)
        (1, 1, 1)
        >>> from_day_number(730119)
        (2000, 1, 1)
    """
    validate_day_number(day_number)
    return _calendar.day_number_to_ymd(day_number)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_week",
    "day_of_year",
    "day_number",
    "from_day_number",
]
