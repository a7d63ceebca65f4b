"""Validation utilities for Almanac.

This module provides validation decorators and utilities for
ensuring calendar values are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from almanac._internal.calendar import days_in_month
from almanac._internal.constants import (
    DAYS_IN_MONTH,
    MAX_DAY_NUMBER,
    MAX_YEAR,
    MIN_DAY_NUMBER,
    MIN_YEAR,
)
from almanac.errors import OutOfRangeError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising OutOfRangeError if any value is out of range.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(month=(1, 12), occurrence=(-4, 4))
        ... def make_rule(month: int, occurrence: int) -> None:
        ...     pass

        >>> make_rule(13, 1)  # Raises OutOfRangeError
        Traceback (most recent call last):
        ...
        OutOfRangeError: month must be between 1 and 12, got 13
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind_partial(*args, **kwargs)

            for param_name, (min_val, max_val) in limits.items():
                if param_name in bound.arguments:
                    value = bound.arguments[param_name]
                    if value is not None and (value < min_val or value > max_val):
                        raise OutOfRangeError(
                            f"{param_name} must be between {min_val} and {max_val}, "
                            f"got {value}",
                            param_name,
                            value,
                        )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int, param_name: str = "year") -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.
        param_name: Parameter name reported in the error.

    Raises:
        OutOfRangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(
            f"{param_name} must be between {MIN_YEAR} and {MAX_YEAR}, got {year}",
            param_name,
            year,
        )


def validate_month(month: int, param_name: str = "month") -> None:
    """Validate that a month is within 1-12.

    Raises:
        OutOfRangeError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise OutOfRangeError(
            f"{param_name} must be between 1 and 12, got {month}",
            param_name,
            month,
        )


def validate_day(year: int, month: int, day: int, param_name: str = "day") -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.
        param_name: Parameter name reported in the error.

    Raises:
        OutOfRangeError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise OutOfRangeError(
            f"{param_name} must be between 1 and {max_day} for "
            f"{year:04d}-{month:02d}, got {day}",
            param_name,
            day,
        )


def validate_day_of_any_year(month: int, day: int, param_name: str = "day") -> None:
    """Validate that a day exists in ``month`` of every year.

    February is limited to 28 days, since February 29 does not
    occur in common years.

    Raises:
        OutOfRangeError: If day is invalid for the month.
    """
    max_day = DAYS_IN_MONTH[month]
    if day < 1 or day > max_day:
        raise OutOfRangeError(
            f"{param_name} must be between 1 and {max_day} for month {month}, got {day}",
            param_name,
            day,
        )


def validate_day_number(day_number: int, param_name: str = "day_number") -> None:
    """Validate that a day number is within 0-3652058.

    Raises:
        OutOfRangeError: If the day number is out of range.
    """
    if day_number < MIN_DAY_NUMBER or day_number > MAX_DAY_NUMBER:
        raise OutOfRangeError(
            f"{param_name} must be between {MIN_DAY_NUMBER} and {MAX_DAY_NUMBER}, "
            f"got {day_number}",
            param_name,
            day_number,
        )


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_day_of_any_year",
    "validate_day_number",
]
