"""Almanac: packed calendar dates and recurring schedules.

Almanac provides a compact Date value in the proleptic Gregorian
calendar with overflow-checked arithmetic, and a small algebra of
schedules built on it.

Core Types:
    Date: Calendar date (year, month, day) packed into one integer

Units:
    DayOfWeek: Sunday-based day of the week

Schedules:
    Schedule: Abstract set of dates
    AnnualDayOfMonthRecurrence: Fixed day of a fixed month every year
    AnnualDayOfWeekOfMonthRecurrence: Nth weekday of a month every year
    CompositeSchedule: Union of schedules
    InverseSchedule: Complement of a schedule

Calendar Functions:
    is_leap_year, days_in_month, days_in_year, day_of_week,
    day_of_year, day_number, from_day_number

Exceptions:
    AlmanacError: Base exception
    OutOfRangeError: Argument outside its domain
    InvalidStateError: Operation on the empty date
    EmptyArgumentError: Empty date passed as an argument
    OverflowError: Arithmetic result out of range
    ParseError: Failed to parse string

Example:
    >>> from almanac import Date, AnnualDayOfWeekOfMonthRecurrence, DayOfWeek
    >>> memorial_day = AnnualDayOfWeekOfMonthRecurrence(5, DayOfWeek.MONDAY, -1)
    >>> next(memorial_day.enumerate_forward_from(Date(2024, 1, 1)))
    Date(2024, 5, 27)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from almanac.core.date import Date

# Units
from almanac.units.weekday import DayOfWeek

# Calendar functions
from almanac.gregorian import (
    day_number,
    day_of_week,
    day_of_year,
    days_in_month,
    days_in_year,
    from_day_number,
    is_leap_year,
)

# Limits
from almanac._internal.constants import MAX_YEAR, MIN_YEAR

# Exceptions
from almanac.errors import (
    AlmanacError,
    EmptyArgumentError,
    InvalidStateError,
    OutOfRangeError,
    OverflowError,
    ParseError,
)

# Schedules
from almanac.schedules import (
    AnnualDayOfMonthRecurrence,
    AnnualDayOfMonthRecurrenceOptions,
    AnnualDayOfWeekOfMonthRecurrence,
    AnnualDayOfWeekOfMonthRecurrenceOptions,
    AnnualRecurrence,
    CompositeSchedule,
    DayOfWeekAdjustments,
    InverseSchedule,
    RecurrenceOptions,
    Schedule,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    # Units
    "DayOfWeek",
    # Calendar functions
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_week",
    "day_of_year",
    "day_number",
    "from_day_number",
    # Limits
    "MIN_YEAR",
    "MAX_YEAR",
    # Exceptions
    "AlmanacError",
    "OutOfRangeError",
    "InvalidStateError",
    "EmptyArgumentError",
    "OverflowError",
    "ParseError",
    # Schedules
    "Schedule",
    "AnnualRecurrence",
    "AnnualDayOfMonthRecurrence",
    "AnnualDayOfWeekOfMonthRecurrence",
    "CompositeSchedule",
    "InverseSchedule",
    "DayOfWeekAdjustments",
    "RecurrenceOptions",
    "AnnualDayOfMonthRecurrenceOptions",
    "AnnualDayOfWeekOfMonthRecurrenceOptions",
]
