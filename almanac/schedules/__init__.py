"""Date schedules.

This module provides:
    - Schedule: Abstract set of dates with membership and enumeration
    - AnnualRecurrence: Base class for once-a-year events
    - AnnualDayOfMonthRecurrence: Fixed day of a fixed month
    - AnnualDayOfWeekOfMonthRecurrence: Nth weekday of a fixed month
    - CompositeSchedule: Union of schedules
    - InverseSchedule: Complement of a schedule
    - DayOfWeekAdjustments and the recurrence options classes
"""

from __future__ import annotations

from almanac.schedules.adjustments import DayOfWeekAdjustments
from almanac.schedules.annual import AnnualRecurrence
from almanac.schedules.composite import CompositeSchedule
from almanac.schedules.day_of_month import AnnualDayOfMonthRecurrence
from almanac.schedules.day_of_week_of_month import AnnualDayOfWeekOfMonthRecurrence
from almanac.schedules.inverse import InverseSchedule
from almanac.schedules.options import (
    AnnualDayOfMonthRecurrenceOptions,
    AnnualDayOfWeekOfMonthRecurrenceOptions,
    RecurrenceOptions,
)
from almanac.schedules.schedule import Schedule

__all__: list[str] = [
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
