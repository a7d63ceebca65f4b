"""DayOfWeek enumeration.

This module provides the DayOfWeek enum used by Date.day_of_week,
the calendar functions, and the weekday-based recurrences.
"""

from __future__ import annotations

from enum import IntEnum


class DayOfWeek(IntEnum):
    """Day of the week, numbered from Sunday = 0 to Saturday = 6.

    DayOfWeek is an IntEnum, so members compare and index like the
    integers 0-6 they stand for.

    Examples:
        >>> DayOfWeek.MONDAY.value
        1
        >>> DayOfWeek(6)
        <DayOfWeek.SATURDAY: 6>
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


__all__ = ["DayOfWeek"]
