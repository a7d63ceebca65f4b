"""Annual recurrence on the nth weekday of a fixed month."""

from __future__ import annotations

import logging

from almanac._internal.calendar import day_of_week, days_in_month
from almanac._internal.constants import DAYS_PER_WEEK
from almanac._internal.validation import validate_range
from almanac.core.date import Date
from almanac.errors import OutOfRangeError
from almanac.schedules.annual import AnnualRecurrence
from almanac.schedules.options import AnnualDayOfWeekOfMonthRecurrenceOptions
from almanac.units.weekday import DayOfWeek

logger = logging.getLogger(__name__)


class AnnualDayOfWeekOfMonthRecurrence(AnnualRecurrence):
    """An event that occurs every year on the nth weekday of a month.

    A positive occurrence counts from the start of the month (1 is the
    first such weekday, 4 the fourth); a negative occurrence counts from
    the end (-1 is the last, -4 the fourth to last).

    Attributes:
        month: Month of the event (1-12).
        day_of_week: Weekday of the event.
        occurrence: Nonzero ordinal between -4 and 4.
        start_year: First year in which the event occurs.
        end_year: Last year in which the event occurs.

    Examples:
        >>> memorial_day = AnnualDayOfWeekOfMonthRecurrence(5, DayOfWeek.MONDAY, -1)
        >>> memorial_day.get_occurrence(2024)
        Date(2024, 5, 27)
        >>> thanksgiving = AnnualDayOfWeekOfMonthRecurrence(11, DayOfWeek.THURSDAY, 4)
        >>> Date(2024, 11, 28) in thanksgiving
        True
    """

    __slots__ = (
        "_month",
        "_day_of_week",
        "_occurrence_ordinal",
        "_start_year",
        "_end_year",
        "_max_day",
    )

    @validate_range(month=(1, 12), day_of_week=(0, 6), occurrence=(-4, 4))
    def __init__(
        self,
        month: int,
        day_of_week: DayOfWeek | int,
        occurrence: int,
        options: AnnualDayOfWeekOfMonthRecurrenceOptions | None = None,
    ) -> None:
        """Create a day-of-week-of-month recurrence.

        Args:
            month: The month of the event (1-12).
            day_of_week: The weekday of the event.
            occurrence: Which such weekday of the month, -4 to 4, not 0.
            options: Year range, or None for the defaults.

        Raises:
            OutOfRangeError: If any argument is out of range.
        """
        if occurrence == 0:
            raise OutOfRangeError("occurrence must not be 0", "occurrence", occurrence)

        if options is None:
            options = AnnualDayOfWeekOfMonthRecurrenceOptions()

        self._month = month
        self._day_of_week = DayOfWeek(day_of_week)
        self._occurrence_ordinal = occurrence
        self._start_year = options.start_year
        self._end_year = options.end_year

        # Latest day the event can fall on: 7, 14, 21 or 28 counting from
        # the start, or 0, -7, -14 or -21 relative to the last day
        self._max_day = (occurrence + (0 if occurrence > 0 else 1)) * DAYS_PER_WEEK

        logger.debug(
            "Created day-of-week-of-month recurrence month=%d %s #%d for %d-%d",
            month,
            self._day_of_week.name,
            occurrence,
            self._start_year,
            self._end_year,
        )

    @property
    def start_year(self) -> int:
        return self._start_year

    @property
    def end_year(self) -> int:
        return self._end_year

    @property
    def month(self) -> int:
        """Return the month of the event."""
        return self._month

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the weekday of the event."""
        return self._day_of_week

    @property
    def occurrence(self) -> int:
        """Return the ordinal of the weekday within the month."""
        return self._occurrence_ordinal

    def _last_possible_day(self, year: int) -> int:
        max_day = self._max_day
        if max_day <= 0:
            max_day += days_in_month(year, self._month)
        return max_day

    def _occurrence(self, year: int) -> Date:
        month = self._month
        max_day = self._last_possible_day(year)
        offset = self._day_of_week - day_of_week(year, month, max_day)
        if offset > 0:
            offset -= DAYS_PER_WEEK
        return Date(year, month, max_day + offset)

    def contains(self, date: Date) -> bool:
        if date.is_empty:
            return False
        year = date.year
        if year < self._start_year or year > self._end_year:
            return False
        if date.month != self._month or date.day_of_week != self._day_of_week:
            return False
        return 0 <= self._last_possible_day(year) - date.day < DAYS_PER_WEEK

    def __repr__(self) -> str:
        return (
            f"AnnualDayOfWeekOfMonthRecurrence(month={self._month}, "
            f"day_of_week={self._day_of_week.name}, "
            f"occurrence={self._occurrence_ordinal}, "
            f"start_year={self._start_year}, end_year={self._end_year})"
        )


__all__ = ["AnnualDayOfWeekOfMonthRecurrence"]
