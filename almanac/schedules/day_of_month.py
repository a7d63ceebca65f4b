"""Annual recurrence on a fixed day of a fixed month."""

from __future__ import annotations

import logging

from almanac._internal.calendar import day_of_week
from almanac._internal.constants import DECEMBER, JANUARY, MAX_DAYS_PER_MONTH
from almanac._internal.validation import validate_day_of_any_year, validate_month
from almanac.core.date import Date
from almanac.errors import OverflowError
from almanac.schedules.adjustments import DayOfWeekAdjustments
from almanac.schedules.annual import AnnualRecurrence
from almanac.schedules.options import AnnualDayOfMonthRecurrenceOptions

logger = logging.getLogger(__name__)

_NO_ADJUSTMENTS = (0,) * 7


class AnnualDayOfMonthRecurrence(AnnualRecurrence):
    """An event that occurs every year on a given day of a given month.

    The occurrence can be moved by a DayOfWeekAdjustments table when
    the day falls on particular weekdays. An adjusted January occurrence
    may land in December of the previous year, and an adjusted December
    occurrence in January of the next year.

    An adjusted occurrence that would fall before 0001-01-01 or after
    9999-12-31 does not exist: get_occurrence() returns the empty date
    for that year and enumerations skip it.

    Attributes:
        month: Month of the event (1-12).
        day: Day of the month of the event.
        start_year: First year in which the event occurs.
        end_year: Last year in which the event occurs.

    Examples:
        >>> from almanac.schedules import DayOfWeekAdjustments
        >>> options = AnnualDayOfMonthRecurrenceOptions(
        ...     day_of_week_adjustments=DayOfWeekAdjustments(saturday=-1, sunday=1)
        ... )
        >>> independence_day = AnnualDayOfMonthRecurrence(7, 4, options)
        >>> independence_day.get_occurrence(2020)  # Saturday, observed Friday
        Date(2020, 7, 3)
        >>> independence_day.get_occurrence(2021)  # Sunday, observed Monday
        Date(2021, 7, 5)
    """

    __slots__ = (
        "_month",
        "_day",
        "_start_year",
        "_end_year",
        "_adjustments",
        "_may_occur_in_previous_year",
        "_may_occur_in_next_year",
    )

    def __init__(
        self,
        month: int,
        day: int,
        options: AnnualDayOfMonthRecurrenceOptions | None = None,
    ) -> None:
        """Create a day-of-month recurrence.

        The options are copied, so later changes to them do not affect
        the recurrence.

        Args:
            month: The month of the event (1-12).
            day: The day of the month, between 1 and the shortest length
                of that month (28 for February).
            options: Year range and adjustments, or None for the defaults.

        Raises:
            OutOfRangeError: If month or day is out of range.
        """
        validate_month(month)
        validate_day_of_any_year(month, day)

        if options is None:
            options = AnnualDayOfMonthRecurrenceOptions()

        self._month = month
        self._day = day
        self._start_year = options.start_year
        self._end_year = options.end_year

        adjustments = options.day_of_week_adjustments
        self._adjustments = (
            adjustments.to_tuple() if adjustments is not None else _NO_ADJUSTMENTS
        )
        self._may_occur_in_previous_year = (
            month == JANUARY and day + min(self._adjustments) < 1
        )
        self._may_occur_in_next_year = (
            month == DECEMBER and day + max(self._adjustments) > MAX_DAYS_PER_MONTH
        )

        logger.debug(
            "Created day-of-month recurrence %02d-%02d for %d-%d, adjustments=%s",
            month,
            day,
            self._start_year,
            self._end_year,
            self._adjustments,
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
    def day(self) -> int:
        """Return the day of the month of the event."""
        return self._day

    @property
    def day_of_week_adjustments(self) -> DayOfWeekAdjustments:
        """Return a copy of the adjustment table."""
        return DayOfWeekAdjustments.from_values(self._adjustments)

    def _occurrence(self, year: int) -> Date:
        month = self._month
        day = self._day
        occurrence = Date(year, month, day)
        adjustment = self._adjustments[day_of_week(year, month, day)]
        if adjustment:
            try:
                occurrence = occurrence.add_days(adjustment)
            except OverflowError:
                return Date.empty()
        return occurrence

    def __repr__(self) -> str:
        return (
            f"AnnualDayOfMonthRecurrence(month={self._month}, day={self._day}, "
            f"start_year={self._start_year}, end_year={self._end_year})"
        )


__all__ = ["AnnualDayOfMonthRecurrence"]
