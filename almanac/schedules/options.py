"""Options for annual recurrences.

Options objects are mutable and validate every assignment. A
recurrence copies what it needs from its options when it is
constructed, so one options object can configure several recurrences
and later changes do not affect recurrences already built.
"""

from __future__ import annotations

from almanac._internal.constants import MAX_YEAR, MIN_YEAR
from almanac.errors import OutOfRangeError
from almanac.schedules.adjustments import DayOfWeekAdjustments


class RecurrenceOptions:
    """Active year range shared by all annual recurrence options.

    Attributes:
        start_year: First year in which the event occurs (default 1).
        end_year: Last year in which the event occurs (default 9999).

    Examples:
        >>> options = RecurrenceOptions(start_year=2000, end_year=2002)
        >>> options.start_year, options.end_year
        (2000, 2002)

        >>> options.start_year = 2003
        Traceback (most recent call last):
        ...
        OutOfRangeError: start_year must be between 1 and 2002 (the value of end_year), got 2003
    """

    def __init__(self, *, start_year: int = MIN_YEAR, end_year: int = MAX_YEAR) -> None:
        self._start_year = MIN_YEAR
        self._end_year = MAX_YEAR
        self.start_year = start_year
        self.end_year = end_year

    @property
    def start_year(self) -> int:
        """Return the first year in which the event occurs."""
        return self._start_year

    @start_year.setter
    def start_year(self, value: int) -> None:
        if value < MIN_YEAR or value > self._end_year:
            raise OutOfRangeError(
                f"start_year must be between {MIN_YEAR} and {self._end_year} "
                f"(the value of end_year), got {value}",
                "start_year",
                value,
            )
        self._start_year = value

    @property
    def end_year(self) -> int:
        """Return the last year in which the event occurs."""
        return self._end_year

    @end_year.setter
    def end_year(self, value: int) -> None:
        if value < self._start_year or value > MAX_YEAR:
            raise OutOfRangeError(
                f"end_year must be between {self._start_year} (the value of "
                f"start_year) and {MAX_YEAR}, got {value}",
                "end_year",
                value,
            )
        self._end_year = value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start_year={self._start_year}, "
            f"end_year={self._end_year})"
        )


class AnnualDayOfMonthRecurrenceOptions(RecurrenceOptions):
    """Options for AnnualDayOfMonthRecurrence.

    Attributes:
        start_year: First year in which the event occurs (default 1).
        end_year: Last year in which the event occurs (default 9999).
        day_of_week_adjustments: Offsets applied when the day falls on
            particular weekdays, or None for no adjustment.

    Examples:
        >>> options = AnnualDayOfMonthRecurrenceOptions(
        ...     day_of_week_adjustments=DayOfWeekAdjustments(saturday=-1, sunday=1)
        ... )
        >>> options.day_of_week_adjustments
        DayOfWeekAdjustments(sunday=1, saturday=-1)
    """

    def __init__(
        self,
        *,
        start_year: int = MIN_YEAR,
        end_year: int = MAX_YEAR,
        day_of_week_adjustments: DayOfWeekAdjustments | None = None,
    ) -> None:
        super().__init__(start_year=start_year, end_year=end_year)
        self.day_of_week_adjustments = day_of_week_adjustments


class AnnualDayOfWeekOfMonthRecurrenceOptions(RecurrenceOptions):
    """Options for AnnualDayOfWeekOfMonthRecurrence."""


__all__ = [
    "RecurrenceOptions",
    "AnnualDayOfMonthRecurrenceOptions",
    "AnnualDayOfWeekOfMonthRecurrenceOptions",
]
