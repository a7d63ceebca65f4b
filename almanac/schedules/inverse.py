"""Complement of a schedule."""

from __future__ import annotations

from typing import Iterator

from almanac.core.date import Date
from almanac.schedules.schedule import Schedule, require_date


class InverseSchedule(Schedule):
    """A schedule containing every date its base schedule does not.

    The complement is taken over the whole range 0001-01-01 through
    9999-12-31, so enumerations only end at the first or last
    representable date.

    Examples:
        >>> from almanac.schedules import AnnualDayOfMonthRecurrence
        >>> not_new_year = InverseSchedule(AnnualDayOfMonthRecurrence(1, 1))
        >>> Date(2024, 1, 1) in not_new_year
        False
        >>> next(not_new_year.enumerate_forward_from(Date(2023, 12, 31)))
        Date(2023, 12, 31)
    """

    def __init__(self, base_schedule: Schedule) -> None:
        self._base_schedule = base_schedule

    @property
    def base_schedule(self) -> Schedule:
        """Return the schedule being complemented."""
        return self._base_schedule

    def contains(self, date: Date) -> bool:
        return not date.is_empty and not self._base_schedule.contains(date)

    def enumerate_backward_from(self, date: Date) -> Iterator[Date]:
        require_date(date)
        return self._enumerate_backward(date)

    def _enumerate_backward(self, date: Date) -> Iterator[Date]:
        min_value = Date.min_value()
        for base_date in self._base_schedule.enumerate_backward_from(date):
            while date > base_date:
                yield date
                date = date.previous_day()
            if base_date == min_value:
                return
            date = base_date.previous_day()

        while True:
            yield date
            if date == min_value:
                return
            date = date.previous_day()

    def enumerate_forward_from(self, date: Date) -> Iterator[Date]:
        require_date(date)
        return self._enumerate_forward(date)

    def _enumerate_forward(self, date: Date) -> Iterator[Date]:
        max_value = Date.max_value()
        for base_date in self._base_schedule.enumerate_forward_from(date):
            while date < base_date:
                yield date
                date = date.next_day()
            if base_date == max_value:
                return
            date = base_date.next_day()

        while True:
            yield date
            if date == max_value:
                return
            date = date.next_day()

    def __repr__(self) -> str:
        return f"InverseSchedule({self._base_schedule!r})"


__all__ = ["InverseSchedule"]
