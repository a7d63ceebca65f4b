"""Annual recurrence base class.

An annual recurrence produces at most one occurrence per year within
an active year range. Subclasses describe how the occurrence of a
given year is found; this base class turns that rule into membership
tests and enumerations.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Iterator

from almanac._internal.validation import validate_year
from almanac.core.date import Date
from almanac.schedules.schedule import Schedule, require_date


class AnnualRecurrence(Schedule):
    """Schedule of an event that occurs once every year.

    Occurrences are strictly increasing with the year. An occurrence
    usually falls in its own year, but a rule may move it up to a few
    days into the previous or the next year; subclasses report this
    through _may_occur_in_previous_year and _may_occur_in_next_year so
    that contains() and the enumerations look at neighboring years.

    Subclasses implement start_year, end_year and _occurrence().
    """

    __slots__ = ()

    _may_occur_in_previous_year: bool = False
    _may_occur_in_next_year: bool = False

    @property
    @abstractmethod
    def start_year(self) -> int:
        """Return the first year in which the event occurs."""

    @property
    @abstractmethod
    def end_year(self) -> int:
        """Return the last year in which the event occurs."""

    @abstractmethod
    def _occurrence(self, year: int) -> Date:
        """Return the occurrence for an active ``year``, without validation.

        Returns the empty date when the occurrence would fall outside
        the representable date range.
        """

    def get_occurrence(self, year: int) -> Date:
        """Return the date on which the event occurs in ``year``.

        Args:
            year: A year between 1 and 9999.

        Returns:
            The occurrence assigned to the year, or the empty date if
            the event does not occur in that year.

        Raises:
            OutOfRangeError: If year is outside 1-9999.
        """
        validate_year(year)
        if year < self.start_year or year > self.end_year:
            return Date.empty()
        return self._occurrence(year)

    def contains(self, date: Date) -> bool:
        if date.is_empty:
            return False
        year = date.year
        if date == self._occurrence_or_empty(year):
            return True
        if self._may_occur_in_previous_year and date == self._occurrence_or_empty(year + 1):
            return True
        if self._may_occur_in_next_year and date == self._occurrence_or_empty(year - 1):
            return True
        return False

    def _occurrence_or_empty(self, year: int) -> Date:
        if year < self.start_year or year > self.end_year:
            return Date.empty()
        return self._occurrence(year)

    def enumerate_backward_from(self, date: Date) -> Iterator[Date]:
        require_date(date)
        year = date.year
        if self._may_occur_in_previous_year:
            year += 1
        return self._enumerate_backward(date, min(year, self.end_year))

    def _enumerate_backward(self, date: Date, year: int) -> Iterator[Date]:
        start_year = self.start_year
        while year >= start_year:
            occurrence = self._occurrence(year)
            if occurrence and occurrence <= date:
                yield occurrence
            year -= 1

    def enumerate_forward_from(self, date: Date) -> Iterator[Date]:
        require_date(date)
        year = date.year
        if self._may_occur_in_next_year:
            year -= 1
        return self._enumerate_forward(date, max(year, self.start_year))

    def _enumerate_forward(self, date: Date, year: int) -> Iterator[Date]:
        end_year = self.end_year
        while year <= end_year:
            occurrence = self._occurrence(year)
            if occurrence and occurrence >= date:
                yield occurrence
            year += 1


__all__ = ["AnnualRecurrence"]
