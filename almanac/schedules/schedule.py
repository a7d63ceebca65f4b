"""Schedule base class.

A schedule is a set of dates that can be tested for membership and
walked in either direction from any starting date.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from almanac.core.date import Date
from almanac.errors import EmptyArgumentError


class Schedule(ABC):
    """Abstract set of dates.

    Subclasses implement contains() and the two enumeration methods.
    Enumerations are lazy and each call returns a fresh, independent
    iterator. The empty date is never a member of any schedule, and
    passing it as the starting point of an enumeration raises
    EmptyArgumentError when the enumeration is requested.

    Examples:
        >>> from almanac.schedules import AnnualDayOfMonthRecurrence
        >>> rule = AnnualDayOfMonthRecurrence(7, 4)
        >>> Date(2024, 7, 4) in rule
        True
        >>> next(rule.enumerate_forward_from(Date(2024, 7, 5)))
        Date(2025, 7, 4)
    """

    __slots__ = ()

    @abstractmethod
    def contains(self, date: Date) -> bool:
        """Return True if ``date`` is a member of this schedule.

        Returns False for the empty date.
        """

    @abstractmethod
    def enumerate_backward_from(self, date: Date) -> Iterator[Date]:
        """Iterate members on or before ``date`` in decreasing order.

        Args:
            date: The latest date that may be produced.

        Returns:
            A finite iterator of strictly decreasing dates.

        Raises:
            EmptyArgumentError: If date is the empty date.
        """

    @abstractmethod
    def enumerate_forward_from(self, date: Date) -> Iterator[Date]:
        """Iterate members on or after ``date`` in increasing order.

        Args:
            date: The earliest date that may be produced.

        Returns:
            A finite iterator of strictly increasing dates.

        Raises:
            EmptyArgumentError: If date is the empty date.
        """

    def __contains__(self, date: object) -> bool:
        if not isinstance(date, Date):
            return False
        return self.contains(date)


def require_date(date: Date, param_name: str = "date") -> None:
    """Raise EmptyArgumentError if ``date`` is the empty date."""
    if date.is_empty:
        raise EmptyArgumentError(
            f"{param_name} must not be the empty date", param_name
        )


__all__ = ["Schedule", "require_date"]
