"""Union of schedules."""

from __future__ import annotations

import logging
from typing import Iterator

from almanac._internal.heap import Heap
from almanac.core.date import Date
from almanac.schedules.schedule import Schedule, require_date

logger = logging.getLogger(__name__)

_Cursor = Iterator[Date]


class CompositeSchedule(Schedule):
    """A schedule containing every date of any of its base schedules.

    Enumerations merge the base enumerations in order and produce each
    date once, even when several base schedules contain it.

    Examples:
        >>> import itertools
        >>> from almanac.schedules import AnnualDayOfMonthRecurrence
        >>> holidays = CompositeSchedule(
        ...     AnnualDayOfMonthRecurrence(1, 1),
        ...     AnnualDayOfMonthRecurrence(12, 25),
        ... )
        >>> list(itertools.islice(holidays.enumerate_forward_from(Date(2024, 6, 1)), 3))
        [Date(2024, 12, 25), Date(2025, 1, 1), Date(2025, 12, 25)]
    """

    def __init__(self, *base_schedules: Schedule | None) -> None:
        """Create a composite of the given schedules.

        Args:
            *base_schedules: The schedules to combine. None entries are
                ignored.
        """
        self._base_schedules: tuple[Schedule, ...] = tuple(
            schedule for schedule in base_schedules if schedule is not None
        )

    @property
    def base_schedules(self) -> tuple[Schedule, ...]:
        """Return the combined schedules, in construction order."""
        return self._base_schedules

    def contains(self, date: Date) -> bool:
        return any(schedule.contains(date) for schedule in self._base_schedules)

    def enumerate_backward_from(self, date: Date) -> Iterator[Date]:
        require_date(date)
        cursors = [schedule.enumerate_backward_from(date) for schedule in self._base_schedules]
        return self._merge(cursors, reverse=True)

    def enumerate_forward_from(self, date: Date) -> Iterator[Date]:
        require_date(date)
        cursors = [schedule.enumerate_forward_from(date) for schedule in self._base_schedules]
        return self._merge(cursors, reverse=False)

    @staticmethod
    def _merge(cursors: list[_Cursor], reverse: bool) -> Iterator[Date]:
        """Merge sorted cursors, keeping the extremal current date at the root.

        Args:
            cursors: One enumeration per base schedule.
            reverse: True to merge decreasing sequences.
        """
        heap: Heap[tuple[Date, _Cursor]] = Heap(reverse=reverse)
        try:
            for cursor in cursors:
                first = next(cursor, None)
                if first is None:
                    _close(cursor)
                else:
                    heap.append((first, cursor), first.day_number)
            heap.heapify()

            logger.debug(
                "Merging %d of %d cursors (%s)",
                len(heap),
                len(cursors),
                "backward" if reverse else "forward",
            )

            previous = Date.empty()
            while heap:
                current, cursor = heap.peek()
                if current != previous:
                    yield current
                    previous = current

                following = next(cursor, None)
                if following is None:
                    heap.remove_root()
                    _close(cursor)
                else:
                    heap.replace_root((following, cursor), following.day_number)
        finally:
            for cursor in cursors:
                _close(cursor)

    def __repr__(self) -> str:
        return f"CompositeSchedule({', '.join(map(repr, self._base_schedules))})"


def _close(cursor: _Cursor) -> None:
    close = getattr(cursor, "close", None)
    if close is not None:
        close()


__all__ = ["CompositeSchedule"]
