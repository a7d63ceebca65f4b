"""Day-of-week adjustment table.

This module provides DayOfWeekAdjustments, the table that moves an
annual day-of-month occurrence when it falls on particular weekdays,
e.g. "observe on Friday when the date falls on a Saturday".
"""

from __future__ import annotations

from typing import Iterator

from almanac._internal.constants import DAYS_PER_WEEK
from almanac._internal.validation import validate_range
from almanac.units.weekday import DayOfWeek

_MAX_ADJUSTMENT = DAYS_PER_WEEK - 1


class DayOfWeekAdjustments:
    """Number of days to add to an occurrence, indexed by its weekday.

    Each of the seven weekdays maps to an offset between -6 and 6;
    unset weekdays map to 0. The table can be filled by weekday name
    at construction and changed afterwards through indexing.

    A recurrence takes a snapshot of the table when it is constructed,
    so later changes to the table do not affect it.

    Examples:
        >>> adjustments = DayOfWeekAdjustments(saturday=-1, sunday=1)
        >>> adjustments[DayOfWeek.SATURDAY]
        -1
        >>> adjustments[DayOfWeek.MONDAY]
        0
        >>> adjustments[DayOfWeek.MONDAY] = 7
        Traceback (most recent call last):
        ...
        OutOfRangeError: value must be between -6 and 6, got 7
    """

    __slots__ = ("_values",)

    def __init__(self, **by_name: int) -> None:
        """Create an adjustment table.

        Args:
            **by_name: Offsets keyed by lower-case weekday name
                (``sunday`` through ``saturday``).

        Raises:
            TypeError: If a keyword is not a weekday name.
            OutOfRangeError: If an offset is outside -6 to 6.
        """
        self._values: list[int] = [0] * DAYS_PER_WEEK
        for name, value in by_name.items():
            try:
                day_of_week = DayOfWeek[name.upper()]
            except KeyError:
                raise TypeError(f"unexpected weekday name: {name!r}") from None
            self[day_of_week] = value

    @classmethod
    def from_values(cls, values: tuple[int, ...] | list[int]) -> DayOfWeekAdjustments:
        """Create a table from seven offsets, Sunday first.

        Raises:
            ValueError: If values does not hold exactly seven offsets.
            OutOfRangeError: If an offset is outside -6 to 6.
        """
        if len(values) != DAYS_PER_WEEK:
            raise ValueError(
                f"expected {DAYS_PER_WEEK} adjustments, got {len(values)}"
            )
        adjustments = cls()
        for day_of_week, value in enumerate(values):
            adjustments[day_of_week] = value
        return adjustments

    @validate_range(day_of_week=(DayOfWeek.SUNDAY, DayOfWeek.SATURDAY))
    def __getitem__(self, day_of_week: DayOfWeek | int) -> int:
        return self._values[day_of_week]

    @validate_range(
        day_of_week=(DayOfWeek.SUNDAY, DayOfWeek.SATURDAY),
        value=(-_MAX_ADJUSTMENT, _MAX_ADJUSTMENT),
    )
    def __setitem__(self, day_of_week: DayOfWeek | int, value: int) -> None:
        self._values[day_of_week] = value

    def __len__(self) -> int:
        return DAYS_PER_WEEK

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def items(self) -> Iterator[tuple[DayOfWeek, int]]:
        """Iterate (weekday, offset) pairs from Sunday to Saturday."""
        for day_of_week, value in enumerate(self._values):
            yield DayOfWeek(day_of_week), value

    def to_tuple(self) -> tuple[int, ...]:
        """Return the seven offsets, Sunday first."""
        return tuple(self._values)

    def copy(self) -> DayOfWeekAdjustments:
        """Return an independent copy of this table."""
        return DayOfWeekAdjustments.from_values(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DayOfWeekAdjustments):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        nonzero = ", ".join(
            f"{day_of_week.name.lower()}={value}"
            for day_of_week, value in self.items()
            if value
        )
        return f"DayOfWeekAdjustments({nonzero})"


__all__ = ["DayOfWeekAdjustments"]
