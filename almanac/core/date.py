"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
between 0001-01-01 and 9999-12-31 in the proleptic Gregorian calendar,
plus a distinguished empty date.
"""

from __future__ import annotations

import datetime as _datetime
import re
from typing import Iterator

from almanac._internal.calendar import (
    day_number_to_ymd,
    day_of_week,
    day_of_year,
    days_before_march_month,
    days_before_march_year,
    days_in_month,
    is_leap_year,
    ymd_to_day_number,
)
from almanac._internal.constants import (
    DECEMBER,
    FEBRUARY,
    FIELD_MASK,
    JANUARY,
    MAX_DAY_NUMBER,
    MAX_DAYS_PER_MONTH,
    MAX_YEAR,
    MIN_DAY_NUMBER,
    MIN_DAYS_PER_MONTH,
    MIN_YEAR,
    MONTH_SHIFT,
    MONTHS_PER_YEAR,
    YEAR_SHIFT,
)
from almanac._internal.validation import (
    validate_day,
    validate_day_number,
    validate_month,
    validate_year,
)
from almanac.errors import (
    EmptyArgumentError,
    InvalidStateError,
    OutOfRangeError,
    OverflowError,
    ParseError,
)
from almanac.units.weekday import DayOfWeek

_MONTH_UNIT = 1 << MONTH_SHIFT
_YEAR_UNIT = 1 << YEAR_SHIFT

_EMPTY_MESSAGE = "operation is not supported by the empty date"
_OVERFLOW_MESSAGE = "the resulting date is outside 0001-01-01 through 9999-12-31"

_ISO_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def _pack(year: int, month: int, day: int) -> int:
    return year << YEAR_SHIFT | month << MONTH_SHIFT | day


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a calendar day between January 1, 0001, and
    December 31, 9999. The year, month and day are packed into a single
    integer (year in the high 16 bits, then month, then day), so field
    access is a shift and a mask, and comparing two packed values
    compares the dates chronologically.

    The packed value 0 is reserved for the empty date, Date.empty(),
    which stands for the absence of a date. Its year, month and day are
    0, it is falsy, it equals only itself and it sorts before every real
    date. Arithmetic and derived properties raise InvalidStateError on it.

    Dates are immutable; every operation returns a new Date.

    Attributes:
        year: The year (1-9999), or 0 for the empty date.
        month: The month (1-12), or 0 for the empty date.
        day: The day of the month (1-31), or 0 for the empty date.

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(2024, 2, 29)  # Valid leap year date
        Date(2024, 2, 29)

        >>> Date(2024, 1, 31) + 1
        Date(2024, 2, 1)
    """

    __slots__ = ("_value",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            OutOfRangeError: If any component is out of range.

        Examples:
            >>> Date(2024, 1, 15)
            Date(2024, 1, 15)

            >>> Date(2023, 2, 29)  # Invalid: 2023 is a common year
            Traceback (most recent call last):
            ...
            OutOfRangeError: day must be between 1 and 28 for 2023-02, got 29
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._value: int = _pack(year, month, day)

    @classmethod
    def _from_packed(cls, value: int) -> Date:
        """Wrap an already-valid packed value without validation."""
        date = object.__new__(cls)
        date._value = value
        return date

    @classmethod
    def empty(cls) -> Date:
        """Return the empty date.

        Examples:
            >>> Date.empty().year
            0
            >>> bool(Date.empty())
            False
        """
        return _EMPTY

    @classmethod
    def min_value(cls) -> Date:
        """Return the earliest date, 0001-01-01."""
        return _MIN_VALUE

    @classmethod
    def max_value(cls) -> Date:
        """Return the latest date, 9999-12-31."""
        return _MAX_VALUE

    @classmethod
    def today(cls) -> Date:
        """Return today's date in the local timezone.

        Examples:
            >>> Date.today().year >= 2024
            True
        """
        return cls.from_pydate(_datetime.date.today())

    @classmethod
    def from_day_number(cls, day_number: int) -> Date:
        """Create a Date from a day number.

        The day number is the number of days since 0001-01-01,
        which has day number 0.

        Args:
            day_number: An integer between 0 and 3652058.

        Returns:
            The Date whose day_number equals the argument.

        Raises:
            OutOfRangeError: If day_number is out of range.

        Examples:
            >>> Date.from_day_number(0)
            Date(1, 1, 1)
            >>> Date.from_day_number(738899)
            Date(2024, 1, 15)
        """
        validate_day_number(day_number)
        return cls._from_packed(_pack(*day_number_to_ymd(day_number)))

    @classmethod
    def from_pydate(cls, value: _datetime.date) -> Date:
        """Convert a ``datetime.date`` (or the date part of a datetime).

        Examples:
            >>> import datetime
            >>> Date.from_pydate(datetime.date(2024, 1, 15))
            Date(2024, 1, 15)
        """
        return cls._from_packed(_pack(value.year, value.month, value.day))

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date from ISO 8601 format (YYYY-MM-DD).

        Args:
            s: The ISO 8601 date string.

        Returns:
            The parsed Date.

        Raises:
            ParseError: If the string is not in YYYY-MM-DD format or
                does not name a valid date.

        Examples:
            >>> Date.from_iso_format("2024-01-15")
            Date(2024, 1, 15)
            >>> Date.from_iso_format("2023-02-30")
            Traceback (most recent call last):
            ...
            ParseError: Invalid date in '2023-02-30': day must be between 1 and 28 for 2023-02, got 30
        """
        match = _ISO_PATTERN.fullmatch(s)
        if not match:
            raise ParseError(
                f"Invalid ISO 8601 date format: {s!r}. Expected YYYY-MM-DD"
            )
        try:
            return cls(int(match.group(1)), int(match.group(2)), int(match.group(3)))
        except OutOfRangeError as exc:
            raise ParseError(f"Invalid date in {s!r}: {exc}") from exc

    @property
    def year(self) -> int:
        """Return the year component, or 0 for the empty date."""
        return self._value >> YEAR_SHIFT

    @property
    def month(self) -> int:
        """Return the month component, or 0 for the empty date."""
        return self._value >> MONTH_SHIFT & FIELD_MASK

    @property
    def day(self) -> int:
        """Return the day component, or 0 for the empty date."""
        return self._value & FIELD_MASK

    @property
    def is_empty(self) -> bool:
        """Return True if this is the empty date."""
        return self._value == 0

    def _require_value(self) -> int:
        value = self._value
        if value == 0:
            raise InvalidStateError(_EMPTY_MESSAGE)
        return value

    @property
    def day_number(self) -> int:
        """Return the number of days since 0001-01-01.

        Returns:
            An integer between 0 and 3652058.

        Raises:
            InvalidStateError: If this is the empty date.

        Examples:
            >>> Date(1, 1, 1).day_number
            0
            >>> Date(2000, 1, 1).day_number
            730119
        """
        value = self._require_value()
        return ymd_to_day_number(
            value >> YEAR_SHIFT, value >> MONTH_SHIFT & FIELD_MASK, value & FIELD_MASK
        )

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the day of the week.

        Raises:
            InvalidStateError: If this is the empty date.

        Examples:
            >>> Date(2024, 5, 27).day_of_week
            <DayOfWeek.MONDAY: 1>
        """
        value = self._require_value()
        return DayOfWeek(
            day_of_week(
                value >> YEAR_SHIFT, value >> MONTH_SHIFT & FIELD_MASK, value & FIELD_MASK
            )
        )

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Raises:
            InvalidStateError: If this is the empty date.

        Examples:
            >>> Date(2024, 12, 31).day_of_year  # Leap year
            366
        """
        value = self._require_value()
        return day_of_year(
            value >> YEAR_SHIFT, value >> MONTH_SHIFT & FIELD_MASK, value & FIELD_MASK
        )

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Raises:
            InvalidStateError: If this is the empty date.
        """
        return is_leap_year(self._require_value() >> YEAR_SHIFT)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Any unspecified components retain their current values.

        Raises:
            InvalidStateError: If this is the empty date.
            OutOfRangeError: If the resulting date is invalid.

        Examples:
            >>> Date(2024, 1, 15).replace(month=6)
            Date(2024, 6, 15)
        """
        self._require_value()
        return Date(
            year if year is not None else self.year,
            month if month is not None else self.month,
            day if day is not None else self.day,
        )

    def add_years(self, years: int) -> Date:
        """Return a new Date offset by the given number of years.

        The month is unchanged. February 29 becomes February 28 when
        the resulting year is a common year.

        Args:
            years: Number of years to add (can be negative).

        Raises:
            InvalidStateError: If this is the empty date.
            OverflowError: If the resulting year is outside 1-9999.

        Examples:
            >>> Date(2024, 1, 15).add_years(1)
            Date(2025, 1, 15)

            >>> Date(2024, 2, 29).add_years(1)  # 2025 is not a leap year
            Date(2025, 2, 28)
        """
        value = self._require_value()
        year = (value >> YEAR_SHIFT) + years
        if year < MIN_YEAR or year > MAX_YEAR:
            raise OverflowError(_OVERFLOW_MESSAGE)

        value += years << YEAR_SHIFT
        if value & 0xFFFF == (FEBRUARY << MONTH_SHIFT | 29) and not is_leap_year(year):
            value -= 1
        return Date._from_packed(value)

    def add_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the day is past the end of the resulting month, it is
        clamped to the last day of that month.

        Args:
            months: Number of months to add (can be negative).

        Raises:
            InvalidStateError: If this is the empty date.
            OverflowError: If the result is outside the supported range.

        Examples:
            >>> Date(2024, 1, 31).add_months(1)  # Clamps to Feb 29
            Date(2024, 2, 29)

            >>> Date(2024, 3, 15).add_months(-3)
            Date(2023, 12, 15)
        """
        value = self._require_value()
        offset_years, month0 = divmod(
            (value >> MONTH_SHIFT & FIELD_MASK) - 1 + months, MONTHS_PER_YEAR
        )
        year = (value >> YEAR_SHIFT) + offset_years
        if year < MIN_YEAR or year > MAX_YEAR:
            raise OverflowError(_OVERFLOW_MESSAGE)

        month = month0 + 1
        day = value & FIELD_MASK
        if day > MIN_DAYS_PER_MONTH:
            day = min(day, days_in_month(year, month))
        return Date._from_packed(_pack(year, month, day))

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Offsets of at most 28 days either way are applied to the packed
        fields directly, carrying into the month and year; larger
        offsets go through the day number.

        Args:
            days: Number of days to add (can be negative).

        Raises:
            InvalidStateError: If this is the empty date.
            OverflowError: If the result is outside the supported range.

        Examples:
            >>> Date(2024, 1, 15).add_days(10)
            Date(2024, 1, 25)

            >>> Date(2024, 1, 15).add_days(-20)
            Date(2023, 12, 26)
        """
        if -MIN_DAYS_PER_MONTH <= days <= MIN_DAYS_PER_MONTH:
            return self._add_small_days(days)
        return self._add_large_days(days)

    def _add_small_days(self, days: int) -> Date:
        value = self._require_value()
        day = (value & FIELD_MASK) + days

        if day > MIN_DAYS_PER_MONTH:
            year = value >> YEAR_SHIFT
            month = value >> MONTH_SHIFT & FIELD_MASK
            length = days_in_month(year, month)
            if day > length:
                if month < DECEMBER:
                    value += _MONTH_UNIT - length
                elif year < MAX_YEAR:
                    # Next year, December back to January
                    value += _YEAR_UNIT - (DECEMBER - JANUARY) * _MONTH_UNIT - length
                else:
                    raise OverflowError(_OVERFLOW_MESSAGE)
        elif day < 1:
            year = value >> YEAR_SHIFT
            month = value >> MONTH_SHIFT & FIELD_MASK
            if month > JANUARY:
                value += days_in_month(year, month - 1) - _MONTH_UNIT
            elif year > MIN_YEAR:
                # Previous year, January forward to December
                value += MAX_DAYS_PER_MONTH + (DECEMBER - JANUARY) * _MONTH_UNIT - _YEAR_UNIT
            else:
                raise OverflowError(_OVERFLOW_MESSAGE)

        return Date._from_packed(value + days)

    def _add_large_days(self, days: int) -> Date:
        day_number = self.day_number + days
        if day_number < MIN_DAY_NUMBER or day_number > MAX_DAY_NUMBER:
            raise OverflowError(_OVERFLOW_MESSAGE)
        return Date._from_packed(_pack(*day_number_to_ymd(day_number)))

    def next_day(self) -> Date:
        """Return the following day.

        Raises:
            InvalidStateError: If this is the empty date.
            OverflowError: If this is 9999-12-31.
        """
        return self._add_small_days(1)

    def previous_day(self) -> Date:
        """Return the preceding day.

        Raises:
            InvalidStateError: If this is the empty date.
            OverflowError: If this is 0001-01-01.
        """
        return self._add_small_days(-1)

    @staticmethod
    def subtract(date1: Date, date2: Date) -> int:
        """Return the number of days from ``date2`` to ``date1``.

        The result is negative when date1 is earlier than date2.
        Dates in the same month are subtracted field-wise; otherwise
        the month and year differences are converted with the
        March-based calendar offsets.

        Args:
            date1: The date from which to subtract.
            date2: The date to subtract.

        Returns:
            The signed number of days between the dates.

        Raises:
            EmptyArgumentError: If either date is the empty date.

        Examples:
            >>> Date.subtract(Date(2024, 3, 1), Date(2024, 2, 1))
            29
            >>> Date(2023, 12, 31) - Date(2024, 1, 1)
            -1
        """
        value1 = date1._value
        if value1 == 0:
            raise EmptyArgumentError(_EMPTY_MESSAGE, "date1")
        value2 = date2._value
        if value2 == 0:
            raise EmptyArgumentError(_EMPTY_MESSAGE, "date2")

        result = value1 - value2
        if -MAX_DAYS_PER_MONTH <= result <= MAX_DAYS_PER_MONTH:
            # Same year and month
            return result

        result = (value1 & FIELD_MASK) - (value2 & FIELD_MASK)
        year1, month1 = value1 >> YEAR_SHIFT, value1 >> MONTH_SHIFT & FIELD_MASK
        year2, month2 = value2 >> YEAR_SHIFT, value2 >> MONTH_SHIFT & FIELD_MASK

        # Move January and February to the end of the previous year
        if month1 <= FEBRUARY:
            year1 -= 1
            month1 += MONTHS_PER_YEAR
        if month2 <= FEBRUARY:
            year2 -= 1
            month2 += MONTHS_PER_YEAR

        if month1 != month2:
            result += days_before_march_month(month1) - days_before_march_month(month2)
        if year1 != year2:
            result += days_before_march_year(year1) - days_before_march_year(year2)
        return result

    @staticmethod
    def compare(date1: Date, date2: Date) -> int:
        """Compare two dates.

        Returns:
            A negative number if date1 is earlier, zero if equal,
            a positive number if date1 is later. The empty date is
            earlier than every other date.

        Examples:
            >>> Date.compare(Date(2024, 1, 1), Date(2024, 1, 2)) < 0
            True
        """
        return date1._value - date2._value

    def to_pydate(self) -> _datetime.date:
        """Return the equivalent ``datetime.date``.

        Raises:
            InvalidStateError: If this is the empty date.
        """
        value = self._require_value()
        return _datetime.date(
            value >> YEAR_SHIFT, value >> MONTH_SHIFT & FIELD_MASK, value & FIELD_MASK
        )

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        The empty date formats as the empty string.

        Examples:
            >>> Date(2024, 1, 15).to_iso_format()
            '2024-01-15'
            >>> Date(1, 1, 1).to_iso_format()
            '0001-01-01'
        """
        if self._value == 0:
            return ""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __add__(self, other: object) -> Date:
        """Add a number of days to this date."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add_days(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Date | int:
        """Subtract a number of days or another Date.

        Subtracting an int returns a Date; subtracting a Date returns
        the signed number of days between them.

        Examples:
            >>> Date(2024, 1, 25) - 10
            Date(2024, 1, 15)
            >>> Date(2024, 1, 25) - Date(2024, 1, 15)
            10
        """
        if isinstance(other, Date):
            return Date.subtract(self, other)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add_days(-other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._value != other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        """Only the empty date is falsy."""
        return self._value != 0

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2024, 1, 15)', or 'Date.empty()'.
        """
        if self._value == 0:
            return "Date.empty()"
        return f"Date({self.year}, {self.month}, {self.day})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()

    def __iter__(self) -> Iterator[int]:
        """Iterate the year, month and day, so a date unpacks as a tuple.

        Examples:
            >>> year, month, day = Date(2024, 1, 15)
            >>> (year, month, day)
            (2024, 1, 15)
        """
        value = self._value
        yield value >> YEAR_SHIFT
        yield value >> MONTH_SHIFT & FIELD_MASK
        yield value & FIELD_MASK

    def astuple(self) -> tuple[int, int, int]:
        """Return (year, month, day); (0, 0, 0) for the empty date."""
        return (self.year, self.month, self.day)

    def __reduce__(self) -> tuple:
        return (Date._from_packed, (self._value,))


_EMPTY = Date._from_packed(0)
_MIN_VALUE = Date._from_packed(_pack(MIN_YEAR, JANUARY, 1))
_MAX_VALUE = Date._from_packed(_pack(MAX_YEAR, DECEMBER, 31))


__all__ = ["Date"]
