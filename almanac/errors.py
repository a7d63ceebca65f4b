"""Almanac exception hierarchy.

All Almanac-specific exceptions inherit from AlmanacError.
"""

from __future__ import annotations


class AlmanacError(Exception):
    """Base exception for all Almanac errors."""

    pass


class OutOfRangeError(AlmanacError):
    """A numeric argument falls outside its documented domain.

    Raised eagerly at the API boundary, before any part of the
    operation has been applied.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Day number outside 0-3652058
        - Day-of-week adjustment outside -6 to 6

    Attributes:
        param_name: Name of the offending parameter, if known.
        value: The rejected value, if known.
    """

    def __init__(
        self,
        message: str,
        param_name: str | None = None,
        value: object = None,
    ) -> None:
        super().__init__(message)
        self.param_name = param_name
        self.value = value


class InvalidStateError(AlmanacError):
    """Operation is not supported by the empty date.

    Raised when arithmetic or a derived property (day number,
    day of week) is requested from Date.empty().
    """

    pass


class EmptyArgumentError(AlmanacError):
    """The empty date was passed where a real date is required.

    Examples:
        - Starting point of a schedule enumeration
        - Either operand of Date.subtract()

    Attributes:
        param_name: Name of the offending parameter, if known.
    """

    def __init__(self, message: str, param_name: str | None = None) -> None:
        super().__init__(message)
        self.param_name = param_name


class OverflowError(AlmanacError):
    """Arithmetic result falls outside the representable date range.

    Raised when a date calculation produces a result before
    0001-01-01 or after 9999-12-31.

    Examples:
        - Adding a day to 9999-12-31
        - Subtracting a month from 0001-01-15
    """

    pass


class ParseError(AlmanacError):
    """Failed to parse a string representation of a date.

    Examples:
        - Separator other than '-'
        - Year with more or fewer than four digits
    """

    pass


__all__ = [
    "AlmanacError",
    "OutOfRangeError",
    "InvalidStateError",
    "EmptyArgumentError",
    "OverflowError",
    "ParseError",
]
