"""Pytest configuration and fixtures for Almanac tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add the parent directory to sys.path so almanac can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from typing import Callable, Iterator

import pytest

from almanac.core.date import Date
from almanac.schedules.schedule import Schedule, require_date


class ListSchedule(Schedule):
    """A finite schedule over an explicit set of dates.

    Records how many enumerations were opened and how many were closed,
    so tests can check that combinators release their cursors.
    """

    def __init__(self, *dates: Date) -> None:
        self.dates = sorted(set(dates))
        self.opened = 0
        self.closed = 0

    def contains(self, date: Date) -> bool:
        return date in self.dates

    def enumerate_backward_from(self, date: Date) -> Iterator[Date]:
        require_date(date)
        return self._track([d for d in reversed(self.dates) if d <= date])

    def enumerate_forward_from(self, date: Date) -> Iterator[Date]:
        require_date(date)
        return self._track([d for d in self.dates if d >= date])

    def _track(self, dates: list[Date]) -> Iterator[Date]:
        self.opened += 1
        try:
            yield from dates
        finally:
            self.closed += 1


@pytest.fixture
def make_schedule() -> Callable[..., ListSchedule]:
    """Return a factory for finite schedules."""
    return ListSchedule
