"""Tests for CompositeSchedule."""

from __future__ import annotations

import itertools
import logging

import pytest

from almanac.core.date import Date
from almanac.errors import EmptyArgumentError
from almanac.schedules.composite import CompositeSchedule
from almanac.schedules.day_of_month import AnnualDayOfMonthRecurrence
from almanac.schedules.day_of_week_of_month import AnnualDayOfWeekOfMonthRecurrence
from almanac.units.weekday import DayOfWeek

D0 = Date(2000, 1, 1)
D1 = Date(2000, 1, 2)
D2 = Date(2000, 1, 3)
D3 = Date(2000, 1, 4)
D4 = Date(2000, 1, 5)


class TestConstruction:
    """Tests for construction."""

    def test_none_entries_are_dropped(self, make_schedule) -> None:
        """Test that None base schedules are ignored."""
        first = make_schedule(D0)
        second = make_schedule(D1)
        composite = CompositeSchedule(first, None, second, None)
        assert composite.base_schedules == (first, second)

    def test_no_base_schedules(self) -> None:
        """Test that an empty composite contains nothing."""
        composite = CompositeSchedule()
        assert not composite.contains(D0)
        assert list(composite.enumerate_forward_from(D0)) == []
        assert list(composite.enumerate_backward_from(D0)) == []


class TestContains:
    """Tests for contains()."""

    def test_union(self, make_schedule) -> None:
        """Test that a date in any base schedule is contained."""
        composite = CompositeSchedule(make_schedule(D1), make_schedule(D2, D4))
        assert composite.contains(D1)
        assert composite.contains(D4)
        assert not composite.contains(D0)
        assert not composite.contains(Date.empty())


class TestEnumeration:
    """Tests for the merged enumerations."""

    def _composite(self, make_schedule) -> CompositeSchedule:
        return CompositeSchedule(
            make_schedule(D1),
            make_schedule(),
            make_schedule(D2, D4),
            make_schedule(D0, D2, D3),
        )

    def test_forward_merges_in_order(self, make_schedule) -> None:
        """Test that forward enumeration yields each date once, in order."""
        composite = self._composite(make_schedule)
        assert list(composite.enumerate_forward_from(D0)) == [D0, D1, D2, D3, D4]
        assert list(composite.enumerate_forward_from(D2)) == [D2, D3, D4]

    def test_backward_merges_in_order(self, make_schedule) -> None:
        """Test that backward enumeration yields each date once, in order."""
        composite = self._composite(make_schedule)
        assert list(composite.enumerate_backward_from(D4)) == [D4, D3, D2, D1, D0]
        assert list(composite.enumerate_backward_from(D1)) == [D1, D0]

    def test_shared_date_yielded_once(self, make_schedule) -> None:
        """Test that a date in two base schedules appears once."""
        composite = CompositeSchedule(
            make_schedule(Date(2000, 6, 15)),
            make_schedule(Date(2000, 6, 15), Date(2000, 6, 20)),
        )
        assert list(composite.enumerate_forward_from(Date(2000, 6, 1))) == [
            Date(2000, 6, 15),
            Date(2000, 6, 20),
        ]

    def test_recurrences(self) -> None:
        """Test merging infinite-looking recurrences."""
        composite = CompositeSchedule(
            AnnualDayOfMonthRecurrence(1, 1),
            AnnualDayOfWeekOfMonthRecurrence(5, DayOfWeek.MONDAY, -1),
            AnnualDayOfMonthRecurrence(12, 25),
        )
        forward = composite.enumerate_forward_from(Date(2024, 1, 2))
        assert list(itertools.islice(forward, 4)) == [
            Date(2024, 5, 27),
            Date(2024, 12, 25),
            Date(2025, 1, 1),
            Date(2025, 5, 26),
        ]
        backward = composite.enumerate_backward_from(Date(2024, 5, 27))
        assert list(itertools.islice(backward, 3)) == [
            Date(2024, 5, 27),
            Date(2024, 1, 1),
            Date(2023, 12, 25),
        ]

    def test_cursors_closed_when_exhausted(self, make_schedule) -> None:
        """Test that every base enumeration is closed after a full run."""
        bases = [make_schedule(D0, D2), make_schedule(D1), make_schedule()]
        list(CompositeSchedule(*bases).enumerate_forward_from(D0))
        for base in bases:
            assert base.opened == base.closed == 1

    def test_cursors_closed_on_early_stop(self, make_schedule) -> None:
        """Test that abandoning an enumeration closes the base enumerations."""
        bases = [make_schedule(D0, D2, D4), make_schedule(D1, D3)]
        enumeration = CompositeSchedule(*bases).enumerate_forward_from(D0)
        assert next(enumeration) == D0
        enumeration.close()
        for base in bases:
            assert base.closed == 1

    def test_empty_date_raises_eagerly(self, make_schedule) -> None:
        """Test that the empty date is rejected before iteration starts."""
        composite = CompositeSchedule(make_schedule(D0))
        with pytest.raises(EmptyArgumentError):
            composite.enumerate_forward_from(Date.empty())
        with pytest.raises(EmptyArgumentError):
            composite.enumerate_backward_from(Date.empty())

    def test_logs_merge(self, make_schedule, caplog: pytest.LogCaptureFixture) -> None:
        """Test that the merge start-up is logged at debug level."""
        composite = CompositeSchedule(make_schedule(D0), make_schedule())
        with caplog.at_level(logging.DEBUG, logger="almanac.schedules.composite"):
            list(composite.enumerate_forward_from(D0))
        assert "Merging 1 of 2 cursors (forward)" in caplog.text
