"""Tests for InverseSchedule."""

from __future__ import annotations

import itertools

import pytest

from almanac.core.date import Date
from almanac.errors import EmptyArgumentError
from almanac.schedules.day_of_month import AnnualDayOfMonthRecurrence
from almanac.schedules.inverse import InverseSchedule


class TestContains:
    """Tests for contains()."""

    def test_complement(self, make_schedule) -> None:
        """Test that membership is the negation of the base membership."""
        base = make_schedule(Date(2000, 1, 2), Date(2000, 1, 4))
        inverse = InverseSchedule(base)
        assert inverse.base_schedule is base
        date = Date(1999, 12, 25)
        while date < Date(2000, 1, 10):
            assert inverse.contains(date) == (not base.contains(date))
            date = date.next_day()

    def test_empty_date(self, make_schedule) -> None:
        """Test that the empty date is in neither a schedule nor its inverse."""
        assert not InverseSchedule(make_schedule()).contains(Date.empty())


class TestEnumeration:
    """Tests for the enumerations."""

    def test_forward_skips_base_dates(self, make_schedule) -> None:
        """Test that forward enumeration skips exactly the base dates."""
        inverse = InverseSchedule(
            make_schedule(Date(2000, 1, 2), Date(2000, 1, 3), Date(2000, 1, 5))
        )
        forward = inverse.enumerate_forward_from(Date(2000, 1, 1))
        assert list(itertools.islice(forward, 4)) == [
            Date(2000, 1, 1),
            Date(2000, 1, 4),
            Date(2000, 1, 6),
            Date(2000, 1, 7),
        ]

    def test_backward_skips_base_dates(self, make_schedule) -> None:
        """Test that backward enumeration skips exactly the base dates."""
        inverse = InverseSchedule(
            make_schedule(Date(2000, 1, 2), Date(2000, 1, 3), Date(2000, 1, 5))
        )
        backward = inverse.enumerate_backward_from(Date(2000, 1, 5))
        assert list(itertools.islice(backward, 3)) == [
            Date(2000, 1, 4),
            Date(2000, 1, 1),
            Date(1999, 12, 31),
        ]

    def test_forward_runs_to_max_value(self, make_schedule) -> None:
        """Test that forward enumeration ends at the last date."""
        inverse = InverseSchedule(make_schedule(Date(9999, 12, 30)))
        assert list(inverse.enumerate_forward_from(Date(9999, 12, 28))) == [
            Date(9999, 12, 28),
            Date(9999, 12, 29),
            Date(9999, 12, 31),
        ]

    def test_forward_stops_at_base_max_value(self, make_schedule) -> None:
        """Test a base schedule containing the last date."""
        inverse = InverseSchedule(make_schedule(Date.max_value()))
        assert list(inverse.enumerate_forward_from(Date(9999, 12, 30))) == [Date(9999, 12, 30)]
        assert list(inverse.enumerate_forward_from(Date.max_value())) == []

    def test_backward_runs_to_min_value(self, make_schedule) -> None:
        """Test that backward enumeration ends at the first date."""
        inverse = InverseSchedule(make_schedule(Date(1, 1, 2)))
        assert list(inverse.enumerate_backward_from(Date(1, 1, 4))) == [
            Date(1, 1, 4),
            Date(1, 1, 3),
            Date(1, 1, 1),
        ]

    def test_backward_stops_at_base_min_value(self, make_schedule) -> None:
        """Test a base schedule containing the first date."""
        inverse = InverseSchedule(make_schedule(Date.min_value()))
        assert list(inverse.enumerate_backward_from(Date(1, 1, 2))) == [Date(1, 1, 2)]

    def test_matches_contains(self) -> None:
        """Test the enumeration against contains() over a year."""
        base = AnnualDayOfMonthRecurrence(3, 1)
        inverse = InverseSchedule(base)
        expected = []
        date = Date(2024, 1, 1)
        while date.year == 2024:
            if inverse.contains(date):
                expected.append(date)
            date = date.next_day()
        forward = inverse.enumerate_forward_from(Date(2024, 1, 1))
        assert list(itertools.islice(forward, len(expected))) == expected
        assert Date(2024, 3, 1) not in expected
        assert len(expected) == 365

    def test_inverse_of_inverse(self, make_schedule) -> None:
        """Test that double complement restores the base dates."""
        base = make_schedule(Date(2000, 1, 2), Date(2000, 1, 5))
        double = InverseSchedule(InverseSchedule(base))
        assert list(itertools.islice(double.enumerate_forward_from(Date(2000, 1, 1)), 2)) == [
            Date(2000, 1, 2),
            Date(2000, 1, 5),
        ]

    def test_empty_date_raises_eagerly(self, make_schedule) -> None:
        """Test that the empty date is rejected before iteration starts."""
        inverse = InverseSchedule(make_schedule())
        with pytest.raises(EmptyArgumentError):
            inverse.enumerate_forward_from(Date.empty())
        with pytest.raises(EmptyArgumentError):
            inverse.enumerate_backward_from(Date.empty())
