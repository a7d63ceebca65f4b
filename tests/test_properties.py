"""Hypothesis property-based tests for Date arithmetic and schedules.

Tests invariants that must hold across all valid inputs.
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from almanac.core.date import Date
from almanac.errors import OverflowError
from almanac.gregorian import day_number, days_in_month, from_day_number
from almanac.schedules.adjustments import DayOfWeekAdjustments
from almanac.schedules.composite import CompositeSchedule
from almanac.schedules.day_of_month import AnnualDayOfMonthRecurrence
from almanac.schedules.inverse import InverseSchedule
from almanac.schedules.options import AnnualDayOfMonthRecurrenceOptions

day_numbers = st.integers(min_value=0, max_value=3652058)
dates = day_numbers.map(Date.from_day_number)
adjustment_values = st.integers(min_value=-6, max_value=6)

# ============================================================================
# DATE PROPERTIES
# ============================================================================


@pytest.mark.fuzz
class TestDateProperties:
    """Property-based tests for Date."""

    @given(n=day_numbers)
    def test_day_number_round_trip(self, n: int) -> None:
        """from_day_number() and day_number() are inverses."""
        assert day_number(*from_day_number(n)) == n
        assert Date.from_day_number(n).day_number == n

    @given(n=day_numbers)
    def test_day_of_week_follows_day_number(self, n: int) -> None:
        """Day 0 is a Monday and weekdays advance one per day."""
        assert Date.from_day_number(n).day_of_week == (n + 1) % 7

    @given(a=dates, b=dates)
    def test_order_matches_day_number(self, a: Date, b: Date) -> None:
        """Date order agrees with day-number order."""
        compared = Date.compare(a, b)
        difference = a.day_number - b.day_number
        assert (compared > 0) == (difference > 0)
        assert (compared < 0) == (difference < 0)
        assert (a < b) == (difference < 0)

    @given(a=dates, b=dates)
    def test_subtract_matches_day_number(self, a: Date, b: Date) -> None:
        """Subtraction is the day-number difference."""
        assert a - b == a.day_number - b.day_number

    @given(d=dates, n=st.integers(min_value=-4000000, max_value=4000000))
    def test_add_days_inverse(self, d: Date, n: int) -> None:
        """Adding and then subtracting days restores the date."""
        target = d.day_number + n
        if target < 0 or target > 3652058:
            with pytest.raises(OverflowError):
                d.add_days(n)
            return
        result = d.add_days(n)
        assert result.day_number == target
        assert result.add_days(-n) == d
        assert result - d == n

    @given(d=dates, n=st.integers(min_value=-28, max_value=28))
    def test_small_add_days_matches_day_number(self, d: Date, n: int) -> None:
        """Small offsets agree with the day-number path."""
        target = d.day_number + n
        assume(0 <= target <= 3652058)
        assert d.add_days(n) == Date.from_day_number(target)

    @given(d=dates, months=st.integers(min_value=-1200, max_value=1200))
    def test_add_months_clamps(self, d: Date, months: int) -> None:
        """add_months() keeps the day unless the month is shorter."""
        try:
            result = d.add_months(months)
        except OverflowError:
            return
        assert (result.year * 12 + result.month) - (d.year * 12 + d.month) == months
        assert result.day == min(d.day, days_in_month(result.year, result.month))

    @given(d=dates)
    def test_iso_round_trip(self, d: Date) -> None:
        """ISO formatting and parsing are inverses."""
        assert Date.from_iso_format(d.to_iso_format()) == d


# ============================================================================
# SCHEDULE PROPERTIES
# ============================================================================


@st.composite
def day_of_month_recurrences(draw: st.DrawFn) -> AnnualDayOfMonthRecurrence:
    month = draw(st.sampled_from([1, 6, 12]))
    day = draw(st.integers(min_value=1, max_value=28 if month == 6 else 31))
    values = draw(st.lists(adjustment_values, min_size=7, max_size=7))
    start_year = draw(st.integers(min_value=1990, max_value=2010))
    end_year = draw(st.integers(min_value=start_year, max_value=2020))
    options = AnnualDayOfMonthRecurrenceOptions(
        start_year=start_year,
        end_year=end_year,
        day_of_week_adjustments=DayOfWeekAdjustments.from_values(values),
    )
    return AnnualDayOfMonthRecurrence(month, day, options)


schedule_dates = st.integers(
    min_value=Date(1985, 1, 1).day_number, max_value=Date(2025, 12, 31).day_number
).map(Date.from_day_number)


@pytest.mark.fuzz
class TestScheduleProperties:
    """Property-based tests for schedules."""

    @given(recurrence=day_of_month_recurrences(), d=schedule_dates)
    def test_contains_matches_occurrences(
        self, recurrence: AnnualDayOfMonthRecurrence, d: Date
    ) -> None:
        """contains() is true exactly for the occurrence of some year."""
        occurrences = {recurrence.get_occurrence(year) for year in range(1980, 2030)}
        assert recurrence.contains(d) == (d in occurrences)

    @given(recurrence=day_of_month_recurrences(), d=schedule_dates)
    def test_enumerations_are_sorted_members(
        self, recurrence: AnnualDayOfMonthRecurrence, d: Date
    ) -> None:
        """Enumerations produce every member on the correct side, in order."""
        forward = list(recurrence.enumerate_forward_from(d))
        backward = list(recurrence.enumerate_backward_from(d))
        assert forward == sorted(set(forward))
        assert backward == sorted(set(backward), reverse=True)
        assert all(date >= d and recurrence.contains(date) for date in forward)
        assert all(date <= d and recurrence.contains(date) for date in backward)
        assert len(forward) + len(backward) - (d in recurrence) == (
            recurrence.end_year - recurrence.start_year + 1
            - sum(
                recurrence.get_occurrence(year).is_empty
                for year in range(recurrence.start_year, recurrence.end_year + 1)
            )
        )

    @given(
        first=day_of_month_recurrences(),
        second=day_of_month_recurrences(),
        d=schedule_dates,
    )
    def test_composite_is_sorted_union(
        self,
        first: AnnualDayOfMonthRecurrence,
        second: AnnualDayOfMonthRecurrence,
        d: Date,
    ) -> None:
        """The composite enumeration is the sorted union of its bases."""
        composite = CompositeSchedule(first, second)
        expected = sorted(
            set(first.enumerate_forward_from(d)) | set(second.enumerate_forward_from(d))
        )
        assert list(composite.enumerate_forward_from(d)) == expected
        expected_backward = sorted(
            set(first.enumerate_backward_from(d)) | set(second.enumerate_backward_from(d)),
            reverse=True,
        )
        assert list(composite.enumerate_backward_from(d)) == expected_backward

    @given(recurrence=day_of_month_recurrences(), d=schedule_dates)
    def test_inverse_is_complement(
        self, recurrence: AnnualDayOfMonthRecurrence, d: Date
    ) -> None:
        """The inverse contains exactly the dates its base does not."""
        assert InverseSchedule(recurrence).contains(d) != recurrence.contains(d)
