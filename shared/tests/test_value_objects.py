"""Tests for date range value objects and interval predicates."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from shared.domain.value_objects import DateRange, days_until_max, is_date_occupied, is_overlapping

BOOKED_START = date(2021, 6, 7)
BOOKED_END = date(2021, 6, 20)


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (date(2021, 6, 1), date(2021, 6, 3), False),
        (date(2021, 6, 23), date(2021, 6, 30), False),
        # Starting the day the booked interval ends is free
        (date(2021, 6, 20), date(2021, 6, 23), False),
        (date(2021, 6, 5), date(2021, 6, 12), True),
        (date(2021, 6, 10), date(2021, 6, 15), True),
        (date(2021, 6, 18), date(2021, 6, 22), True),
        (date(2021, 6, 10), date(2021, 6, 20), True),
        (date(2021, 6, 7), date(2021, 6, 12), True),
        # Ending the day the booked interval starts still counts
        (date(2021, 6, 5), date(2021, 6, 7), True),
    ],
)
def test_is_overlapping(start, end, expected):
    assert is_overlapping(start, end, BOOKED_START, BOOKED_END) is expected


def test_is_overlapping_ignores_time_of_day():
    assert not is_overlapping(
        datetime(2021, 6, 20, 23, 59),
        datetime(2021, 6, 23, 8, 0),
        datetime(2021, 6, 7, 15, 0),
        datetime(2021, 6, 20, 1, 0),
    )


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2021, 6, 7), True),
        (date(2021, 6, 20), False),
        (date(2021, 6, 8), True),
        (date(2021, 6, 10), True),
        (date(2021, 6, 19), True),
        (date(2021, 6, 21), False),
        (date(2021, 6, 6), False),
    ],
)
def test_is_date_occupied(day, expected):
    assert is_date_occupied(day, BOOKED_START, BOOKED_END) is expected


class TestDateRange:
    def test_rejects_empty_range(self):
        with pytest.raises(ValueError):
            DateRange(date(2021, 6, 7), date(2021, 6, 7))

    def test_from_nights_and_length(self):
        dates = DateRange.from_nights(date(2021, 6, 7), 13)
        assert dates == DateRange(BOOKED_START, BOOKED_END)
        assert len(dates) == 13

    def test_normalizes_datetimes(self):
        dates = DateRange(datetime(2021, 6, 7, 12, 30), datetime(2021, 6, 9, 8))
        assert dates.start_date == date(2021, 6, 7)
        assert dates.end_date == date(2021, 6, 9)

    def test_overlaps_with_uses_candidate_on_the_left(self):
        booked = DateRange(BOOKED_START, BOOKED_END)
        assert not DateRange(date(2021, 6, 20), date(2021, 6, 23)).overlaps_with(booked)
        assert DateRange(date(2021, 6, 5), date(2021, 6, 12)).overlaps_with(booked)

    def test_overlaps_with_rejects_other_types(self):
        with pytest.raises(TypeError):
            DateRange(BOOKED_START, BOOKED_END).overlaps_with((BOOKED_START, BOOKED_END))

    def test_contains_and_days(self):
        dates = DateRange(date(2021, 6, 7), date(2021, 6, 10))
        assert dates.contains(date(2021, 6, 9))
        assert not dates.contains(date(2021, 6, 10))
        assert list(dates.days()) == [date(2021, 6, 7), date(2021, 6, 8), date(2021, 6, 9)]

    def test_days_until_max(self):
        assert days_until_max(date.max) == 0
        assert days_until_max(date(9999, 12, 21)) == 10
        assert days_until_max(datetime(9999, 12, 30, 18)) == 1
