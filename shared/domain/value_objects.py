"""
Common Value Objects

Value objects and date predicates used across multiple domains:
- DateRange: Represents a range of dates (start inclusive, end exclusive)
- is_overlapping / is_date_occupied: Day-granularity interval predicates
- MAX_PERIOD_DAYS / days_until_max: Bounds keeping derived dates representable
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator

from shared.domain.base import ValueObject

# Upper bound for stays, preparation times and calendar windows, in days
MAX_PERIOD_DAYS = 3650


def as_date(value: date | datetime) -> date:
    """Strip the time of day from a datetime, leave dates untouched."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_overlapping(a_start, a_end, b_start, b_end) -> bool:
    """
    Check if the interval [a_start, a_end) overlaps [b_start, b_end)

    The comparison is asymmetric on purpose: `a` is the candidate and `b` the
    interval already booked. A candidate starting on the day `b` ends is free,
    a candidate ending on the day `b` starts is not.

    Examples (b = 07.06 - 20.06):
        - 20.06 - 23.06 -> False (starts when b ends)
        - 05.06 - 12.06 -> True
    """
    return (as_date(a_start) < as_date(b_end) and
            as_date(a_end) >= as_date(b_start))


def is_date_occupied(day, range_start, range_end) -> bool:
    """True if day falls in [range_start, range_end)."""
    return as_date(range_start) <= as_date(day) < as_date(range_end)


def days_until_max(day) -> int:
    """Number of days that can still be added to `day` without overflowing."""
    return (date.max - as_date(day)).days


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from start_date (inclusive) to end_date (exclusive).
    Used for occupied and buffered booking periods.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        # Normalize datetimes to midnight dates
        object.__setattr__(self, 'start_date', as_date(self.start_date))
        object.__setattr__(self, 'end_date', as_date(self.end_date))

        if self.start_date >= self.end_date:
            raise ValueError(f"Start date ({self.start_date}) must be before end date ({self.end_date})")

    @classmethod
    def from_nights(cls, start: date, nights: int) -> 'DateRange':
        """Build the range covering `nights` nights from `start`"""
        start = as_date(start)
        return cls(start, start + timedelta(days=nights))

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this (candidate) range overlaps with another (booked) range

        See is_overlapping() for the boundary rule.
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        return is_overlapping(self.start_date, self.end_date,
                              other.start_date, other.end_date)

    def contains(self, check_date: date) -> bool:
        """
        Check if a date is within this range

        Note: start_date is inclusive, end_date is exclusive
        """
        return is_date_occupied(check_date, self.start_date, self.end_date)

    def days(self) -> Iterator[date]:
        """Iterate over every date in the range"""
        for offset in range(len(self)):
            yield self.start_date + timedelta(days=offset)

    def __len__(self) -> int:
        """
        Return the number of days (nights) in this range
        """
        return (self.end_date - self.start_date).days

    def __str__(self):
        return f"{self.start_date.strftime('%d.%m.%Y')} - {self.end_date.strftime('%d.%m.%Y')}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
