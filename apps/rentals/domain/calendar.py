"""
Calendar Projector

Read-only, per-day view of a rental: which bookings occupy each day and
which units are being prepared after a stay.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List

from shared.domain.value_objects import DateRange, is_date_occupied
from apps.bookings.domain.entities import Booking
from apps.rentals.domain.entities import Rental


@dataclass(frozen=True)
class CalendarBooking:
    id: int
    unit: int


@dataclass(frozen=True)
class PreparationTime:
    unit: int


@dataclass
class CalendarDay:
    date: date
    bookings: List[CalendarBooking] = field(default_factory=list)
    preparation_times: List[PreparationTime] = field(default_factory=list)


@dataclass
class CalendarProjector:
    """
    Projects the bookings of one rental onto consecutive days

    A booking occupies a day inside [start, occupied_end). Its unit is in
    preparation on days inside [occupied_end, buffer_end), with the buffer
    computed from the rental's current preparation time.
    """

    rental: Rental
    bookings: List[Booking] = field(default_factory=list)

    def project_day(self, day: date) -> CalendarDay:
        preparation_days = self.rental.preparation_days
        calendar_day = CalendarDay(date=day)

        for booking in sorted(self.bookings, key=lambda b: b.id):
            if is_date_occupied(day, booking.start, booking.occupied_end):
                calendar_day.bookings.append(CalendarBooking(id=booking.id, unit=booking.unit))
            elif day >= booking.occupied_end and is_date_occupied(
                day, booking.start, booking.buffer_end(preparation_days)
            ):
                calendar_day.preparation_times.append(PreparationTime(unit=booking.unit))

        return calendar_day

    def project(self, start: date, nights: int) -> List[CalendarDay]:
        return [self.project_day(day) for day in DateRange.from_nights(start, nights).days()]
