"""
Unit Inventory

This is the CRITICAL component for preventing double bookings.
Every new booking MUST get its unit through this inventory.

The inventory is a snapshot of one rental: its unit count, its current
preparation time and the bookings still holding a unit. For a candidate
stay it tells which unit the booking should get, or that none is free
(next_free_unit).

Units are handed out lowest-number-first so that allocation is
reproducible for a given sequence of requests.
"""

from dataclasses import dataclass, field
from typing import List
import logging

from shared.domain.value_objects import DateRange
from apps.bookings.domain.entities import Booking
from apps.rentals.domain.entities import Rental

logger = logging.getLogger(__name__)


@dataclass
class UnitInventory:
    """
    Unit availability of one rental

    Usage:
        inventory = UnitInventory(rental, booking_repo.list_by_rental(rental.id))

        unit = inventory.next_free_unit(DateRange.from_nights(start, nights))
        if unit is None:
            # rental is fully booked for at least one day
    """

    rental: Rental
    bookings: List[Booking] = field(default_factory=list)

    def get_allocations_for_period(self, dates: DateRange) -> List[Booking]:
        """
        Bookings whose buffered interval overlaps the candidate stay

        Buffers use the rental's current preparation time for every booking.
        """
        preparation_days = self.rental.preparation_days
        return [
            booking for booking in self.bookings
            if dates.overlaps_with(booking.buffered(preparation_days))
        ]

    def next_free_unit(self, dates: DateRange) -> int | None:
        """
        Pick the unit for a candidate stay

        Returns the lowest unit number not held by an overlapping booking,
        or None if every unit is taken on at least one day.
        """
        overlapping = self.get_allocations_for_period(dates)

        logger.debug(
            f"Bookings {[b.id for b in overlapping]} overlap {dates} "
            f"on rental {self.rental.id}: {len(overlapping)} of {self.rental.units} units taken"
        )

        if len(overlapping) >= self.rental.units:
            return None

        taken = {booking.unit for booking in overlapping}
        unit = 1
        while unit in taken:
            unit += 1
        return unit

    def __str__(self):
        return f"UnitInventory(rental={self.rental.id}, bookings={len(self.bookings)})"
