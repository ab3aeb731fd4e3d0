"""
Rental Reconfiguration Validator

Decides whether the bookings of a rental still fit when its unit count
and/or preparation time change. Both checks run against the fully
proposed configuration:

- Preparation time: with the new buffer, no two bookings of the same unit
  may overlap.
- Units: a reduction is refused if on some day the rental is already
  saturated (every current unit busy with a stay or preparation).

Only the dimension that actually changes is checked. The preparation
check runs first and its verdict wins.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List
import logging

from shared.application.results import ConflictReason
from shared.domain.value_objects import is_overlapping
from apps.bookings.domain.entities import Booking
from apps.rentals.domain.entities import Rental

logger = logging.getLogger(__name__)


def peak_occupancy(bookings: List[Booking], preparation_days: int) -> int:
    """
    Maximum number of bookings holding a unit on the same day

    Event sweep over buffered interval boundaries. Intervals are half-open,
    so a booking ending on a day frees its unit before one starting that
    day takes it. Equivalent to counting, for every day between the first
    start and the last buffered end, the bookings containing that day.
    """
    boundaries = []
    for booking in bookings:
        boundaries.append((booking.start, 1))
        boundaries.append((booking.buffer_end(preparation_days), -1))

    # -1 sorts before +1 for the same day
    boundaries.sort()

    current = peak = 0
    for _, delta in boundaries:
        current += delta
        peak = max(peak, current)
    return peak


@dataclass
class ReconfigurationValidator:
    """
    Validates a proposed (units, preparation_days) for one rental

    Usage:
        validator = ReconfigurationValidator(rental, bookings)
        reason = validator.validate(new_units, new_preparation_days)
        if reason is not None:
            # reject with Conflict(reason)
    """

    rental: Rental
    bookings: List[Booking] = field(default_factory=list)

    def active_bookings(self, today: date, preparation_days: int) -> List[Booking]:
        """Bookings whose buffered interval has not ended by today"""
        return [b for b in self.bookings if b.is_active(today, preparation_days)]

    def preparation_time_conflicts(self, bookings: List[Booking], preparation_days: int) -> bool:
        """
        Check if two bookings on the same unit overlap with the given buffer
        """
        for reference in bookings:
            reference_end = reference.buffer_end(preparation_days)

            for other in bookings:
                if other.id == reference.id or other.unit != reference.unit:
                    continue
                if is_overlapping(reference.start, reference_end,
                                  other.start, other.buffer_end(preparation_days)):
                    logger.debug(
                        f"Booking {reference.id} overlaps booking {other.id} "
                        f"on unit {reference.unit} with {preparation_days} preparation days"
                    )
                    return True
        return False

    def units_conflict(self, bookings: List[Booking], preparation_days: int) -> bool:
        """
        Check if the rental is saturated on at least one day
        """
        if not bookings:
            return False
        peak = peak_occupancy(bookings, preparation_days)
        logger.debug(f"Rental {self.rental.id} peak occupancy {peak} of {self.rental.units} units")
        return peak >= self.rental.units

    def validate(self, units: int, preparation_days: int, today: date | None = None) -> ConflictReason | None:
        """
        Validate the proposed configuration

        Returns None when the bookings fit, otherwise the reason of the
        first failing check. `today` filters out bookings whose buffered
        interval is over; None keeps every booking.
        """
        if self.rental.has_configuration(units, preparation_days):
            return None

        if today is None:
            bookings = list(self.bookings)
        else:
            bookings = self.active_bookings(today, preparation_days)

        if preparation_days != self.rental.preparation_days:
            if self.preparation_time_conflicts(bookings, preparation_days):
                return ConflictReason.PREPARATION_TIME

        if units < self.rental.units:
            if self.units_conflict(bookings, preparation_days):
                return ConflictReason.UNITS

        return None
