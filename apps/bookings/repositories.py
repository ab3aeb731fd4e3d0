"""Repository for booking records."""

from __future__ import annotations

from datetime import date
from typing import List

from shared.infrastructure.repository import InMemoryRepository

from .domain.entities import Booking


class BookingRepository(InMemoryRepository[Booking]):
    """In-memory booking store with per-rental lookups."""

    def list_by_rental(
        self,
        rental_id: int,
        active_after: date | None = None,
        preparation_days: int = 0,
    ) -> List[Booking]:
        """
        Bookings of a rental, in id order

        With `active_after`, only bookings still holding their unit (stay or
        preparation of `preparation_days`) after that date are returned.
        """
        bookings = [b for b in self.list() if b.rental_id == rental_id]
        if active_after is not None:
            bookings = [b for b in bookings if b.is_active(active_after, preparation_days)]
        return bookings


# Process-wide store used by the API
booking_repository = BookingRepository()
