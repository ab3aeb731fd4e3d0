"""
Booking Command Handlers

These are the use cases for the booking domain.
They orchestrate domain operations inside a per-rental unit of work and
return a Result instead of raising for client errors.

Commands:
- CreateBookingCommand: Allocate a unit and create a booking
- GetBookingQuery: Read one booking
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable
import logging

from django.utils import timezone

from shared.application.results import (
    Conflict,
    ConflictReason,
    InvalidInput,
    NotFound,
    Result,
    Success,
)
from shared.application.uow import InMemoryUnitOfWork
from shared.domain.value_objects import MAX_PERIOD_DAYS, DateRange, as_date, days_until_max
from apps.bookings.domain.entities import Booking
from apps.bookings.domain.events import BookingCreated
from apps.bookings.domain.inventory import UnitInventory

logger = logging.getLogger(__name__)

FULLY_BOOKED_MESSAGE = "The rental is fully booked for at least one day of the given booking period."


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    """
    Command to create a new booking

    The unit is not part of the command: the inventory assigns it.
    """
    rental_id: int
    start: date
    nights: int


@dataclass
class GetBookingQuery:
    booking_id: int


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Strategy:
    1. Validate nights, rental existence and start date
    2. Lock the rental (unit of work)
    3. Load the rental and its bookings still holding a unit
    4. Ask the inventory for the lowest free unit
    5. Save the booking and emit BookingCreated
    6. Release the lock and publish events
    """

    def __init__(self, rental_repo, booking_repo, today: Callable[[], date] = timezone.localdate, bus=None):
        self.rental_repo = rental_repo
        self.booking_repo = booking_repo
        self.today = today
        self.bus = bus

    def handle(self, command: CreateBookingCommand) -> Result:
        logger.info(
            f"Creating booking for rental {command.rental_id}, "
            f"start {command.start}, {command.nights} nights"
        )

        if command.nights < 1:
            return InvalidInput("Nights must be positive")
        if command.nights > MAX_PERIOD_DAYS:
            return InvalidInput(f"Nights can not exceed {MAX_PERIOD_DAYS}.")

        if not self.rental_repo.exists(command.rental_id):
            return NotFound("Rental not found")

        start = as_date(command.start)
        today = self.today()
        if start <= today:
            return InvalidInput("Start date must be in the future.")

        with InMemoryUnitOfWork(command.rental_id, bus=self.bus) as uow:
            rental = self.rental_repo.get(command.rental_id)
            if days_until_max(start) < command.nights + rental.preparation_days:
                return InvalidInput("The booking period is out of range.")
            dates = DateRange.from_nights(start, command.nights)

            bookings = self.booking_repo.list_by_rental(
                rental.id,
                active_after=today,
                preparation_days=rental.preparation_days,
            )
            inventory = UnitInventory(rental, bookings)

            unit = inventory.next_free_unit(dates)
            if unit is None:
                logger.warning(f"Rental {rental.id} is fully booked for {dates}")
                return Conflict(FULLY_BOOKED_MESSAGE, ConflictReason.FULLY_BOOKED)

            booking = Booking(
                id=self.booking_repo.next_id(),
                rental_id=rental.id,
                start=start,
                nights=command.nights,
                unit=unit,
            )
            self.booking_repo.add(booking)

            uow.add_event(BookingCreated(
                aggregate_id=booking.id,
                booking_id=booking.id,
                rental_id=rental.id,
                unit=unit,
                dates=dates,
            ))

        logger.info(f"Booking {booking.id} created on unit {unit} of rental {rental.id}")

        return Success(booking)


class GetBookingHandler:
    """Handler for reading a booking"""

    def __init__(self, booking_repo):
        self.booking_repo = booking_repo

    def handle(self, query: GetBookingQuery) -> Result:
        if query.booking_id < 1:
            return InvalidInput("The booking Id is invalid.")

        if not self.booking_repo.exists(query.booking_id):
            return NotFound("Booking not found")

        return Success(self.booking_repo.get(query.booking_id))
