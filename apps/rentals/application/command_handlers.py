"""
Rental Command Handlers

These are the use cases for the rental domain.

Commands:
- CreateRentalCommand: Register a rental
- ModifyRentalCommand: Change units and/or preparation time
- GetRentalQuery: Read one rental
- GetCalendarQuery: Per-day occupancy projection
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, List
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
from shared.domain.value_objects import MAX_PERIOD_DAYS, days_until_max
from apps.rentals.domain.calendar import CalendarDay, CalendarProjector
from apps.rentals.domain.entities import Rental
from apps.rentals.domain.events import RentalCreated, RentalReconfigured
from apps.rentals.domain.reconfiguration import ReconfigurationValidator

logger = logging.getLogger(__name__)

CONFLICT_MESSAGES = {
    ConflictReason.PREPARATION_TIME: (
        "The preparation time value can not be modified due to conflicts with existing bookings."
    ),
    ConflictReason.UNITS: (
        "The number of units can not be modified due to conflicts with existing bookings."
    ),
}


def validate_configuration(units: int, preparation_days: int) -> InvalidInput | None:
    """Range checks shared by rental creation and modification"""
    if units < 1:
        return InvalidInput("The rental units value needs to be higher than 0.")
    if preparation_days < 0:
        return InvalidInput("The preparation time in days needs to be greater or equal than 0.")
    if preparation_days > MAX_PERIOD_DAYS:
        return InvalidInput(f"The preparation time in days can not exceed {MAX_PERIOD_DAYS}.")
    return None


# ===== Commands =====

@dataclass
class CreateRentalCommand:
    units: int
    preparation_days: int = 0


@dataclass
class ModifyRentalCommand:
    rental_id: int
    units: int
    preparation_days: int


@dataclass
class GetRentalQuery:
    rental_id: int


@dataclass
class GetCalendarQuery:
    rental_id: int
    start: date
    nights: int


@dataclass
class Calendar:
    rental_id: int
    dates: List[CalendarDay]


# ===== Command Handlers =====

class CreateRentalHandler:
    """Handler for registering a rental"""

    def __init__(self, rental_repo, bus=None):
        self.rental_repo = rental_repo
        self.bus = bus

    def handle(self, command: CreateRentalCommand) -> Result:
        invalid = validate_configuration(command.units, command.preparation_days)
        if invalid is not None:
            return invalid

        rental = Rental(
            id=self.rental_repo.next_id(),
            units=command.units,
            preparation_days=command.preparation_days,
        )

        with InMemoryUnitOfWork(rental.id, bus=self.bus) as uow:
            self.rental_repo.add(rental)
            uow.add_event(RentalCreated(
                aggregate_id=rental.id,
                rental_id=rental.id,
                units=rental.units,
                preparation_days=rental.preparation_days,
            ))

        logger.info(f"{rental} created")
        return Success(rental)


class ModifyRentalHandler:
    """
    Handler for changing a rental's units and preparation time

    Strategy:
    1. Validate the proposed values and rental existence
    2. Lock the rental so no booking is created mid-check
    3. Run the reconfiguration validator on the rental's bookings
    4. Replace the rental record in one write and emit RentalReconfigured
    """

    def __init__(self, rental_repo, booking_repo, today: Callable[[], date] = timezone.localdate, bus=None):
        self.rental_repo = rental_repo
        self.booking_repo = booking_repo
        self.today = today
        self.bus = bus

    def handle(self, command: ModifyRentalCommand) -> Result:
        logger.info(
            f"Modifying rental {command.rental_id}: units={command.units}, "
            f"preparation_days={command.preparation_days}"
        )

        invalid = validate_configuration(command.units, command.preparation_days)
        if invalid is not None:
            return invalid

        if not self.rental_repo.exists(command.rental_id):
            return NotFound("Rental not found")

        with InMemoryUnitOfWork(command.rental_id, bus=self.bus) as uow:
            rental = self.rental_repo.get(command.rental_id)

            if rental.has_configuration(command.units, command.preparation_days):
                logger.debug(f"{rental} unchanged")
                return Success(rental)

            bookings = self.booking_repo.list_by_rental(rental.id)
            latest_end = max((b.occupied_end for b in bookings), default=None)
            if latest_end is not None and days_until_max(latest_end) < command.preparation_days:
                return InvalidInput("The preparation time pushes existing bookings past the supported date range.")

            validator = ReconfigurationValidator(rental, bookings)
            reason = validator.validate(
                command.units,
                command.preparation_days,
                today=self.today(),
            )
            if reason is not None:
                logger.warning(f"{rental} can not be reconfigured: {reason.value}")
                return Conflict(CONFLICT_MESSAGES[reason], reason)

            updated = rental.reconfigure(command.units, command.preparation_days)
            self.rental_repo.save(updated)

            uow.add_event(RentalReconfigured(
                aggregate_id=rental.id,
                rental_id=rental.id,
                old_units=rental.units,
                new_units=updated.units,
                old_preparation_days=rental.preparation_days,
                new_preparation_days=updated.preparation_days,
            ))

        logger.info(f"{updated} reconfigured")
        return Success(updated)


class GetRentalHandler:
    """Handler for reading a rental"""

    def __init__(self, rental_repo):
        self.rental_repo = rental_repo

    def handle(self, query: GetRentalQuery) -> Result:
        if query.rental_id < 1:
            return InvalidInput("The rental Id is invalid.")

        if not self.rental_repo.exists(query.rental_id):
            return NotFound("Rental not found")

        return Success(self.rental_repo.get(query.rental_id))


class GetCalendarHandler:
    """Handler for the calendar projection (read-only, takes no lock)"""

    def __init__(self, rental_repo, booking_repo):
        self.rental_repo = rental_repo
        self.booking_repo = booking_repo

    def handle(self, query: GetCalendarQuery) -> Result:
        if query.nights < 1:
            return InvalidInput("Nights must be positive")
        if query.nights > MAX_PERIOD_DAYS:
            return InvalidInput(f"Nights can not exceed {MAX_PERIOD_DAYS}.")
        if days_until_max(query.start) < query.nights:
            return InvalidInput("The calendar period is out of range.")

        if not self.rental_repo.exists(query.rental_id):
            return NotFound("Rental not found")

        rental = self.rental_repo.get(query.rental_id)
        projector = CalendarProjector(rental, self.booking_repo.list_by_rental(rental.id))

        return Success(Calendar(
            rental_id=rental.id,
            dates=projector.project(query.start, query.nights),
        ))
