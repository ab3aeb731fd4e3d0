"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after the unit of work commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent
from shared.domain.value_objects import DateRange


@dataclass
class BookingCreated(DomainEvent):
    """
    Event: A new booking was allocated to a unit

    Triggers:
    - Audit log entry
    """
    booking_id: int
    rental_id: int
    unit: int
    dates: DateRange
