"""
Rental Domain Events

Events that represent things that have happened to a rental.
These are published after the unit of work commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass
class RentalCreated(DomainEvent):
    """Event: A new rental was registered"""
    rental_id: int
    units: int
    preparation_days: int


@dataclass
class RentalReconfigured(DomainEvent):
    """
    Event: Units and/or preparation time of a rental changed

    Existing bookings keep their units; the validator guaranteed they
    still fit the new configuration.
    """
    rental_id: int
    old_units: int
    new_units: int
    old_preparation_days: int
    new_preparation_days: int
