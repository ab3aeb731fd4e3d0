"""
Rental Domain Entities

A rental exposes a fixed number of interchangeable units. Every booking
consumes one unit for its nights plus `preparation_days` idle days.
"""

from dataclasses import dataclass, replace

from shared.domain.base import Entity


@dataclass(frozen=True, eq=False)
class Rental(Entity):
    """
    Rental Aggregate Root

    Key invariants:
    - At least one unit
    - Preparation time is never negative
    - Two bookings whose buffered intervals overlap never share a unit
      (enforced by the availability checker and reconfiguration validator)
    """

    units: int = 1
    preparation_days: int = 0

    def __post_init__(self):
        if self.units < 1:
            raise ValueError("Rental must have at least one unit")
        if self.preparation_days < 0:
            raise ValueError("Preparation time cannot be negative")

    def reconfigure(self, units: int, preparation_days: int) -> 'Rental':
        """Return the rental with the new configuration applied"""
        return replace(self, units=units, preparation_days=preparation_days)

    def has_configuration(self, units: int, preparation_days: int) -> bool:
        return self.units == units and self.preparation_days == preparation_days

    def __str__(self):
        return f"Rental {self.id} ({self.units} units, {self.preparation_days} preparation days)"

    def __repr__(self):
        return (
            f"Rental(id={self.id}, units={self.units}, "
            f"preparation_days={self.preparation_days})"
        )
