"""
Booking Domain Entities

A booking holds one unit of a rental for `nights` nights from `start`.
The unit stays unavailable for the rental's preparation time afterwards.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from shared.domain.base import Entity
from shared.domain.value_objects import DateRange, as_date


@dataclass(frozen=True, eq=False)
class Booking(Entity):
    """
    Booking Aggregate Root

    Created only by the availability checker, which also picks the unit.
    Immutable afterwards.

    Derived dates:
    - occupied_end: first day the unit is physically free
    - buffer_end(p): first day the unit can host a new booking when the
      rental's preparation time is p
    """

    rental_id: int
    start: date
    nights: int
    unit: int

    def __post_init__(self):
        object.__setattr__(self, 'start', as_date(self.start))

        if self.nights < 1:
            raise ValueError("Booking must be at least one night")
        if self.unit < 1:
            raise ValueError("Unit numbers start at 1")

    @property
    def occupied_end(self) -> date:
        return self.start + timedelta(days=self.nights)

    def buffer_end(self, preparation_days: int) -> date:
        return self.occupied_end + timedelta(days=preparation_days)

    @property
    def occupied(self) -> DateRange:
        """Nights actually stayed"""
        return DateRange(self.start, self.occupied_end)

    def buffered(self, preparation_days: int) -> DateRange:
        """Nights stayed plus preparation, the unit's exclusivity window"""
        return DateRange(self.start, self.buffer_end(preparation_days))

    def is_active(self, today: date, preparation_days: int) -> bool:
        """Check if the unit is still held (stay or preparation) after today"""
        return self.buffer_end(preparation_days) > as_date(today)

    def __str__(self):
        return f"Booking {self.id} (rental {self.rental_id}, unit {self.unit}, {self.occupied})"

    def __repr__(self):
        return (
            f"Booking(id={self.id}, rental_id={self.rental_id}, "
            f"start={self.start}, nights={self.nights}, unit={self.unit})"
        )
