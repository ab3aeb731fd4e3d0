"""Repository for rental records."""

from __future__ import annotations

from shared.infrastructure.repository import InMemoryRepository

from .domain.entities import Rental


class RentalRepository(InMemoryRepository[Rental]):
    """In-memory rental store."""


# Process-wide store used by the API
rental_repository = RentalRepository()
