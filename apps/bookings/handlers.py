"""Event handlers for the booking domain."""

from __future__ import annotations

import logging

from shared.application.message_bus import MessageBus

from .domain.events import BookingCreated

logger = logging.getLogger(__name__)


def log_booking_created(event: BookingCreated) -> None:
    logger.info(
        "Booking %s allocated to unit %s of rental %s for %s",
        event.booking_id,
        event.unit,
        event.rental_id,
        event.dates,
    )


def register(bus: MessageBus) -> None:
    bus.register_event_handler(BookingCreated, log_booking_created)
