"""Event handlers for the rentals domain."""

from __future__ import annotations

import logging

from shared.application.message_bus import MessageBus

from .domain.events import RentalCreated, RentalReconfigured

logger = logging.getLogger(__name__)


def log_rental_created(event: RentalCreated) -> None:
    logger.info(
        "Rental %s registered with %s units and %s preparation days",
        event.rental_id,
        event.units,
        event.preparation_days,
    )


def log_rental_reconfigured(event: RentalReconfigured) -> None:
    logger.info(
        "Rental %s reconfigured: units %s -> %s, preparation days %s -> %s",
        event.rental_id,
        event.old_units,
        event.new_units,
        event.old_preparation_days,
        event.new_preparation_days,
    )


def register(bus: MessageBus) -> None:
    bus.register_event_handler(RentalCreated, log_rental_created)
    bus.register_event_handler(RentalReconfigured, log_rental_reconfigured)
