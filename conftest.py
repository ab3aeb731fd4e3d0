"""Shared pytest fixtures: fresh stores and a fixed clock per test."""

from __future__ import annotations

from datetime import date

import pytest

from apps.bookings.repositories import BookingRepository
from apps.rentals.repositories import RentalRepository
from shared.application.message_bus import MessageBus

TODAY = date(2030, 1, 1)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def clock(today):
    return lambda: today


@pytest.fixture
def rental_repo():
    return RentalRepository()


@pytest.fixture
def booking_repo():
    return BookingRepository()


@pytest.fixture
def bus():
    return MessageBus()
