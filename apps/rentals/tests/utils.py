"""Helpers for API tests."""

from __future__ import annotations

from datetime import date
from unittest import mock

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APISimpleTestCase

from apps.bookings.repositories import BookingRepository
from apps.bookings.views import BookingStoreMixin
from apps.rentals.repositories import RentalRepository
from apps.rentals.views import RentalStoreMixin

FUTURE_YEAR = date.today().year + 10


class StoreAPITestCase(APISimpleTestCase):
    """Runs every test against a fresh in-memory store."""

    def setUp(self) -> None:
        rental_repo = RentalRepository()
        booking_repo = BookingRepository()
        for mixin in (RentalStoreMixin, BookingStoreMixin):
            for name, repo in (("rental_repo", rental_repo), ("booking_repo", booking_repo)):
                patcher = mock.patch.object(mixin, name, repo)
                patcher.start()
                self.addCleanup(patcher.stop)

    def create_rental(self, units: int, preparation_time_in_days: int = 0) -> int:
        response = self.client.post(
            reverse("rental-list"),
            {"units": units, "preparation_time_in_days": preparation_time_in_days},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return response.data["id"]

    def create_booking(self, rental_id: int, start: date, nights: int):
        return self.client.post(
            reverse("booking-list"),
            {"rental_id": rental_id, "start": str(start), "nights": nights},
            format="json",
        )
