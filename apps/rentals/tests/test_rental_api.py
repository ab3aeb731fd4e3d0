"""Integration tests for rental and calendar API endpoints."""

from __future__ import annotations

from datetime import date
from unittest import mock

from django.urls import reverse
from rest_framework import status

from apps.rentals.tests.utils import FUTURE_YEAR, StoreAPITestCase
from shared.infrastructure.repository import RecordNotFoundError


class RentalAPITests(StoreAPITestCase):
    def _detail_url(self, rental_id: int) -> str:
        return reverse("rental-detail", kwargs={"rental_id": rental_id})

    def _put(self, rental_id: int, units: int, preparation_time_in_days: int):
        return self.client.put(
            self._detail_url(rental_id),
            {"units": units, "preparation_time_in_days": preparation_time_in_days},
            format="json",
        )

    def _scheduled_rental(self, with_third_booking: bool = False) -> int:
        rental_id = self.create_rental(units=2, preparation_time_in_days=3)
        starts = [date(FUTURE_YEAR, 6, 10), date(FUTURE_YEAR, 6, 11)]
        if with_third_booking:
            starts.append(date(FUTURE_YEAR, 6, 18))
        for start in starts:
            response = self.create_booking(rental_id, start, 5)
            self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return rental_id

    def test_create_and_get_rental(self) -> None:
        rental_id = self.create_rental(units=25, preparation_time_in_days=1)

        response = self.client.get(self._detail_url(rental_id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"id": rental_id, "units": 25, "preparation_time_in_days": 1})

    def test_create_without_preparation_time(self) -> None:
        response = self.client.post(reverse("rental-list"), {"units": 2}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        rental = self.client.get(self._detail_url(response.data["id"])).data
        self.assertEqual(rental["preparation_time_in_days"], 0)

    def test_create_with_zero_units_is_bad_request(self) -> None:
        response = self.client.post(reverse("rental-list"), {"units": 0}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("higher than 0", response.data["detail"])

    def test_create_with_negative_preparation_is_bad_request(self) -> None:
        response = self.client.post(
            reverse("rental-list"), {"units": 1, "preparation_time_in_days": -1}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_get_missing_rental(self) -> None:
        response = self.client.get(self._detail_url(99))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["detail"], "Rental not found")

    def test_put_updates_rental(self) -> None:
        rental_id = self.create_rental(units=25)

        response = self._put(rental_id, 100, 100)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        rental = self.client.get(self._detail_url(rental_id)).data
        self.assertEqual(rental["units"], 100)
        self.assertEqual(rental["preparation_time_in_days"], 100)

    def test_put_longer_preparation_conflicts(self) -> None:
        rental_id = self._scheduled_rental(with_third_booking=True)

        response = self._put(rental_id, 2, 4)

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertIn(
            "The preparation time value can not be modified due to conflicts with existing bookings",
            response.data["detail"],
        )
        self.assertEqual(response.data["reason"], "preparation_time")

    def test_put_fewer_units_conflicts(self) -> None:
        rental_id = self._scheduled_rental()

        response = self._put(rental_id, 1, 3)

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertIn(
            "The number of units can not be modified due to conflicts with existing bookings",
            response.data["detail"],
        )

    def test_put_more_units_succeeds(self) -> None:
        rental_id = self._scheduled_rental()

        response = self._put(rental_id, 100, 3)

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        booking = self.client.get(reverse("booking-detail", kwargs={"booking_id": 2})).data
        self.assertEqual(booking["unit"], 2)

    def test_put_missing_rental(self) -> None:
        response = self._put(42, 1, 0)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_put_requires_units(self) -> None:
        rental_id = self.create_rental(units=1)

        response = self.client.put(self._detail_url(rental_id), {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("units", response.data)

    def test_put_requires_preparation_time(self) -> None:
        rental_id = self.create_rental(units=1, preparation_time_in_days=2)

        response = self.client.put(self._detail_url(rental_id), {"units": 3}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("preparation_time_in_days", response.data)
        rental = self.client.get(self._detail_url(rental_id)).data
        self.assertEqual((rental["units"], rental["preparation_time_in_days"]), (1, 2))

    def test_create_with_huge_preparation_is_bad_request(self) -> None:
        response = self.client.post(
            reverse("rental-list"),
            {"units": 1, "preparation_time_in_days": 10 ** 8},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("can not exceed", response.data["detail"])

    def test_put_huge_preparation_keeps_rental_usable(self) -> None:
        rental_id = self.create_rental(units=1)
        self.create_booking(rental_id, date(FUTURE_YEAR, 1, 1), 2)

        response = self._put(rental_id, 1, 10 ** 8)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        booking = self.create_booking(rental_id, date(FUTURE_YEAR, 2, 1), 2)
        self.assertEqual(booking.status_code, status.HTTP_201_CREATED, booking.data)
        calendar = self.client.get(
            reverse("calendar"),
            {"rental_id": rental_id, "start": f"{FUTURE_YEAR}-01-01", "nights": 3},
        )
        self.assertEqual(calendar.status_code, status.HTTP_200_OK)

    def test_store_failure_is_server_error(self) -> None:
        rental_id = self.create_rental(units=1)

        from apps.rentals.views import RentalStoreMixin

        with mock.patch.object(
            RentalStoreMixin.rental_repo, "get", side_effect=RecordNotFoundError("vanished")
        ):
            response = self.client.get(self._detail_url(rental_id))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"detail": "Internal server error."})


class CalendarAPITests(StoreAPITestCase):
    def _calendar(self, rental_id, start, nights):
        return self.client.get(
            reverse("calendar"),
            {"rental_id": rental_id, "start": str(start), "nights": nights},
        )

    def test_calendar_lists_bookings_and_preparation(self) -> None:
        rental_id = self.create_rental(units=2, preparation_time_in_days=1)
        self.create_booking(rental_id, date(FUTURE_YEAR, 1, 2), 2)
        self.create_booking(rental_id, date(FUTURE_YEAR, 1, 3), 2)

        response = self._calendar(rental_id, date(FUTURE_YEAR, 1, 1), 5)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["rental_id"], rental_id)
        dates = response.data["dates"]
        self.assertEqual(len(dates), 5)
        self.assertEqual(
            [(day["date"], [b["id"] for b in day["bookings"]], [p["unit"] for p in day["preparation_times"]])
             for day in dates],
            [
                (f"{FUTURE_YEAR}-01-01", [], []),
                (f"{FUTURE_YEAR}-01-02", [1], []),
                (f"{FUTURE_YEAR}-01-03", [1, 2], []),
                (f"{FUTURE_YEAR}-01-04", [2], [1]),
                (f"{FUTURE_YEAR}-01-05", [], [2]),
            ],
        )
        self.assertEqual(dates[2]["bookings"], [{"id": 1, "unit": 1}, {"id": 2, "unit": 2}])

    def test_calendar_is_read_only(self) -> None:
        rental_id = self.create_rental(units=1)
        self.create_booking(rental_id, date(FUTURE_YEAR, 1, 2), 2)

        first = self._calendar(rental_id, date(FUTURE_YEAR, 1, 1), 3).data
        second = self._calendar(rental_id, date(FUTURE_YEAR, 1, 1), 3).data

        self.assertEqual(first, second)

    def test_calendar_non_positive_nights(self) -> None:
        rental_id = self.create_rental(units=1)

        response = self._calendar(rental_id, date(FUTURE_YEAR, 1, 1), 0)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Nights must be positive")

    def test_calendar_unknown_rental(self) -> None:
        response = self._calendar(77, date(FUTURE_YEAR, 1, 1), 1)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_calendar_requires_query_parameters(self) -> None:
        response = self.client.get(reverse("calendar"))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("rental_id", response.data)

    def test_calendar_huge_nights_is_bad_request(self) -> None:
        rental_id = self.create_rental(units=1)

        response = self._calendar(rental_id, date(FUTURE_YEAR, 1, 1), 10 ** 8)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("can not exceed", response.data["detail"])

    def test_calendar_past_last_date_is_bad_request(self) -> None:
        rental_id = self.create_rental(units=1)

        response = self._calendar(rental_id, date(9999, 12, 30), 5)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "The calendar period is out of range.")
