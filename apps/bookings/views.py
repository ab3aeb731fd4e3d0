"""API views for the booking domain."""

from __future__ import annotations

from datetime import date

from django.utils import timezone
from rest_framework import status  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.infrastructure.responses import result_response
from apps.rentals.repositories import rental_repository

from .application.command_handlers import (
    CreateBookingCommand,
    CreateBookingHandler,
    GetBookingHandler,
    GetBookingQuery,
)
from .repositories import booking_repository
from .serializers import BookingCreateSerializer, BookingSerializer


class BookingStoreMixin:
    """Repositories and clock used by the booking views."""

    rental_repo = rental_repository
    booking_repo = booking_repository

    def today(self) -> date:
        return timezone.localdate()


class BookingListView(BookingStoreMixin, APIView):
    """Создание брони с автоматическим выбором юнита."""

    def post(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        handler = CreateBookingHandler(self.rental_repo, self.booking_repo, today=self.today)
        result = handler.handle(CreateBookingCommand(**serializer.validated_data))
        data = {"id": result.payload.id} if result.is_success else None
        return result_response(result, data, status.HTTP_201_CREATED)


class BookingDetailView(BookingStoreMixin, APIView):
    def get(self, request, booking_id):  # type: ignore
        result = GetBookingHandler(self.booking_repo).handle(GetBookingQuery(booking_id=booking_id))
        data = BookingSerializer(result.payload).data if result.is_success else None
        return result_response(result, data)
