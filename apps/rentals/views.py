"""API views for the rentals domain."""

from __future__ import annotations

from datetime import date

from django.utils import timezone
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.infrastructure.responses import result_response
from apps.bookings.repositories import booking_repository

from .application.command_handlers import (
    CreateRentalCommand,
    CreateRentalHandler,
    GetCalendarHandler,
    GetCalendarQuery,
    GetRentalHandler,
    GetRentalQuery,
    ModifyRentalCommand,
    ModifyRentalHandler,
)
from .repositories import rental_repository
from .serializers import (
    CalendarQuerySerializer,
    CalendarSerializer,
    RentalSerializer,
    RentalUpdateSerializer,
    RentalWriteSerializer,
)


class RentalStoreMixin:
    """Repositories and clock used by the rental views."""

    rental_repo = rental_repository
    booking_repo = booking_repository

    def today(self) -> date:
        return timezone.localdate()


class RentalListView(RentalStoreMixin, APIView):
    """Создание объекта аренды."""

    def post(self, request):  # type: ignore
        serializer = RentalWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = CreateRentalHandler(self.rental_repo).handle(CreateRentalCommand(
            units=serializer.validated_data["units"],
            preparation_days=serializer.validated_data["preparation_time_in_days"],
        ))
        data = {"id": result.payload.id} if result.is_success else None
        return result_response(result, data, status.HTTP_201_CREATED)


class RentalDetailView(RentalStoreMixin, APIView):
    """Просмотр и изменение конфигурации объекта."""

    def get(self, request, rental_id):  # type: ignore
        result = GetRentalHandler(self.rental_repo).handle(GetRentalQuery(rental_id=rental_id))
        data = RentalSerializer(result.payload).data if result.is_success else None
        return result_response(result, data)

    def put(self, request, rental_id):  # type: ignore
        serializer = RentalUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        handler = ModifyRentalHandler(self.rental_repo, self.booking_repo, today=self.today)
        result = handler.handle(ModifyRentalCommand(
            rental_id=rental_id,
            units=serializer.validated_data["units"],
            preparation_days=serializer.validated_data["preparation_time_in_days"],
        ))
        if result.is_success:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return result_response(result)


class CalendarView(RentalStoreMixin, APIView):
    """Календарь занятости юнитов по дням."""

    def get(self, request):  # type: ignore
        serializer = CalendarQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        result = GetCalendarHandler(self.rental_repo, self.booking_repo).handle(
            GetCalendarQuery(**serializer.validated_data)
        )
        data = CalendarSerializer(result.payload).data if result.is_success else None
        return result_response(result, data)
