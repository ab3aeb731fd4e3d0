"""Serializers for the rentals domain."""

from __future__ import annotations

from rest_framework import ISO_8601, serializers  # type: ignore


class RentalWriteSerializer(serializers.Serializer):
    """Тело запроса создания объекта."""

    units = serializers.IntegerField()
    preparation_time_in_days = serializers.IntegerField(required=False, default=0)


class RentalUpdateSerializer(serializers.Serializer):
    """Тело запроса изменения объекта: обе величины обязательны."""

    units = serializers.IntegerField()
    preparation_time_in_days = serializers.IntegerField()


class RentalSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    units = serializers.IntegerField(read_only=True)
    preparation_time_in_days = serializers.IntegerField(source="preparation_days", read_only=True)


class CalendarQuerySerializer(serializers.Serializer):
    rental_id = serializers.IntegerField()
    start = serializers.DateField(input_formats=[ISO_8601, "%Y-%m-%dT%H:%M:%S"])
    nights = serializers.IntegerField()


class CalendarBookingSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    unit = serializers.IntegerField()


class PreparationTimeSerializer(serializers.Serializer):
    unit = serializers.IntegerField()


class CalendarDaySerializer(serializers.Serializer):
    date = serializers.DateField()
    bookings = CalendarBookingSerializer(many=True)
    preparation_times = PreparationTimeSerializer(many=True)


class CalendarSerializer(serializers.Serializer):
    rental_id = serializers.IntegerField()
    dates = CalendarDaySerializer(many=True)
