"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import ISO_8601, serializers  # type: ignore


class BookingCreateSerializer(serializers.Serializer):
    """Создание брони. Юнит назначается движком, не клиентом."""

    rental_id = serializers.IntegerField()
    start = serializers.DateField(input_formats=[ISO_8601, "%Y-%m-%dT%H:%M:%S"])
    nights = serializers.IntegerField()


class BookingSerializer(serializers.Serializer):
    """Детальный сериализатор бронирования."""

    id = serializers.IntegerField(read_only=True)
    rental_id = serializers.IntegerField(read_only=True)
    start = serializers.DateField(read_only=True)
    nights = serializers.IntegerField(read_only=True)
    unit = serializers.IntegerField(read_only=True)
