"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingDetailView, BookingListView

urlpatterns = [
    path("", BookingListView.as_view(), name="booking-list"),
    path("<int:booking_id>/", BookingDetailView.as_view(), name="booking-detail"),
]
