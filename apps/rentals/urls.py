"""URL routing for the rentals domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import RentalDetailView, RentalListView

urlpatterns = [
    path("", RentalListView.as_view(), name="rental-list"),
    path("<int:rental_id>/", RentalDetailView.as_view(), name="rental-detail"),
]
