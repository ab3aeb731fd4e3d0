"""URL routing for the calendar projection."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CalendarView

urlpatterns = [
    path("", CalendarView.as_view(), name="calendar"),
]
