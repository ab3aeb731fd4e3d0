"""URL configuration for the vacation rental service.

The `urlpatterns` list routes URLs to the application-level views of each
domain app.
"""
from django.urls import path, include  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('api/v1/rentals/', include('apps.rentals.urls')),
    path('api/v1/bookings/', include('apps.bookings.urls')),
    path('api/v1/calendar/', include('apps.rentals.calendar_urls')),
]
