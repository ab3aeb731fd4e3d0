"""Rentals app package.

This app encapsulates the rental domain: rentals with interchangeable
units and a preparation buffer, the reconfiguration validator that keeps
existing bookings satisfiable, and the per-day calendar projection.
"""
