"""Bookings app package.

This app encapsulates the booking domain, including the booking entity
and the unit inventory that assigns every new booking to the lowest free
unit of its rental. Writers are serialized per rental so allocation
always sees a consistent set of bookings.
"""
