"""
Shared Kernel

This module contains base classes and utilities shared across the rental
and booking contexts: domain building blocks, date predicates, the unit of
work, the message bus and the in-memory record store.
"""
