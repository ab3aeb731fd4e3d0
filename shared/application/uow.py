"""
Unit of Work Pattern

Serializes writers per aggregate and ensures that domain events
are published only after the unit of work completes successfully.
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from threading import Lock, RLock
from typing import Dict, Hashable, List
import logging

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class KeyedLocks:
    """One re-entrant lock per key (e.g. per rental id), created on demand"""

    def __init__(self):
        self._locks: Dict[Hashable, RLock] = defaultdict(RLock)
        self._guard = Lock()

    def get(self, key: Hashable) -> RLock:
        with self._guard:
            return self._locks[key]


# Global per-rental lock registry
rental_locks = KeyedLocks()


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the unit of work"""
        pass

    @abstractmethod
    def rollback(self):
        """Discard the unit of work"""
        pass

    @abstractmethod
    def add_event(self, event: DomainEvent):
        """Record an event to publish on commit"""
        pass


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """
    Unit of Work over the in-memory repositories

    Holds the lock of one aggregate key for the whole read-check-write
    sequence, so booking creation and rental reconfiguration of the same
    rental never interleave. Events are published after the lock is released.

    Usage:
        with InMemoryUnitOfWork(rental_id) as uow:
            rental = rental_repo.get(rental_id)
            bookings = booking_repo.list_by_rental(rental_id)

            # Execute domain logic, save records
            uow.add_event(BookingCreated(...))

            # Commits here
        # Events are published after commit
    """

    def __init__(self, key: Hashable, locks: KeyedLocks = rental_locks, bus=None):
        self.key = key
        self._lock = locks.get(key)
        self._bus = bus
        self._events: List[DomainEvent] = []
        self._committed: List[DomainEvent] = []

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            super().__exit__(exc_type, exc_val, exc_tb)
        finally:
            self._lock.release()

        if self._committed:
            self._publish_events(self._committed)
            self._committed = []

    def add_event(self, event: DomainEvent):
        self._events.append(event)

    def commit(self):
        logger.debug(f"Committing unit of work {self.key!r} with {len(self._events)} events")
        self._committed = self._events.copy()
        self._events.clear()

    def rollback(self):
        logger.warning(f"Rolling back unit of work {self.key!r}, discarding {len(self._events)} events")
        self._events.clear()

    def _publish_events(self, events: List[DomainEvent]):
        """
        Publish collected events to message bus

        Called after the unit of work has committed.
        """
        bus = self._bus
        if bus is None:
            from shared.application.message_bus import message_bus as bus

        logger.info(f"Publishing {len(events)} domain events after commit")
        bus.publish_events(events)
