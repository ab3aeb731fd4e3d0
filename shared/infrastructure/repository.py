"""
In-memory repositories

Records are kept in a lock-guarded dictionary keyed by their sequential id.
Nothing is persisted: the store lives as long as the process.

Usage:
    rental_id = rental_repo.next_id()
    rental_repo.add(Rental(id=rental_id, units=2, preparation_days=1))
    rental = rental_repo.get(rental_id)
"""

from abc import ABC, abstractmethod
from itertools import count
from threading import Lock
from typing import Dict, Generic, List, TypeVar
import logging

from shared.domain.base import Entity

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Entity)


class StoreError(Exception):
    """Base class for unexpected store failures (never a client error)"""


class RecordNotFoundError(StoreError):
    """Raised when a record expected to exist is missing"""


class DuplicateRecordError(StoreError):
    """Raised when a record id is inserted twice"""


class AbstractRepository(ABC, Generic[T]):
    """Record store contract consumed by the command handlers"""

    @abstractmethod
    def next_id(self) -> int:
        """Reserve the next sequential identifier"""
        pass

    @abstractmethod
    def exists(self, record_id: int) -> bool:
        pass

    @abstractmethod
    def get(self, record_id: int) -> T:
        """
        Fetch a record by id

        Raises:
            RecordNotFoundError: If no record has this id
        """
        pass

    @abstractmethod
    def add(self, record: T):
        """
        Insert a new record

        Raises:
            DuplicateRecordError: If the id is already taken
        """
        pass

    @abstractmethod
    def save(self, record: T):
        """
        Replace an existing record

        Raises:
            RecordNotFoundError: If the record was never added
        """
        pass

    @abstractmethod
    def list(self) -> List[T]:
        pass


class InMemoryRepository(AbstractRepository[T]):
    """
    Thread-safe in-memory implementation of the record store

    Identifiers come from an atomically incremented counter starting at 1,
    so concurrent creations never observe the same id.
    """

    def __init__(self):
        self._records: Dict[int, T] = {}
        self._ids = count(1)
        self._lock = Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def exists(self, record_id: int) -> bool:
        with self._lock:
            return record_id in self._records

    def get(self, record_id: int) -> T:
        with self._lock:
            try:
                return self._records[record_id]
            except KeyError:
                raise RecordNotFoundError(
                    f"{self.__class__.__name__}: record {record_id} not found"
                ) from None

    def add(self, record: T):
        with self._lock:
            if record.id in self._records:
                raise DuplicateRecordError(
                    f"{self.__class__.__name__}: record {record.id} already exists"
                )
            self._records[record.id] = record
        logger.debug(f"Added {record!r}")

    def save(self, record: T):
        with self._lock:
            if record.id not in self._records:
                raise RecordNotFoundError(
                    f"{self.__class__.__name__}: cannot save unknown record {record.id}"
                )
            self._records[record.id] = record
        logger.debug(f"Saved {record!r}")

    def list(self) -> List[T]:
        with self._lock:
            return sorted(self._records.values(), key=lambda record: record.id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
