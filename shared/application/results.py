"""
Command Results

Every use case returns exactly one of four result kinds:
- Success: the operation completed, payload holds the produced data
- InvalidInput: request values are out of range, the caller must fix them
- NotFound: a referenced rental or booking does not exist
- Conflict: a valid request that would break the allocation invariant

Validation failures and conflicts are ordinary outcomes, not exceptions.
The HTTP layer maps each kind to a status code.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ResultKind(Enum):
    SUCCESS = 'success'
    INVALID_INPUT = 'invalid_input'
    NOT_FOUND = 'not_found'
    CONFLICT = 'conflict'


class ConflictReason(Enum):
    """Which invariant a conflicting request would have broken"""
    FULLY_BOOKED = 'fully_booked'
    PREPARATION_TIME = 'preparation_time'
    UNITS = 'units'


@dataclass(frozen=True)
class Result:
    kind = None

    @property
    def is_success(self) -> bool:
        return self.kind is ResultKind.SUCCESS


@dataclass(frozen=True)
class Success(Result):
    payload: Any = None
    kind = ResultKind.SUCCESS


@dataclass(frozen=True)
class InvalidInput(Result):
    message: str
    kind = ResultKind.INVALID_INPUT


@dataclass(frozen=True)
class NotFound(Result):
    message: str
    kind = ResultKind.NOT_FOUND


@dataclass(frozen=True)
class Conflict(Result):
    message: str
    reason: ConflictReason = field(default=ConflictReason.FULLY_BOOKED)
    kind = ResultKind.CONFLICT
