"""
Tagged results returned by every storage operation.

A failed operation is never reported as an empty one: callers check
``result.failed`` before looking at ``result.value``.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class FailureKind(str, Enum):
    """Why a storage operation did not produce a value."""
    CONNECT = "connect"      # database unreachable or connect timed out
    QUERY = "query"          # driver error while running the operation
    DUPLICATE = "duplicate"  # unique index rejected a write


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of one storage operation: a value or a failure kind."""
    value: Optional[T] = None
    error: Optional[FailureKind] = None

    @classmethod
    def success(cls, value: Any = None) -> "StoreResult":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: FailureKind) -> "StoreResult":
        return cls(error=kind)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def is_empty(self) -> bool:
        """True only for a successful result with no records."""
        return self.ok and not self.value

    def map(self, fn: Callable[[T], U]) -> "StoreResult[U]":
        """Apply ``fn`` to the value of a successful result."""
        if self.failed:
            return StoreResult.failure(self.error)
        return StoreResult.success(fn(self.value))
