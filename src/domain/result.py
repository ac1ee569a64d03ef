"""
Result types for remote calls.

Every call against the people API settles into exactly one of:
- Ok(value): the request succeeded
- Err(failure): a NetworkOrServerFailure describing why it did not

Adapters never raise for transport problems; callers match both branches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union

T = TypeVar("T")

FailureKind = Literal["network", "timeout", "status", "decode"]


@dataclass(frozen=True)
class NetworkOrServerFailure:
    """Connectivity loss, timeout, non-2xx response or unreadable body."""

    kind: FailureKind
    message: str
    status_code: int | None = None

    def describe(self) -> str:
        if self.status_code is not None:
            return f"{self.kind} error (HTTP {self.status_code}): {self.message}"
        return f"{self.kind} error: {self.message}"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    failure: NetworkOrServerFailure


Result = Union[Ok[T], Err]
