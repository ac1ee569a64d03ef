"""
People component - Data models.

State objects are frozen; transitions return new instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from src.domain.entities import CreatedPerson, Person
from src.domain.result import NetworkOrServerFailure

RequestPhase = Literal["idle", "in_flight"]


# --- Component State ---


@dataclass(frozen=True)
class ListerState:
    """Snapshot of the last successful fetch."""

    people: tuple[Person, ...] = ()
    phase: RequestPhase = "idle"
    error: NetworkOrServerFailure | None = None


@dataclass(frozen=True)
class CreatorState:
    name: str = ""
    phase: RequestPhase = "idle"
    error: NetworkOrServerFailure | None = None
    last_created: CreatedPerson | None = None


@dataclass(frozen=True)
class DeleterState:
    person_id_text: str = ""
    phase: RequestPhase = "idle"
    error: NetworkOrServerFailure | None = None
    last_deleted_id: int | None = None
    # Text from the last submit that did not parse as an id.
    rejected_text: str | None = None


# --- Events ---


@dataclass(frozen=True)
class RequestStarted:
    pass


@dataclass(frozen=True)
class FieldChanged:
    value: str


@dataclass(frozen=True)
class ListLoaded:
    people: tuple[Person, ...]


@dataclass(frozen=True)
class PersonCreated:
    person: CreatedPerson


@dataclass(frozen=True)
class PersonDeleted:
    person_id: int


@dataclass(frozen=True)
class RequestFailed:
    failure: NetworkOrServerFailure


@dataclass(frozen=True)
class IdRejected:
    """Submitted id text was not an integer; no request was sent."""

    text: str


ListerEvent = RequestStarted | ListLoaded | RequestFailed
CreatorEvent = FieldChanged | RequestStarted | PersonCreated | RequestFailed
DeleterEvent = FieldChanged | RequestStarted | PersonDeleted | RequestFailed | IdRejected


# --- Outputs ---


@dataclass(frozen=True)
class ListOutput:
    """Settled outcome of a list request."""

    people: tuple[Person, ...]
    failure: NetworkOrServerFailure | None
    success: bool


@dataclass(frozen=True)
class CreateOutput:
    person: CreatedPerson | None
    failure: NetworkOrServerFailure | None
    success: bool


@dataclass(frozen=True)
class DeleteOutput:
    person_id: int | None
    failure: NetworkOrServerFailure | None
    success: bool
    # False when the id text never made it to a request.
    requested: bool = True
