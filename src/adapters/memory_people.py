"""
In-memory people adapter.

Offline stand-in for the remote collection, used for local development
(PEOPLE_OFFLINE=1) and tests.

Key behaviors:
- Seeded with SAMPLE_PEOPLE unless given another seed
- New records get max(id) + 1
- Deleting an unknown id still acknowledges, like the placeholder service
- Every call is recorded in `requests` for assertions
- Setting `fail_with` makes every call settle into that failure
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from src.domain.entities import CreatedPerson, NewPerson, Person
from src.domain.result import Err, NetworkOrServerFailure, Ok, Result

logger = logging.getLogger(__name__)

SAMPLE_PEOPLE: tuple[Person, ...] = (
    Person(id=1, name="Leanne Graham"),
    Person(id=2, name="Ervin Howell"),
    Person(id=3, name="Clementine Bauch"),
    Person(id=4, name="Patricia Lebsack"),
    Person(id=5, name="Chelsey Dietrich"),
)


@dataclass(frozen=True)
class RecordedRequest:
    """One call seen by the adapter."""

    method: str
    path: str
    body: dict[str, Any] | None = None


class InMemoryPeopleApi:
    """PeopleApiPort backed by a dict."""

    def __init__(
        self,
        seed: Iterable[Person] | None = None,
        collection_path: str = "/users",
        fail_with: NetworkOrServerFailure | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._people: dict[int, Person] = {
            p.id: p for p in (SAMPLE_PEOPLE if seed is None else seed)
        }
        self._collection_path = collection_path
        self.fail_with = fail_with
        self.requests: list[RecordedRequest] = []

    def list_people(self) -> Result[list[Person]]:
        self._record("GET", self._collection_path)
        if self.fail_with is not None:
            return Err(self.fail_with)
        with self._lock:
            return Ok(list(self._people.values()))

    def create_person(self, person: NewPerson) -> Result[CreatedPerson]:
        self._record("POST", self._collection_path, person.model_dump())
        if self.fail_with is not None:
            return Err(self.fail_with)
        with self._lock:
            new_id = max(self._people, default=0) + 1
            created = Person(id=new_id, name=person.name)
            self._people[new_id] = created
        logger.debug(f"Stored person {created.id}")
        return Ok(CreatedPerson(id=created.id, name=created.name))

    def delete_person(self, person_id: int) -> Result[None]:
        self._record("DELETE", f"{self._collection_path}/{person_id}")
        if self.fail_with is not None:
            return Err(self.fail_with)
        with self._lock:
            self._people.pop(person_id, None)
        return Ok(None)

    def close(self) -> None:
        """Nothing to release."""

    def _record(self, method: str, path: str, body: dict[str, Any] | None = None) -> None:
        with self._lock:
            self.requests.append(RecordedRequest(method=method, path=path, body=body))
