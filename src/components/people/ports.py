"""
People component - Port interfaces.

The remote collection is reached only through PeopleApiPort, so views and
tests can swap the HTTP adapter for an in-memory one.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import CreatedPerson, NewPerson, Person
from src.domain.result import Result


class PeopleApiPort(Protocol):
    """CRUD client for the people collection resource."""

    def list_people(self) -> Result[list[Person]]:
        """GET the collection."""
        ...

    def create_person(self, person: NewPerson) -> Result[CreatedPerson]:
        """POST a new record to the collection."""
        ...

    def delete_person(self, person_id: int) -> Result[None]:
        """DELETE the item resource for person_id."""
        ...

    def close(self) -> None:
        """Release any held connections."""
        ...
