"""
Mock people service (FastAPI).

Mimics the public placeholder API closely enough for offline development
and integration tests:
- GET    /users         -> list of records
- GET    /users/{id}    -> one record, 404 if unknown
- POST   /users         -> created record with a new id (201)
- DELETE /users/{id}    -> {} (unknown ids are acknowledged too)
- GET    /health        -> {"status": "healthy"}

Run locally with:
    python -m src.shell.http.mock_people
or
    uvicorn src.shell.http.mock_people:app --port 8010
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from fastapi import APIRouter, FastAPI, HTTPException, status

from src.adapters.memory_people import SAMPLE_PEOPLE
from src.domain.entities import NewPerson, Person

logger = logging.getLogger(__name__)


class PeopleTable:
    """Thread-safe in-process storage for the mock service."""

    def __init__(self, seed: Iterable[Person]) -> None:
        self._lock = threading.Lock()
        self._rows: dict[int, Person] = {p.id: p for p in seed}

    def all(self) -> list[Person]:
        with self._lock:
            return list(self._rows.values())

    def get(self, person_id: int) -> Person | None:
        with self._lock:
            return self._rows.get(person_id)

    def insert(self, name: str) -> Person:
        with self._lock:
            person = Person(id=max(self._rows, default=0) + 1, name=name)
            self._rows[person.id] = person
            return person

    def remove(self, person_id: int) -> bool:
        with self._lock:
            return self._rows.pop(person_id, None) is not None


def create_people_router(table: PeopleTable, collection_path: str = "/users") -> APIRouter:
    router = APIRouter(prefix=collection_path, tags=["people"])

    @router.get("", response_model=list[Person])
    def list_people() -> list[Person]:
        return table.all()

    @router.get("/{person_id}", response_model=Person)
    def get_person(person_id: int) -> Person:
        person = table.get(person_id)
        if person is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
        return person

    @router.post("", response_model=Person, status_code=status.HTTP_201_CREATED)
    def create_person(payload: NewPerson) -> Person:
        person = table.insert(payload.name)
        logger.info(f"Mock service created person {person.id}")
        return person

    @router.delete("/{person_id}")
    def delete_person(person_id: int) -> dict[str, str]:
        if not table.remove(person_id):
            logger.debug(f"Mock service: delete of unknown person {person_id}")
        return {}

    return router


def create_mock_people_app(
    seed: Iterable[Person] | None = None, collection_path: str = "/users"
) -> FastAPI:
    """Build a fresh mock service with its own table."""
    table = PeopleTable(SAMPLE_PEOPLE if seed is None else seed)

    app = FastAPI(title="Mock People Service")
    app.include_router(create_people_router(table, collection_path))

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_mock_people_app()

if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    uvicorn.run(app, host="127.0.0.1", port=8010)
