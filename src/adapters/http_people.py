"""
HTTP adapter for the people collection (httpx).

Implements PeopleApiPort against a JSONPlaceholder-style REST service:
- GET    {collection}        -> list of records
- POST   {collection}        -> created record
- DELETE {collection}/{id}   -> empty acknowledgement

Every call settles into Ok or Err; transport errors, timeouts, non-2xx
statuses and unreadable bodies all become a NetworkOrServerFailure.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter

from src.domain.entities import CreatedPerson, NewPerson, Person
from src.domain.result import Err, NetworkOrServerFailure, Ok, Result

logger = logging.getLogger(__name__)

_PEOPLE = TypeAdapter(list[Person])


class HttpPeopleApi:
    """
    PeopleApiPort over httpx.

    Pass `client` to reuse a configured httpx.Client (it must carry the
    base_url); otherwise one is created and owned by this adapter.
    """

    def __init__(
        self,
        base_url: str = "https://jsonplaceholder.typicode.com",
        collection_path: str = "/users",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._collection_path = collection_path
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def list_people(self) -> Result[list[Person]]:
        sent = self._send("GET", self._collection_path)
        if isinstance(sent, Err):
            return sent
        return self._decode(sent.value, _PEOPLE.validate_python)

    def create_person(self, person: NewPerson) -> Result[CreatedPerson]:
        sent = self._send("POST", self._collection_path, json=person.model_dump())
        if isinstance(sent, Err):
            return sent
        return self._decode(sent.value, CreatedPerson.model_validate)

    def delete_person(self, person_id: int) -> Result[None]:
        sent = self._send("DELETE", self.item_path(person_id))
        if isinstance(sent, Err):
            return sent
        return Ok(None)

    def item_path(self, person_id: int) -> str:
        return f"{self._collection_path}/{person_id}"

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpPeopleApi:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # --- Internals ---

    def _send(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> Result[httpx.Response]:
        logger.debug(f"{method} {path}")
        try:
            response = self._client.request(method, path, json=json)
        except httpx.TimeoutException as e:
            return Err(NetworkOrServerFailure(kind="timeout", message=str(e) or "timed out"))
        except httpx.HTTPError as e:
            return Err(NetworkOrServerFailure(kind="network", message=str(e) or type(e).__name__))

        if not response.is_success:
            return Err(
                NetworkOrServerFailure(
                    kind="status",
                    message=response.reason_phrase or "request failed",
                    status_code=response.status_code,
                )
            )
        return Ok(response)

    @staticmethod
    def _decode(response: httpx.Response, parse: Any) -> Result[Any]:
        try:
            return Ok(parse(response.json()))
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            return Err(
                NetworkOrServerFailure(
                    kind="decode",
                    message=f"Unexpected response body: {e}",
                    status_code=response.status_code,
                )
            )
