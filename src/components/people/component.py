"""
People component - List, create and delete person records.

Functional core: state transitions and rendering are pure functions of an
explicit state object. Effects (one remote call each) are isolated in the
run_* functions, which take the API port as an argument.

Invariants:
- The lister's people are a snapshot of the last successful fetch only
- Each run_* call issues at most one request and never retries
- Failures settle into an error value; nothing is raised to the caller
"""

from __future__ import annotations

import logging
from dataclasses import replace

from src.domain.entities import NewPerson
from src.domain.result import Err, Ok

from .models import (
    CreateOutput,
    CreatorEvent,
    CreatorState,
    DeleteOutput,
    DeleterEvent,
    DeleterState,
    FieldChanged,
    IdRejected,
    ListerEvent,
    ListerState,
    ListLoaded,
    ListOutput,
    PersonCreated,
    PersonDeleted,
    RequestFailed,
    RequestStarted,
)
from .ports import PeopleApiPort
from .store import Mutation, PeopleEvents

logger = logging.getLogger(__name__)


# --- Pure Functions (Functional Core) ---


def reduce_lister(state: ListerState, event: ListerEvent) -> ListerState:
    """Apply one lister event. A failed reload keeps the previous snapshot."""
    match event:
        case RequestStarted():
            return replace(state, phase="in_flight")
        case ListLoaded(people=people):
            return ListerState(people=people, phase="idle", error=None)
        case RequestFailed(failure=failure):
            return replace(state, phase="idle", error=failure)
    raise TypeError(f"Unknown lister event: {event!r}")


def reduce_creator(state: CreatorState, event: CreatorEvent) -> CreatorState:
    """Apply one creator event. The typed name survives a successful submit."""
    match event:
        case FieldChanged(value=value):
            return replace(state, name=value)
        case RequestStarted():
            return replace(state, phase="in_flight")
        case PersonCreated(person=person):
            return replace(state, phase="idle", error=None, last_created=person)
        case RequestFailed(failure=failure):
            return replace(state, phase="idle", error=failure)
    raise TypeError(f"Unknown creator event: {event!r}")


def reduce_deleter(state: DeleterState, event: DeleterEvent) -> DeleterState:
    """Apply one deleter event. A new submit clears an earlier rejection."""
    match event:
        case FieldChanged(value=value):
            return replace(state, person_id_text=value)
        case IdRejected(text=text):
            return replace(state, phase="idle", error=None, rejected_text=text)
        case RequestStarted():
            return replace(state, phase="in_flight", rejected_text=None)
        case PersonDeleted(person_id=person_id):
            return replace(state, phase="idle", error=None, last_deleted_id=person_id)
        case RequestFailed(failure=failure):
            return replace(state, phase="idle", error=failure)
    raise TypeError(f"Unknown deleter event: {event!r}")


def render_names(state: ListerState) -> list[tuple[str, str]]:
    """(key, text) per list item, keyed by position in the fetched sequence."""
    return [(str(index), person.name) for index, person in enumerate(state.people)]


def parse_person_id(text: str) -> int | None:
    """Parse the deleter's id field. Returns None when it is not an integer."""
    try:
        return int(text.strip())
    except ValueError:
        return None


# --- Effects (Imperative Shell) ---


def run_list(api: PeopleApiPort) -> ListOutput:
    """Fetch the collection once."""
    logger.debug("Fetching people")
    result = api.list_people()

    match result:
        case Ok(value=people):
            return ListOutput(people=tuple(people), failure=None, success=True)
        case Err(failure=failure):
            logger.warning(f"Listing people failed: {failure.describe()}")
            return ListOutput(people=(), failure=failure, success=False)
    raise TypeError(f"Unexpected result: {result!r}")


def run_create(
    name: str,
    api: PeopleApiPort,
    events: PeopleEvents | None = None,
) -> CreateOutput:
    """Send one create request for name. The response is only logged."""
    payload = NewPerson(name=name)
    logger.debug(f"Creating person {payload.model_dump()}")
    result = api.create_person(payload)

    match result:
        case Ok(value=person):
            logger.info(f"Created person: {person.model_dump()}")
            if events is not None:
                events.publish(Mutation(kind="created", person_id=person.id))
            return CreateOutput(person=person, failure=None, success=True)
        case Err(failure=failure):
            logger.warning(f"Creating person failed: {failure.describe()}")
            return CreateOutput(person=None, failure=failure, success=False)
    raise TypeError(f"Unexpected result: {result!r}")


def run_delete(
    person_id_text: str,
    api: PeopleApiPort,
    events: PeopleEvents | None = None,
) -> DeleteOutput:
    """Send one delete request for the id typed into the deleter."""
    person_id = parse_person_id(person_id_text)
    if person_id is None:
        logger.warning(f"Not deleting: {person_id_text!r} is not a person id")
        return DeleteOutput(person_id=None, failure=None, success=False, requested=False)

    logger.debug(f"Deleting person {person_id}")
    result = api.delete_person(person_id)

    match result:
        case Ok():
            if events is not None:
                events.publish(Mutation(kind="deleted", person_id=person_id))
            return DeleteOutput(person_id=person_id, failure=None, success=True)
        case Err(failure=failure):
            logger.warning(f"Deleting person {person_id} failed: {failure.describe()}")
            return DeleteOutput(person_id=person_id, failure=failure, success=False)
    raise TypeError(f"Unexpected result: {result!r}")
