"""
People component - List, create and delete person records over HTTP.
"""

from .component import (
    parse_person_id,
    reduce_creator,
    reduce_deleter,
    reduce_lister,
    render_names,
    run_create,
    run_delete,
    run_list,
)
from .models import (
    CreateOutput,
    CreatorState,
    DeleteOutput,
    DeleterState,
    FieldChanged,
    IdRejected,
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

__all__ = [
    # Entry points
    "run_list",
    "run_create",
    "run_delete",
    # Pure functions
    "reduce_lister",
    "reduce_creator",
    "reduce_deleter",
    "render_names",
    "parse_person_id",
    # State
    "ListerState",
    "CreatorState",
    "DeleterState",
    # Events
    "RequestStarted",
    "FieldChanged",
    "IdRejected",
    "ListLoaded",
    "PersonCreated",
    "PersonDeleted",
    "RequestFailed",
    # Output models
    "ListOutput",
    "CreateOutput",
    "DeleteOutput",
    # Ports
    "PeopleApiPort",
    # Shared store
    "PeopleEvents",
    "Mutation",
]
