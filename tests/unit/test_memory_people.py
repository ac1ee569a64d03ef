from src.adapters.memory_people import SAMPLE_PEOPLE, InMemoryPeopleApi, RecordedRequest
from src.domain.entities import CreatedPerson, NewPerson, Person
from src.domain.result import Err, NetworkOrServerFailure, Ok


def test_default_seed():
    api = InMemoryPeopleApi()
    assert api.list_people() == Ok(list(SAMPLE_PEOPLE))


def test_create_assigns_next_id():
    api = InMemoryPeopleApi(seed=[Person(id=1, name="Ann"), Person(id=4, name="Dee")])

    result = api.create_person(NewPerson(name="Cory"))

    assert result == Ok(CreatedPerson(id=5, name="Cory"))
    assert api.list_people() == Ok(
        [Person(id=1, name="Ann"), Person(id=4, name="Dee"), Person(id=5, name="Cory")]
    )


def test_create_in_empty_store_starts_at_one():
    api = InMemoryPeopleApi(seed=[])
    assert api.create_person(NewPerson(name="Ann")) == Ok(CreatedPerson(id=1, name="Ann"))


def test_delete_unknown_id_is_acknowledged():
    api = InMemoryPeopleApi(seed=[Person(id=1, name="Ann")])
    assert api.delete_person(99) == Ok(None)
    assert api.list_people() == Ok([Person(id=1, name="Ann")])


def test_requests_are_recorded():
    api = InMemoryPeopleApi(seed=[])

    api.list_people()
    api.create_person(NewPerson(name="Cory"))
    api.delete_person(7)

    assert api.requests == [
        RecordedRequest("GET", "/users"),
        RecordedRequest("POST", "/users", {"name": "Cory"}),
        RecordedRequest("DELETE", "/users/7"),
    ]


def test_fail_with_applies_to_every_call():
    failure = NetworkOrServerFailure(kind="network", message="offline")
    api = InMemoryPeopleApi(fail_with=failure)

    assert api.list_people() == Err(failure)
    assert api.create_person(NewPerson(name="Cory")) == Err(failure)
    assert api.delete_person(1) == Err(failure)
    # Failed calls are still requests
    assert len(api.requests) == 3
