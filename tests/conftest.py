import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.http_people import HttpPeopleApi
from src.adapters.memory_people import InMemoryPeopleApi
from src.config.models import AppSettings
from src.domain.entities import Person
from src.shell.http.mock_people import create_mock_people_app
from src.ui.context import ServiceContext


@pytest.fixture
def people():
    return [Person(id=1, name="Ann"), Person(id=2, name="Bo")]


@pytest.fixture
def memory_api(people):
    return InMemoryPeopleApi(seed=people)


@pytest.fixture
def settings():
    return AppSettings()


@pytest.fixture
def test_ctx(settings, memory_api):
    """
    ServiceContext wired to an in-memory people store.
    """
    return ServiceContext(settings=settings, people_api=memory_api)


@pytest.fixture
def mock_app(people) -> FastAPI:
    return create_mock_people_app(seed=people)


@pytest.fixture
def http_api(mock_app):
    """
    HttpPeopleApi talking to the FastAPI mock service in-process.
    """
    with TestClient(mock_app) as client:
        yield HttpPeopleApi(client=client)
