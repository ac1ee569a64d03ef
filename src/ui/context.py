from __future__ import annotations

from dataclasses import dataclass

from src.adapters.http_people import HttpPeopleApi
from src.adapters.memory_people import InMemoryPeopleApi
from src.components.people import PeopleApiPort, PeopleEvents
from src.config.models import AppSettings


@dataclass
class ServiceContext:
    settings: AppSettings
    people_api: PeopleApiPort
    # Only set when the lister should follow sibling mutations.
    events: PeopleEvents | None = None

    @classmethod
    def create(cls, settings: AppSettings) -> ServiceContext:
        api_settings = settings.api

        people_api: PeopleApiPort
        if api_settings.offline:
            people_api = InMemoryPeopleApi(collection_path=api_settings.collection_path)
        else:
            people_api = HttpPeopleApi(
                base_url=api_settings.base_url,
                collection_path=api_settings.collection_path,
                timeout=api_settings.timeout_seconds,
            )

        events = PeopleEvents() if settings.sync.refresh_after_mutation else None

        return cls(settings=settings, people_api=people_api, events=events)

    @property
    def surface_errors(self) -> bool:
        return self.settings.ui.surface_errors

    def close(self) -> None:
        self.people_api.close()
