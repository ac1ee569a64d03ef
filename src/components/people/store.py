"""
Shared mutation feed for the people views.

Creator and Deleter publish successful mutations; the Lister subscribes and
re-fetches. Only wired when sync.refresh_after_mutation is enabled, since
the views are otherwise independent.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

MutationKind = Literal["created", "deleted"]


@dataclass(frozen=True)
class Mutation:
    kind: MutationKind
    # None when the server did not echo an id for a creation
    person_id: int | None


Subscriber = Callable[[Mutation], None]


class PeopleEvents:
    """Thread-safe publish/subscribe for people mutations."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register callback; returns a function that removes it again."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, mutation: Mutation) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        logger.debug(f"Publishing {mutation} to {len(subscribers)} subscriber(s)")
        for callback in subscribers:
            callback(mutation)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)
