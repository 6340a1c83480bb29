"""In-memory implementations of the event and registration repositories.

Used when STORAGE_BACKEND=memory (single-process development) and by tests.
Entities are copied on save and on read, so callers only see changes they
have saved, as with the SQLAlchemy adapters.
"""

import copy
from dataclasses import dataclass, field
from uuid import UUID

from src.domain.entities.event import Event
from src.domain.entities.registration import Registration
from src.domain.enums.registration_status import RegistrationStatus


@dataclass
class InMemoryStore:
    """Shared backing store for the in-memory repositories."""

    events: dict[UUID, Event] = field(default_factory=dict)
    registrations: dict[UUID, Registration] = field(default_factory=dict)

    def clear(self) -> None:
        self.events.clear()
        self.registrations.clear()


class InMemoryEventRepository:
    """In-memory implementation of EventRepository protocol."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(
        self, event_id: UUID, *, for_update: bool = False
    ) -> Event | None:
        event = self._store.events.get(event_id)
        return copy.deepcopy(event) if event is not None else None

    async def find_visible(self, offset: int, limit: int) -> list[Event]:
        return self._visible()[offset : offset + limit]

    async def count_visible(self) -> int:
        return len(self._visible())

    async def find_visible_by_organizer(
        self, organizer_id: UUID, offset: int, limit: int
    ) -> list[Event]:
        return self._visible(organizer_id)[offset : offset + limit]

    async def count_visible_by_organizer(self, organizer_id: UUID) -> int:
        return len(self._visible(organizer_id))

    async def find_pending_cancellation(self) -> list[Event]:
        pending = [e for e in self._store.events.values() if e.is_cancellation_pending()]
        pending.sort(key=lambda e: e.cancellation_requested_at)  # type: ignore[arg-type, return-value]
        return copy.deepcopy(pending)

    async def save(self, event: Event) -> None:
        self._store.events[event.id] = copy.deepcopy(event)

    def _visible(self, organizer_id: UUID | None = None) -> list[Event]:
        events = [
            e
            for e in self._store.events.values()
            if e.is_visible()
            and (organizer_id is None or e.organizer_id == organizer_id)
        ]
        events.sort(key=lambda e: (e.start_at, e.id))
        return copy.deepcopy(events)


class InMemoryRegistrationRepository:
    """In-memory implementation of RegistrationRepository protocol."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, registration_id: UUID) -> Registration | None:
        registration = self._store.registrations.get(registration_id)
        return copy.deepcopy(registration) if registration is not None else None

    async def find_by_event_id(self, event_id: UUID) -> list[Registration]:
        return self._where(lambda r: r.event_id == event_id)

    async def find_by_user_id(self, user_id: UUID) -> list[Registration]:
        return self._where(lambda r: r.user_id == user_id)

    async def find_active(
        self, event_id: UUID, user_id: UUID
    ) -> Registration | None:
        matches = self._where(
            lambda r: r.event_id == event_id and r.user_id == user_id and r.is_active()
        )
        return matches[0] if matches else None

    async def count_by_event_and_status(
        self, event_id: UUID, status: RegistrationStatus
    ) -> int:
        return sum(
            1
            for r in self._store.registrations.values()
            if r.event_id == event_id and r.status == status
        )

    async def find_by_event_and_status(
        self, event_id: UUID, status: RegistrationStatus
    ) -> list[Registration]:
        matches = self._where(lambda r: r.event_id == event_id and r.status == status)
        matches.sort(key=lambda r: (r.registration_date, r.id))
        return matches

    async def save(self, registration: Registration) -> None:
        self._store.registrations[registration.id] = copy.deepcopy(registration)

    def _where(self, predicate) -> list[Registration]:  # type: ignore[no-untyped-def]
        return [
            copy.deepcopy(r) for r in self._store.registrations.values() if predicate(r)
        ]
