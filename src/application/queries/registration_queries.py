"""Registration queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListRegistrationsByUser:
    """All of a user's registrations, cancelled ones included (full history)."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListRegistrationsByEvent:
    """All of an event's registrations, cancelled ones included (full history)."""

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListActiveRegistrationsWithEvent:
    """Dashboard projection: CONFIRMED or WAITLISTED registrations with their events.

    Pairs whose event is missing or cancelled are dropped.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListConfirmedRegistrationsWithEvent:
    """Dashboard projection: CONFIRMED registrations with their events.

    Pairs whose event is missing or cancelled are dropped.
    """

    user_id: UUID
