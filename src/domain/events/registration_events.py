"""Registration domain events.

Operational events emitted once a registration change has been persisted.

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums.registration_status import RegistrationStatus
from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class RegistrationCreated(DomainEvent):
    """User admitted to an event.

    Attributes:
        registration_id: New registration.
        event_entity_id: Event joined (named to avoid clashing with
            DomainEvent.event_id).
        user_id: Registering user.
        status: Admission outcome (CONFIRMED or WAITLISTED).
    """

    registration_id: UUID
    event_entity_id: UUID
    user_id: UUID
    status: RegistrationStatus


@dataclass(frozen=True, kw_only=True)
class RegistrationCancelled(DomainEvent):
    """Registration withdrawn by its owner.

    Not emitted again for an already-cancelled registration. Registrations
    cancelled by an event cancellation cascade are reported in aggregate by
    EventCancellationSucceeded.
    """

    registration_id: UUID
    event_entity_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class RegistrationStatusChanged(DomainEvent):
    """Registration status edited by an organizer or admin."""

    registration_id: UUID
    event_entity_id: UUID
    old_status: RegistrationStatus
    new_status: RegistrationStatus


@dataclass(frozen=True, kw_only=True)
class AttendanceMarked(DomainEvent):
    """Attendance flag recorded for a registration."""

    registration_id: UUID
    event_entity_id: UUID
    attended: bool


@dataclass(frozen=True, kw_only=True)
class WaitlistPromoted(DomainEvent):
    """Waitlisted registration confirmed by explicit FIFO promotion."""

    registration_id: UUID
    event_entity_id: UUID
    user_id: UUID
