"""Event lifecycle domain events.

Pattern: 3 events for the cancellation workflow (ATTEMPTED → SUCCEEDED/FAILED)
- *Attempted: Cascade initiated (after the cancellation marker is persisted)
- *Succeeded: Event CANCELLED and every registration cancelled
- *Failed: Cascade stopped part-way; marker remains for resumption

Creation and updates are single operational events.

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class EventCreated(DomainEvent):
    """Organizer created an event."""

    event_entity_id: UUID
    organizer_id: UUID
    title: str
    capacity: int


@dataclass(frozen=True, kw_only=True)
class EventUpdated(DomainEvent):
    """Event details or status changed (other than cancellation)."""

    event_entity_id: UUID
    status: str


# ═══════════════════════════════════════════════════════════════
# Event Cancellation (cascade)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class EventCancellationAttempted(DomainEvent):
    """Cancellation cascade started.

    Attributes:
        event_entity_id: Event being cancelled.
        resumed: True if this run completes an earlier interrupted cascade.
    """

    event_entity_id: UUID
    resumed: bool = False


@dataclass(frozen=True, kw_only=True)
class EventCancellationSucceeded(DomainEvent):
    """Event CANCELLED and all dependent registrations cancelled.

    Attributes:
        event_entity_id: Cancelled event.
        cancelled_registrations: Registrations moved to CANCELLED by this run.
    """

    event_entity_id: UUID
    cancelled_registrations: int


@dataclass(frozen=True, kw_only=True)
class EventCancellationFailed(DomainEvent):
    """Cancellation cascade interrupted by a storage failure.

    Attributes:
        event_entity_id: Event left with a pending cancellation marker.
        cancelled_registrations: Registrations cancelled before the failure.
        reason: Failure description.
    """

    event_entity_id: UUID
    cancelled_registrations: int
    reason: str
