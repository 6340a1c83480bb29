"""Event commands (CQRS write operations).

Commands represent intent to change event state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types

Authorization (organizer role, owner-or-admin) is checked by the
presentation layer before a command is dispatched.
"""

from dataclasses import dataclass
from uuid import UUID

from src.application.dtos.event_dtos import EventDetails
from src.domain.enums.event_status import EventStatus


@dataclass(frozen=True, kw_only=True)
class CreateEvent:
    """Create an event owned by the acting organizer.

    State Transition: ∅ → PUBLISHED

    Attributes:
        organizer_id: Acting organizer (becomes owner).
        details: Descriptive fields, location and capacity.

    Example:
        >>> command = CreateEvent(organizer_id=user_id, details=details)
        >>> result = await handler.handle(command)
    """

    organizer_id: UUID
    details: EventDetails


@dataclass(frozen=True, kw_only=True)
class UpdateEvent:
    """Overwrite an event's descriptive fields and location.

    Attributes:
        event_id: Event to update.
        details: Replacement fields (all overwritten).
    """

    event_id: UUID
    details: EventDetails


@dataclass(frozen=True, kw_only=True)
class UpdateEventStatus:
    """Set an event's status by name, honoring the transition table.

    Setting CANCELLED runs the full cancellation cascade.

    Attributes:
        event_id: Event to update.
        status: Target status.
    """

    event_id: UUID
    status: EventStatus


@dataclass(frozen=True, kw_only=True)
class CancelEvent:
    """Soft-delete an event and cascade to its registrations.

    State Transition: DRAFT/PUBLISHED → CANCELLED (idempotent)

    Attributes:
        event_id: Event to cancel.
    """

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class ResumeEventCancellations:
    """Complete cancellation cascades that were interrupted.

    Finds events whose cancellation marker is set but whose status is not
    yet CANCELLED, and re-runs their cascades.
    """
