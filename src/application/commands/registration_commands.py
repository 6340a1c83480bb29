"""Registration commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums.registration_status import RegistrationStatus


@dataclass(frozen=True, kw_only=True)
class RegisterForEvent:
    """Join an event; admission decides CONFIRMED or WAITLISTED.

    State Transition: ∅ → CONFIRMED | WAITLISTED

    Attributes:
        user_id: Acting user (becomes the registration's user).
        event_id: Event to join.
        notes: Optional free text.

    Example:
        >>> command = RegisterForEvent(user_id=user_id, event_id=event_id)
        >>> result = await handler.handle(command)
        >>> result.value.status
        <RegistrationStatus.CONFIRMED: 'confirmed'>
    """

    user_id: UUID
    event_id: UUID
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateRegistration:
    """Organizer/admin edit of a registration's status and notes.

    Attributes:
        registration_id: Registration to update.
        status: Target status (transition table enforced).
        notes: Replacement notes (None clears them).
    """

    registration_id: UUID
    status: RegistrationStatus
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class CancelRegistration:
    """Withdraw a registration. Only its own user may cancel it.

    Idempotent: cancelling an already-cancelled registration succeeds.

    Attributes:
        registration_id: Registration to cancel.
        acting_user_id: User requesting cancellation (ownership check).
    """

    registration_id: UUID
    acting_user_id: UUID


@dataclass(frozen=True, kw_only=True)
class MarkAttendance:
    """Record whether the registered user attended.

    Attributes:
        registration_id: Registration to update.
        attended: Attendance flag.
    """

    registration_id: UUID
    attended: bool


@dataclass(frozen=True, kw_only=True)
class PromoteWaitlist:
    """Explicitly promote waitlisted registrations into free capacity.

    Promotion is FIFO by registration_date and stops when the event is full.
    Never triggered automatically by cancellations.

    Attributes:
        event_id: Event whose waitlist to promote.
    """

    event_id: UUID
