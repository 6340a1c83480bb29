"""Registration domain entity.

A registration joins one user to one event. It is referenced by both but
owned by neither.

State Machine:
    ∅ → {CONFIRMED, WAITLISTED} → CANCELLED (terminal)

Usage:
    from src.domain.entities import Registration

    registration = Registration.admit(
        event_id=event.id,
        user_id=user_id,
        has_capacity=True,
        notes="Vegetarian meal",
    )
    assert registration.status == RegistrationStatus.CONFIRMED
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.enums.registration_status import RegistrationStatus
from src.domain.errors.registration_error import RegistrationError


@dataclass
class Registration:
    """User's registration for an event.

    Attributes:
        id: Unique registration identifier.
        event_id: FK to Event.
        user_id: FK to the registering user.
        status: CONFIRMED, WAITLISTED or CANCELLED.
        registration_date: When the admission decision was made. Orders the
            waitlist for explicit FIFO promotion.
        notes: Optional free text from the attendee.
        attended: Attendance flag set by organizers (default False).
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    event_id: UUID
    user_id: UUID
    status: RegistrationStatus
    registration_date: datetime = field(default_factory=lambda: datetime.now(UTC))
    notes: str | None = None
    attended: bool = False

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def admit(
        cls,
        *,
        event_id: UUID,
        user_id: UUID,
        has_capacity: bool,
        notes: str | None = None,
    ) -> "Registration":
        """Create a registration from an admission decision.

        Args:
            event_id: Event being joined.
            user_id: Registering user.
            has_capacity: Result of the capacity check for the event.
            notes: Optional free text.

        Returns:
            New CONFIRMED registration if there was room, WAITLISTED otherwise.
        """
        now = datetime.now(UTC)
        return cls(
            id=uuid7(),
            event_id=event_id,
            user_id=user_id,
            status=(
                RegistrationStatus.CONFIRMED
                if has_capacity
                else RegistrationStatus.WAITLISTED
            ),
            registration_date=now,
            notes=notes,
            attended=False,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def is_active(self) -> bool:
        """Check if registration is not cancelled."""
        return self.status.is_active()

    def is_confirmed(self) -> bool:
        """Check if registration holds a capacity slot."""
        return self.status == RegistrationStatus.CONFIRMED

    def belongs_to(self, user_id: UUID) -> bool:
        """Check if user is the registering user."""
        return self.user_id == user_id

    # -------------------------------------------------------------------------
    # State Transitions
    # -------------------------------------------------------------------------

    def cancel(self) -> bool:
        """Move to CANCELLED.

        Idempotent. Callers enforce ownership where it applies; the event
        cancellation cascade calls this directly without an ownership check.

        Returns:
            True if the status changed, False if already cancelled.
        """
        if self.status == RegistrationStatus.CANCELLED:
            return False
        self.status = RegistrationStatus.CANCELLED
        self.updated_at = datetime.now(UTC)
        return True

    def update(
        self, new_status: RegistrationStatus, notes: str | None
    ) -> Result[None, str]:
        """Set status and overwrite notes, honoring the transition table.

        Args:
            new_status: Requested status.
            notes: Replacement notes (None clears them).

        Returns:
            Success(None): Registration updated.
            Failure(error): Transition not allowed (e.g. out of CANCELLED).
        """
        if not self.status.can_transition_to(new_status):
            return Failure(error=RegistrationError.INVALID_TRANSITION)

        self.status = new_status
        self.notes = notes
        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def promote(self) -> Result[None, str]:
        """Move from WAITLISTED to CONFIRMED.

        Returns:
            Success(None): Registration confirmed.
            Failure(error): Registration is not waitlisted.
        """
        if self.status != RegistrationStatus.WAITLISTED:
            return Failure(error=RegistrationError.INVALID_TRANSITION)

        self.status = RegistrationStatus.CONFIRMED
        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def mark_attendance(self, attended: bool) -> None:
        """Record whether the user attended."""
        self.attended = attended
        self.updated_at = datetime.now(UTC)
