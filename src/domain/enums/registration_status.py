"""Registration lifecycle states.

State Machine:
    ∅ → {CONFIRMED, WAITLISTED} → CANCELLED (terminal)

    CONFIRMED ↔ WAITLISTED only through an explicit status update
    (organizer/admin) or an explicit waitlist promotion. Never automatic.

Usage:
    from src.domain.enums import RegistrationStatus

    if registration.status.is_active():
        ...
"""

from enum import Enum


class RegistrationStatus(str, Enum):
    """Registration lifecycle states.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase for consistency.
    """

    CONFIRMED = "confirmed"
    """Holds one of the event's capacity slots."""

    WAITLISTED = "waitlisted"
    """Admitted while the event was at capacity; holds no slot."""

    CANCELLED = "cancelled"
    """Withdrawn by the user or cascaded from event cancellation (terminal)."""

    def is_active(self) -> bool:
        """Check if registration still counts as active (not cancelled)."""
        return self != RegistrationStatus.CANCELLED

    def can_transition_to(self, target: "RegistrationStatus") -> bool:
        """Check whether moving from this status to target is allowed.

        Args:
            target: Requested status.

        Returns:
            bool: True if the edge exists in the transition table.
        """
        return target in _REGISTRATION_TRANSITIONS[self]


_REGISTRATION_TRANSITIONS: dict[RegistrationStatus, frozenset[RegistrationStatus]] = {
    RegistrationStatus.CONFIRMED: frozenset(RegistrationStatus),
    RegistrationStatus.WAITLISTED: frozenset(RegistrationStatus),
    RegistrationStatus.CANCELLED: frozenset({RegistrationStatus.CANCELLED}),
}
