"""Event lifecycle states.

State Machine:
    DRAFT → PUBLISHED → CANCELLED

    - DRAFT: Prepared but not open for registration
    - PUBLISHED: Visible and open for registration (creation default)
    - CANCELLED: Soft-deleted (terminal, never resurrected)

Usage:
    from src.domain.enums import EventStatus

    if EventStatus.PUBLISHED.can_transition_to(EventStatus.CANCELLED):
        ...
"""

from enum import Enum


class EventStatus(str, Enum):
    """Event lifecycle states.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase for consistency.

    State Transitions:
        DRAFT → PUBLISHED: Organizer publishes the event
        DRAFT → CANCELLED: Organizer drops the draft
        PUBLISHED → CANCELLED: Soft delete with cascade
        Same-state updates are accepted as no-ops, except nothing leaves
        CANCELLED.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"

    def can_transition_to(self, target: "EventStatus") -> bool:
        """Check whether moving from this status to target is allowed.

        Args:
            target: Requested status.

        Returns:
            bool: True if the edge exists in the transition table.
        """
        return target in _EVENT_TRANSITIONS[self]

    def is_terminal(self) -> bool:
        """Check if no further transitions are possible."""
        return self == EventStatus.CANCELLED


_EVENT_TRANSITIONS: dict[EventStatus, frozenset[EventStatus]] = {
    EventStatus.DRAFT: frozenset(
        {EventStatus.DRAFT, EventStatus.PUBLISHED, EventStatus.CANCELLED}
    ),
    EventStatus.PUBLISHED: frozenset({EventStatus.PUBLISHED, EventStatus.CANCELLED}),
    EventStatus.CANCELLED: frozenset({EventStatus.CANCELLED}),
}
