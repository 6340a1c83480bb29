"""Event domain errors.

Defines event-specific error message constants for field validation,
lifecycle transitions, and visibility.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Entity construction raises ValueError with these messages; handlers
      convert them to ValidationError

Usage:
    from src.domain.errors import EventError
    from src.core.result import Failure

    if not event.status.can_transition_to(target):
        return Failure(error=EventError.INVALID_TRANSITION)
"""


class EventError:
    """Event error constants.

    Error Categories:
        - Validation errors: INVALID_TITLE, INVALID_CAPACITY, INVALID_TIME_WINDOW
        - State errors: INVALID_TRANSITION, EVENT_CANCELLED, EVENT_NOT_PUBLISHED
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_TITLE = "Event title cannot be empty"
    INVALID_DESCRIPTION = "Event description cannot be empty"

    INVALID_CAPACITY = "Event capacity must be at least 1"
    """Capacity is a positive integer; zero-capacity events cannot admit anyone."""

    INVALID_TIME_WINDOW = "Event end must be after its start"

    INVALID_LOCATION = "Event location is incomplete for its location type"
    """Physical/hybrid need address and city; online/hybrid need a virtual link."""

    # -------------------------------------------------------------------------
    # State Errors
    # -------------------------------------------------------------------------

    INVALID_TRANSITION = "Event status transition is not allowed"
    """Edge not present in the event transition table (nothing leaves CANCELLED)."""

    EVENT_NOT_FOUND = "Event not found"

    EVENT_CANCELLED = "Event has been cancelled"
    """Cancelled events are treated as absent by readers."""

    EVENT_NOT_PUBLISHED = "Event is not open for registration"

    REGISTRATION_CLOSED = "Registration deadline has passed"
