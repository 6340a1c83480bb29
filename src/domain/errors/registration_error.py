"""Registration domain errors.

Usage:
    from src.domain.errors import RegistrationError
    from src.core.result import Failure

    return Failure(error=RegistrationError.INVALID_TRANSITION)
"""


class RegistrationError:
    """Registration error constants.

    Error Categories:
        - Admission errors: ALREADY_REGISTERED
        - Ownership errors: NOT_OWNER
        - State errors: INVALID_TRANSITION
    """

    REGISTRATION_NOT_FOUND = "Registration not found"

    ALREADY_REGISTERED = "User already has an active registration for this event"
    """At most one non-cancelled registration per (event, user) pair."""

    NOT_OWNER = "Only the registering user can cancel this registration"

    INVALID_TRANSITION = "Registration status transition is not allowed"
    """Cancellation is terminal; a cancelled registration cannot be re-activated."""
