"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*)
- Resource errors (*_NOT_FOUND)
- Retired resources (*_CANCELLED)
- Conflict errors (*_ALREADY_EXISTS, *_TRANSITION, *_CLOSED)
- Authorization errors (*_NOT_OWNED, PERMISSION_DENIED)
- Storage errors (STORAGE_FAILURE)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EVENT_FIELDS = "invalid_event_fields"
    INVALID_PAGE = "invalid_page"

    # Resource errors
    EVENT_NOT_FOUND = "event_not_found"
    REGISTRATION_NOT_FOUND = "registration_not_found"

    # Retired resources
    EVENT_CANCELLED = "event_cancelled"

    # Conflict errors
    REGISTRATION_ALREADY_EXISTS = "registration_already_exists"
    REGISTRATION_CLOSED = "registration_closed"
    EVENT_NOT_PUBLISHED = "event_not_published"
    INVALID_STATUS_TRANSITION = "invalid_status_transition"

    # Authorization errors
    REGISTRATION_NOT_OWNED = "registration_not_owned"
    PERMISSION_DENIED = "permission_denied"

    # Storage errors
    STORAGE_FAILURE = "storage_failure"
