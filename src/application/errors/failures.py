"""Constructors for the domain errors handlers return most often.

Keeps error codes, messages, and resource naming consistent across
command and query handlers.
"""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import (
    GoneError,
    InvalidTransitionError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from src.domain.errors import EventError, RegistrationError


def event_not_found(event_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.EVENT_NOT_FOUND,
        message=EventError.EVENT_NOT_FOUND,
        resource_type="Event",
        resource_id=str(event_id),
    )


def event_gone(event_id: UUID) -> GoneError:
    return GoneError(
        code=ErrorCode.EVENT_CANCELLED,
        message=EventError.EVENT_CANCELLED,
        resource_type="Event",
        resource_id=str(event_id),
    )


def registration_not_found(registration_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.REGISTRATION_NOT_FOUND,
        message=RegistrationError.REGISTRATION_NOT_FOUND,
        resource_type="Registration",
        resource_id=str(registration_id),
    )


def invalid_event_fields(message: str) -> ValidationError:
    return ValidationError(code=ErrorCode.INVALID_EVENT_FIELDS, message=message)


def invalid_transition(
    resource_type: str, message: str, from_status: str, to_status: str
) -> InvalidTransitionError:
    return InvalidTransitionError(
        code=ErrorCode.INVALID_STATUS_TRANSITION,
        message=message,
        resource_type=resource_type,
        conflicting_field="status",
        from_status=from_status,
        to_status=to_status,
    )


def storage_failure(operation: str, error: Exception) -> StorageError:
    """Wrap a persistence exception as a StorageError.

    Args:
        operation: What the handler was doing (e.g. "save registration").
        error: The exception raised by the repository.
    """
    return StorageError(
        code=ErrorCode.STORAGE_FAILURE,
        message=f"Storage failure during {operation}",
        operation=operation,
        details={"error_type": type(error).__name__, "reason": str(error)},
    )
