"""Common error classes used across the engine.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Referenced Event/Registration id does not resolve
- GoneError: Resource exists but is retired (cancelled); readers treat it
  as absent
- ConflictError: Duplicate active registration, closed registration window
- InvalidTransitionError: Status edge not present in the transition table
- AuthorizationError: Actor does not own the resource (Forbidden)
- StorageError: The store could not complete a read or write

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.EVENT_NOT_FOUND,
        message="Event not found",
        resource_type="Event",
        resource_id=str(event_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Event, Registration).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class GoneError(DomainError):
    """Resource exists but has been retired (soft-deleted).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Event).
        resource_id: ID of the retired resource.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (status, event_id, etc.).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidTransitionError(ConflictError):
    """Requested status change is not an allowed edge.

    Attributes:
        from_status: Current status value.
        to_status: Requested status value.
    """

    from_status: str
    to_status: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (actor does not own the resource).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Permission that was required.
        details: Additional context.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageError(DomainError):
    """The underlying store failed to complete an operation.

    Always surfaced to the caller, which decides whether to retry.

    Attributes:
        operation: Short description of the failed operation.
    """

    operation: str
