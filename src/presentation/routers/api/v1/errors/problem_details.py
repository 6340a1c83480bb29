"""RFC 7807 Problem Details for HTTP APIs.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        code: Machine-readable domain error code (extension member)
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/gone",
        ...     title="Resource Gone",
        ...     status=410,
        ...     detail="Event has been cancelled",
        ...     instance="/api/v1/events/0190...",
        ...     code="event_cancelled",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/conflict"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Resource Conflict"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[409],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["User already holds an active registration for this event"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/registrations"],
    )
    code: str | None = Field(
        None,
        description="Machine-readable domain error code",
        examples=["registration_already_exists"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
