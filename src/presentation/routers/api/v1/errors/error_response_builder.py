"""Error response builder for RFC 7807 Problem Details.

This module builds RFC 7807 compliant error responses from domain errors
returned by command/query handlers.

Mapping:
    DomainError → ApplicationError → ProblemDetails (JSON)

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    GoneError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# Most specific class first (InvalidTransitionError is a ConflictError)
_DOMAIN_TO_APPLICATION: tuple[tuple[type[DomainError], ApplicationErrorCode], ...] = (
    (ValidationError, ApplicationErrorCode.COMMAND_VALIDATION_FAILED),
    (NotFoundError, ApplicationErrorCode.NOT_FOUND),
    (GoneError, ApplicationErrorCode.GONE),
    (ConflictError, ApplicationErrorCode.CONFLICT),
    (AuthorizationError, ApplicationErrorCode.FORBIDDEN),
    (StorageError, ApplicationErrorCode.SERVICE_UNAVAILABLE),
)


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> result = await handler.handle(query)
        >>> if isinstance(result, Failure):
        ...     return ErrorResponseBuilder.from_domain_error(
        ...         error=result.error,
        ...         request=request,
        ...         trace_id=get_trace_id() or "",
        ...     )
    """

    @staticmethod
    def to_application_error(error: DomainError) -> ApplicationError:
        """Wrap a domain error in the matching ApplicationError.

        Args:
            error: Domain error returned by a handler.

        Returns:
            ApplicationError carrying the original domain error.
        """
        code = next(
            (
                app_code
                for error_type, app_code in _DOMAIN_TO_APPLICATION
                if isinstance(error, error_type)
            ),
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
        )
        return ApplicationError(
            code=code,
            message=error.message,
            domain_error=error,
            details=error.details,
        )

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert DomainError to RFC 7807 JSON response."""
        return ErrorResponseBuilder.from_application_error(
            error=ErrorResponseBuilder.to_application_error(error),
            request=request,
            trace_id=trace_id,
        )

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 7807 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 7807 ProblemDetails content
        """
        status_code = ErrorResponseBuilder._get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder._get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        # Field-specific and code-specific detail from the domain error
        domain_error = error.domain_error
        if domain_error is not None:
            problem.code = domain_error.code.value
            if isinstance(domain_error, ValidationError):
                problem.errors = [
                    ErrorDetail(
                        field=domain_error.field or "unknown",
                        code=domain_error.code.value,
                        message=domain_error.message,
                    )
                ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(mode="json", exclude_none=True),
        )

    @staticmethod
    def _get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(ApplicationErrorCode.GONE)
            410
        """
        mapping = {
            ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ApplicationErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
            ApplicationErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
            ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
            ApplicationErrorCode.GONE: status.HTTP_410_GONE,
            ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
            ApplicationErrorCode.SERVICE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
        }
        return mapping.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def _get_title(code: ApplicationErrorCode) -> str:
        """Get human-readable title for application error code."""
        mapping = {
            ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED: "Command Execution Failed",
            ApplicationErrorCode.QUERY_FAILED: "Query Failed",
            ApplicationErrorCode.UNAUTHORIZED: "Authentication Required",
            ApplicationErrorCode.FORBIDDEN: "Access Denied",
            ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
            ApplicationErrorCode.GONE: "Resource Gone",
            ApplicationErrorCode.CONFLICT: "Resource Conflict",
            ApplicationErrorCode.SERVICE_UNAVAILABLE: "Service Unavailable",
        }
        return mapping.get(code, "Internal Server Error")
