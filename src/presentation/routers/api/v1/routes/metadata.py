"""Route metadata types for the API Route Registry.

The registry is the single source of truth for all API routes; the
generator turns these declarations into FastAPI routes, auth dependencies
and OpenAPI metadata.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, auth, etc.)
    HTTPMethod: HTTP method enum (GET, POST, PATCH, PUT, DELETE)
    AuthPolicy: Authentication policy (PUBLIC, AUTHENTICATED, ROLES)
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from src.domain.enums.user_role import UserRole


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# =============================================================================
# Authentication Policy
# =============================================================================


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication required (event catalog reads)
        AUTHENTICATED: Requires valid JWT (any role)
        ROLES: Requires valid JWT holding one of AuthPolicy.roles
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ROLES = "roles"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Ownership (owner organizer or admin) is not expressible here; routes
    that need it call EventOwnershipPolicy themselves and say so in
    `rationale`.

    Attributes:
        level: Authentication level
        roles: Accepted roles when level is ROLES
        rationale: Optional note on additional checks done in the route

    Examples:
        >>> AuthPolicy(level=AuthLevel.PUBLIC)
        >>> AuthPolicy(
        ...     level=AuthLevel.ROLES,
        ...     roles=(UserRole.ORGANIZER, UserRole.ADMIN),
        ... )
    """

    level: AuthLevel
    roles: tuple[UserRole, ...] = ()
    rationale: str | None = None


# =============================================================================
# Idempotency Level
# =============================================================================


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification (RFC 7231 Section 4.2).

    Attributes:
        SAFE: No side effects (GET)
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE)
        NON_IDEMPOTENT: Side effects, not repeatable (POST, PATCH)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


# =============================================================================
# Error Specification
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 404, 409, 410)
        description: Human-readable error description
        model: Optional Pydantic model for response (defaults to ProblemDetails)
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


# =============================================================================
# Route Metadata (SSOT)
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route (Single Source of Truth).

    Identity fields:
        method: HTTP method (GET, POST, etc.)
        path: URL path relative to the v1 prefix (e.g., "/events/{event_id}")
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "events", "registrations")
        tags: OpenAPI tags (e.g., ["Events"])

    OpenAPI documentation:
        summary: Short endpoint description
        description: Detailed endpoint description
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Pydantic model for success response
        status_code: Expected success status (e.g., 200, 201)
        errors: List of possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level
        auth_policy: Authentication policy
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    auth_policy: AuthPolicy

    # Deprecation
    deprecated: bool = False
