"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating Bearer access tokens.
Tokens are minted by the identity service in front of this API; only the
`sub` (user id) and `roles` claims are read here.

Usage:
    # Protected route (requires auth)
    async def protected_route(current_user: AuthenticatedUser):
        return {"user_id": str(current_user.user_id)}
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.enums.user_role import UserRole
from src.domain.protocols.token_validation_protocol import TokenValidationProtocol

# HTTP Bearer token extractor
# auto_error=False so a missing header gets the same RFC 7807 401 as a bad token
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated actor extracted from the access token.

    Attributes:
        user_id: Actor's unique identifier (from JWT 'sub' claim).
        roles: Recognized roles (from JWT 'roles' claim); unknown role names
            are ignored. Tokens without roles are treated as attendees.
    """

    user_id: UUID
    roles: frozenset[UserRole]

    def has_role(self, *roles: UserRole) -> bool:
        """Check if the actor holds at least one of the given roles."""
        return any(role in self.roles for role in roles)

    @property
    def is_admin(self) -> bool:
        return UserRole.ADMIN in self.roles


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _parse_roles(raw: object) -> frozenset[UserRole]:
    if not isinstance(raw, list):
        return frozenset({UserRole.ATTENDEE})
    known = {role.value: role for role in UserRole}
    roles = frozenset(known[name] for name in raw if name in known)
    return roles or frozenset({UserRole.ATTENDEE})


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenValidationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from JWT token.

    Args:
        credentials: Bearer token from Authorization header.
        token_service: JWT token service (injected).

    Returns:
        CurrentUser with actor identity from a valid JWT.

    Raises:
        HTTPException 401: If token is missing, invalid, or expired.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    result = token_service.validate_access_token(credentials.credentials)

    match result:
        case Success(value=payload):
            try:
                user_id = UUID(str(payload["sub"]))
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e
            return CurrentUser(
                user_id=user_id,
                roles=_parse_roles(payload.get("roles")),
            )

        case Failure(error=error):
            raise _unauthorized(error)

    raise _unauthorized("Invalid token")


# Type alias for cleaner route signatures
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
