"""Authorization dependencies (roles and event ownership).

Role checks gate role-restricted routes before any handler runs.
EventOwnershipPolicy implements "owner organizer or admin" for event
mutations; the engine itself only enforces registration ownership on
cancellation.

Usage:
    # Role gate (route dependency)
    dependencies=[Depends(require_roles(UserRole.ORGANIZER, UserRole.ADMIN))]

    # Ownership (inside the route function)
    denied = await policy.check(current_user, event_id)
"""

from collections.abc import Awaitable, Callable
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status

from src.application.errors.failures import event_not_found, storage_failure
from src.core.container import get_event_repository
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError
from src.domain.enums.user_role import UserRole
from src.domain.protocols.event_repository import EventRepository
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)


def require_roles(*roles: UserRole) -> Callable[..., Awaitable[CurrentUser]]:
    """Create a dependency that requires any of the given roles.

    Args:
        *roles: Roles where the actor must hold at least one.

    Returns:
        Dependency function returning the CurrentUser.

    Raises:
        HTTPException 403: If the actor holds none of the roles.
    """

    async def role_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if not current_user.has_role(*roles):
            names = ", ".join(role.value for role in roles)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"One of roles [{names}] required",
            )
        return current_user

    return role_checker


class EventOwnershipPolicy:
    """Owner-organizer-or-admin check for event mutations.

    Admins always pass. Otherwise the actor must be the event's organizer.
    A missing event is reported as NotFound so the route answers 404
    rather than 403.
    """

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    async def check(self, user: CurrentUser, event_id: UUID) -> DomainError | None:
        """Return None when allowed, otherwise the error to report."""
        if user.is_admin:
            return None

        try:
            event = await self._event_repo.find_by_id(event_id)
        except Exception as e:
            return storage_failure("load event", e)
        if event is None:
            return event_not_found(event_id)
        if event.is_owned_by(user.user_id):
            return None

        return AuthorizationError(
            code=ErrorCode.PERMISSION_DENIED,
            message="Only the event organizer or an admin may modify this event",
            required_permission="event_owner",
        )


async def get_event_ownership_policy(
    event_repo: EventRepository = Depends(get_event_repository),
) -> EventOwnershipPolicy:
    """Get event ownership policy (request-scoped, shares the request session)."""
    return EventOwnershipPolicy(event_repo=event_repo)
