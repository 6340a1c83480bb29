"""Dashboard resource handlers.

Read-only projections of the actor's registrations paired with their
events. Registrations whose event is missing or cancelled are left out.
"""

from enum import Enum
from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.queries.handlers.registration_projection_handler import (
    ListActiveRegistrationsWithEventHandler,
    ListConfirmedRegistrationsWithEventHandler,
)
from src.application.queries.registration_queries import (
    ListActiveRegistrationsWithEvent,
    ListConfirmedRegistrationsWithEvent,
)
from src.core.container import (
    get_list_active_registrations_handler,
    get_list_confirmed_registrations_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.registration_schemas import (
    DashboardResponse,
    RegistrationWithEventResponse,
)


class DashboardScope(str, Enum):
    """Which registrations the dashboard shows."""

    ACTIVE = "active"  # confirmed or waitlisted
    CONFIRMED = "confirmed"


async def get_dashboard_registrations(
    request: Request,
    current_user: AuthenticatedUser,
    scope: Annotated[
        DashboardScope, Query(description="active or confirmed")
    ] = DashboardScope.ACTIVE,
    active_handler: ListActiveRegistrationsWithEventHandler = Depends(
        get_list_active_registrations_handler
    ),
    confirmed_handler: ListConfirmedRegistrationsWithEventHandler = Depends(
        get_list_confirmed_registrations_handler
    ),
) -> DashboardResponse | JSONResponse:
    """List the actor's registrations with their events.

    GET /api/v1/dashboard/registrations?scope=active|confirmed → 200 OK
    """
    if scope is DashboardScope.CONFIRMED:
        result = await confirmed_handler.handle(
            ListConfirmedRegistrationsWithEvent(user_id=current_user.user_id)
        )
    else:
        result = await active_handler.handle(
            ListActiveRegistrationsWithEvent(user_id=current_user.user_id)
        )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    items = [RegistrationWithEventResponse.from_dto(dto) for dto in result.value]
    return DashboardResponse(scope=scope.value, items=items, total_count=len(items))
