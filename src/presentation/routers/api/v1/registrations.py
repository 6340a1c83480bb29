"""Registrations resource handlers.

Handler functions for registration lifecycle endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_registration        - Register the actor (confirmed or waitlisted)
    update_registration        - Organizer/admin status and notes edit
    cancel_registration        - Owner-only cancellation (idempotent)
    update_attendance          - Organizer/admin attendance flag
    list_user_registrations    - Full history for a user
    list_event_registrations   - Full history for an event
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.cancel_registration_handler import (
    CancelRegistrationHandler,
)
from src.application.commands.handlers.mark_attendance_handler import (
    MarkAttendanceHandler,
)
from src.application.commands.handlers.register_for_event_handler import (
    RegisterForEventHandler,
)
from src.application.commands.handlers.update_registration_handler import (
    UpdateRegistrationHandler,
)
from src.application.commands.registration_commands import (
    CancelRegistration,
    MarkAttendance,
    RegisterForEvent,
    UpdateRegistration,
)
from src.application.queries.handlers.list_registrations_handler import (
    ListRegistrationsByEventHandler,
    ListRegistrationsByUserHandler,
)
from src.application.queries.registration_queries import (
    ListRegistrationsByEvent,
    ListRegistrationsByUser,
)
from src.core.container import (
    get_cancel_registration_handler,
    get_list_registrations_by_event_handler,
    get_list_registrations_by_user_handler,
    get_mark_attendance_handler,
    get_register_for_event_handler,
    get_update_registration_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.registration_schemas import (
    AttendanceUpdateRequest,
    RegistrationCreateRequest,
    RegistrationListResponse,
    RegistrationResponse,
    RegistrationUpdateRequest,
)

RegistrationId = Annotated[UUID, Path(description="Registration UUID")]


# =============================================================================
# Handlers
# =============================================================================


async def create_registration(
    request: Request,
    data: RegistrationCreateRequest,
    current_user: AuthenticatedUser,
    handler: RegisterForEventHandler = Depends(get_register_for_event_handler),
) -> RegistrationResponse | JSONResponse:
    """Register the authenticated user for an event.

    POST /api/v1/registrations → 201 Created

    The registration is confirmed while the event has capacity, otherwise
    waitlisted.

    Returns:
        RegistrationResponse with the admitted status.
        JSONResponse 404 (event missing), 410 (event cancelled) or
        409 (duplicate, closed, unpublished).
    """
    result = await handler.handle(
        RegisterForEvent(
            user_id=current_user.user_id,
            event_id=data.event_id,
            notes=data.notes,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RegistrationResponse.from_entity(result.value)


async def update_registration(
    request: Request,
    registration_id: RegistrationId,
    data: RegistrationUpdateRequest,
    handler: UpdateRegistrationHandler = Depends(get_update_registration_handler),
) -> RegistrationResponse | JSONResponse:
    """Edit a registration's status and notes.

    PUT /api/v1/registrations/{registration_id} → 200 OK

    Cancelled registrations cannot be reactivated (409).
    """
    result = await handler.handle(
        UpdateRegistration(
            registration_id=registration_id,
            status=data.status,
            notes=data.notes,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RegistrationResponse.from_entity(result.value)


async def cancel_registration(
    request: Request,
    registration_id: RegistrationId,
    current_user: AuthenticatedUser,
    handler: CancelRegistrationHandler = Depends(get_cancel_registration_handler),
) -> RegistrationResponse | JSONResponse:
    """Cancel the actor's own registration.

    DELETE /api/v1/registrations/{registration_id} → 200 OK

    Only the registering user may cancel, whatever their roles (403
    otherwise). Cancelling twice succeeds.
    """
    result = await handler.handle(
        CancelRegistration(
            registration_id=registration_id,
            acting_user_id=current_user.user_id,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RegistrationResponse.from_entity(result.value)


async def update_attendance(
    request: Request,
    registration_id: RegistrationId,
    data: AttendanceUpdateRequest,
    handler: MarkAttendanceHandler = Depends(get_mark_attendance_handler),
) -> RegistrationResponse | JSONResponse:
    """Record whether the attendee showed up.

    PATCH /api/v1/registrations/{registration_id}/attendance → 200 OK
    """
    result = await handler.handle(
        MarkAttendance(registration_id=registration_id, attended=data.attended)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RegistrationResponse.from_entity(result.value)


async def list_user_registrations(
    request: Request,
    user_id: Annotated[UUID, Path(description="User UUID")],
    handler: ListRegistrationsByUserHandler = Depends(
        get_list_registrations_by_user_handler
    ),
) -> RegistrationListResponse | JSONResponse:
    """List every registration of a user, cancelled ones included.

    GET /api/v1/users/{user_id}/registrations → 200 OK
    """
    result = await handler.handle(ListRegistrationsByUser(user_id=user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RegistrationListResponse.from_entities(result.value)


async def list_event_registrations(
    request: Request,
    event_id: Annotated[UUID, Path(description="Event UUID")],
    handler: ListRegistrationsByEventHandler = Depends(
        get_list_registrations_by_event_handler
    ),
) -> RegistrationListResponse | JSONResponse:
    """List every registration of an event, cancelled ones included.

    GET /api/v1/events/{event_id}/registrations → 200 OK
    """
    result = await handler.handle(ListRegistrationsByEvent(event_id=event_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RegistrationListResponse.from_entities(result.value)
