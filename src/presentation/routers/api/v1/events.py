"""Events resource handlers.

Handler functions for event lifecycle endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_event          - Create event (organizer becomes owner)
    list_events           - Paginated visible events
    list_categories       - Event category catalog
    get_event             - Event details (404 missing, 410 cancelled)
    update_event          - Replace descriptive fields (owner or admin)
    update_event_status   - Change lifecycle status (owner or admin)
    cancel_event          - Soft delete with registration cascade (owner or admin)
    promote_waitlist      - FIFO waitlist promotion (owner or admin)
    list_organizer_events - Paginated visible events of one organizer
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from src.application.commands.event_commands import (
    CancelEvent,
    CreateEvent,
    UpdateEvent,
    UpdateEventStatus,
)
from src.application.commands.handlers.cancel_event_handler import (
    CancelEventHandler,
)
from src.application.commands.handlers.create_event_handler import (
    CreateEventHandler,
)
from src.application.commands.handlers.promote_waitlist_handler import (
    PromoteWaitlistHandler,
)
from src.application.commands.handlers.update_event_handler import (
    UpdateEventHandler,
)
from src.application.commands.handlers.update_event_status_handler import (
    UpdateEventStatusHandler,
)
from src.application.commands.registration_commands import PromoteWaitlist
from src.application.queries.event_queries import (
    GetEvent,
    ListCategories,
    ListEvents,
    ListEventsByOrganizer,
)
from src.application.queries.handlers.get_event_handler import GetEventHandler
from src.application.queries.handlers.list_events_handler import (
    ListCategoriesHandler,
    ListEventsByOrganizerHandler,
    ListEventsHandler,
)
from src.core.config import settings
from src.core.container import (
    get_cancel_event_handler,
    get_create_event_handler,
    get_get_event_handler,
    get_list_categories_handler,
    get_list_events_by_organizer_handler,
    get_list_events_handler,
    get_promote_waitlist_handler,
    get_update_event_handler,
    get_update_event_status_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.authorization_dependencies import (
    EventOwnershipPolicy,
    get_event_ownership_policy,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.event_schemas import (
    CategoryListResponse,
    EventCancellationResponse,
    EventCreateRequest,
    EventListResponse,
    EventResponse,
    EventStatusUpdateRequest,
    EventUpdateRequest,
)
from src.schemas.registration_schemas import WaitlistPromotionResponse

EventId = Annotated[UUID, Path(description="Event UUID")]
PageParam = Annotated[int, Query(description="Page number (1-indexed)")]
SizeParam = Annotated[int | None, Query(description="Events per page")]


# =============================================================================
# Handlers
# =============================================================================


async def create_event(
    request: Request,
    data: EventCreateRequest,
    current_user: AuthenticatedUser,
    handler: CreateEventHandler = Depends(get_create_event_handler),
) -> EventResponse | JSONResponse:
    """Create a new event owned by the acting organizer.

    POST /api/v1/events → 201 Created

    Args:
        request: FastAPI request object.
        data: Event fields (validated).
        current_user: Authenticated organizer or admin.
        handler: Create event handler (injected).

    Returns:
        EventResponse for the created event (status published).
        JSONResponse with RFC 7807 error on failure.
    """
    result = await handler.handle(
        CreateEvent(organizer_id=current_user.user_id, details=data.to_details())
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventResponse.from_dto(result.value)


async def list_events(
    request: Request,
    page: PageParam = 1,
    size: SizeParam = None,
    handler: ListEventsHandler = Depends(get_list_events_handler),
) -> EventListResponse | JSONResponse:
    """List visible (non-cancelled) events.

    GET /api/v1/events?page=&size= → 200 OK
    """
    result = await handler.handle(
        ListEvents(
            page=page,
            size=size if size is not None else settings.default_page_size,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventListResponse.from_dto(result.value)


async def list_categories(
    handler: ListCategoriesHandler = Depends(get_list_categories_handler),
) -> CategoryListResponse:
    """List event categories.

    GET /api/v1/events/categories → 200 OK
    """
    result = await handler.handle(ListCategories())
    # Static catalog; the handler cannot fail
    assert not isinstance(result, Failure)
    return CategoryListResponse(categories=result.value)


async def get_event(
    request: Request,
    event_id: EventId,
    handler: GetEventHandler = Depends(get_get_event_handler),
) -> EventResponse | JSONResponse:
    """Get a visible event by id.

    GET /api/v1/events/{event_id} → 200 OK

    Returns:
        EventResponse with registered_count.
        JSONResponse 404 if missing, 410 if cancelled.
    """
    result = await handler.handle(GetEvent(event_id=event_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventResponse.from_dto(result.value)


async def update_event(
    request: Request,
    event_id: EventId,
    data: EventUpdateRequest,
    current_user: AuthenticatedUser,
    policy: EventOwnershipPolicy = Depends(get_event_ownership_policy),
    handler: UpdateEventHandler = Depends(get_update_event_handler),
) -> EventResponse | JSONResponse:
    """Replace an event's descriptive fields.

    PUT /api/v1/events/{event_id} → 200 OK
    """
    denied = await policy.check(current_user, event_id)
    if denied is not None:
        return ErrorResponseBuilder.from_domain_error(
            error=denied,
            request=request,
            trace_id=get_trace_id() or "",
        )

    result = await handler.handle(
        UpdateEvent(event_id=event_id, details=data.to_details())
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventResponse.from_dto(result.value)


async def update_event_status(
    request: Request,
    event_id: EventId,
    data: EventStatusUpdateRequest,
    current_user: AuthenticatedUser,
    policy: EventOwnershipPolicy = Depends(get_event_ownership_policy),
    handler: UpdateEventStatusHandler = Depends(get_update_event_status_handler),
) -> EventResponse | JSONResponse:
    """Change an event's lifecycle status.

    PATCH /api/v1/events/{event_id}/status → 200 OK

    Disallowed transitions answer 409. Moving to cancelled runs the
    registration cascade.
    """
    denied = await policy.check(current_user, event_id)
    if denied is not None:
        return ErrorResponseBuilder.from_domain_error(
            error=denied,
            request=request,
            trace_id=get_trace_id() or "",
        )

    result = await handler.handle(
        UpdateEventStatus(event_id=event_id, status=data.status)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventResponse.from_dto(result.value)


async def cancel_event(
    request: Request,
    event_id: EventId,
    current_user: AuthenticatedUser,
    policy: EventOwnershipPolicy = Depends(get_event_ownership_policy),
    handler: CancelEventHandler = Depends(get_cancel_event_handler),
) -> EventCancellationResponse | JSONResponse:
    """Cancel an event (soft delete) and all of its active registrations.

    DELETE /api/v1/events/{event_id} → 200 OK

    Repeating the call on a cancelled event succeeds and cancels nothing.
    """
    denied = await policy.check(current_user, event_id)
    if denied is not None:
        return ErrorResponseBuilder.from_domain_error(
            error=denied,
            request=request,
            trace_id=get_trace_id() or "",
        )

    result = await handler.handle(CancelEvent(event_id=event_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventCancellationResponse(
        event_id=event_id, cancelled_registrations=result.value
    )


async def promote_waitlist(
    request: Request,
    event_id: EventId,
    current_user: AuthenticatedUser,
    policy: EventOwnershipPolicy = Depends(get_event_ownership_policy),
    handler: PromoteWaitlistHandler = Depends(get_promote_waitlist_handler),
) -> WaitlistPromotionResponse | JSONResponse:
    """Confirm waitlisted registrations, oldest first, while capacity remains.

    POST /api/v1/events/{event_id}/waitlist-promotions → 200 OK
    """
    denied = await policy.check(current_user, event_id)
    if denied is not None:
        return ErrorResponseBuilder.from_domain_error(
            error=denied,
            request=request,
            trace_id=get_trace_id() or "",
        )

    result = await handler.handle(PromoteWaitlist(event_id=event_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return WaitlistPromotionResponse.from_dto(result.value)


async def list_organizer_events(
    request: Request,
    organizer_id: Annotated[UUID, Path(description="Organizer user UUID")],
    page: PageParam = 1,
    size: SizeParam = None,
    handler: ListEventsByOrganizerHandler = Depends(
        get_list_events_by_organizer_handler
    ),
) -> EventListResponse | JSONResponse:
    """List an organizer's visible events.

    GET /api/v1/organizers/{organizer_id}/events → 200 OK
    """
    result = await handler.handle(
        ListEventsByOrganizer(
            organizer_id=organizer_id,
            page=page,
            size=size if size is not None else settings.default_page_size,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventListResponse.from_dto(result.value)
