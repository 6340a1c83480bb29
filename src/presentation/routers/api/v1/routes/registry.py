"""API Route Registry - Single Source of Truth for all routes.

This module contains ROUTE_REGISTRY, the authoritative list of all API endpoints.
The registry is used to generate FastAPI routes, auth dependencies, and
OpenAPI metadata at application startup.

Registry structure:
    - 17 endpoints across 5 resource categories
    - Each entry is a RouteMetadata instance with complete specification
    - Handlers reference actual functions from router modules
    - Auth policies explicitly declared (PUBLIC, AUTHENTICATED, ROLES)
    - Event ownership (owner organizer or admin) is checked inside the
      handler because it needs the stored event

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.domain.enums.user_role import UserRole
from src.presentation.routers.api.v1.admin.event_cancellations import (
    resume_event_cancellations,
)
from src.presentation.routers.api.v1.dashboard import get_dashboard_registrations
from src.presentation.routers.api.v1.events import (
    cancel_event,
    create_event,
    get_event,
    list_categories,
    list_events,
    list_organizer_events,
    promote_waitlist,
    update_event,
    update_event_status,
)
from src.presentation.routers.api.v1.registrations import (
    cancel_registration,
    create_registration,
    list_event_registrations,
    list_user_registrations,
    update_attendance,
    update_registration,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.event_schemas import (
    CancellationResumeResponse,
    CategoryListResponse,
    EventCancellationResponse,
    EventListResponse,
    EventResponse,
)
from src.schemas.registration_schemas import (
    DashboardResponse,
    RegistrationListResponse,
    RegistrationResponse,
    WaitlistPromotionResponse,
)

_ORGANIZER_OR_ADMIN = AuthPolicy(
    level=AuthLevel.ROLES,
    roles=(UserRole.ORGANIZER, UserRole.ADMIN),
)
_OWNER_OR_ADMIN = AuthPolicy(
    level=AuthLevel.AUTHENTICATED,
    rationale="Owner organizer or admin, checked against the stored event",
)

# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Events Resource (9 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events",
        handler=create_event,
        resource="events",
        tags=["Events"],
        summary="Create event",
        description="Create a PUBLISHED event owned by the authenticated organizer.",
        operation_id="create_event",
        response_model=EventResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Invalid event fields"),
            ErrorSpec(status=401, description="Not authenticated"),
            ErrorSpec(status=403, description="Organizer or admin role required"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_ORGANIZER_OR_ADMIN,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events",
        handler=list_events,
        resource="events",
        tags=["Events"],
        summary="List events",
        description="Page through events that are not cancelled.",
        operation_id="list_events",
        response_model=EventListResponse,
        errors=[ErrorSpec(status=400, description="Invalid page or size")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    ),
    # Must precede /events/{event_id} so "categories" is not parsed as an id.
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/categories",
        handler=list_categories,
        resource="events",
        tags=["Events"],
        summary="List event categories",
        operation_id="list_event_categories",
        response_model=CategoryListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}",
        handler=get_event,
        resource="events",
        tags=["Events"],
        summary="Get event",
        description="Get one event with its confirmed registration count.",
        operation_id="get_event",
        response_model=EventResponse,
        errors=[
            ErrorSpec(status=404, description="Event not found"),
            ErrorSpec(status=410, description="Event cancelled"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/events/{event_id}",
        handler=update_event,
        resource="events",
        tags=["Events"],
        summary="Update event",
        description="Overwrite the descriptive fields and location of an event.",
        operation_id="update_event",
        response_model=EventResponse,
        errors=[
            ErrorSpec(status=400, description="Invalid event fields"),
            ErrorSpec(status=403, description="Not the event owner or an admin"),
            ErrorSpec(status=404, description="Event not found"),
            ErrorSpec(status=410, description="Event cancelled"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_OWNER_OR_ADMIN,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/events/{event_id}/status",
        handler=update_event_status,
        resource="events",
        tags=["Events"],
        summary="Update event status",
        description=(
            "Move an event along DRAFT -> PUBLISHED -> CANCELLED. "
            "CANCELLED runs the registration cascade."
        ),
        operation_id="update_event_status",
        response_model=EventResponse,
        errors=[
            ErrorSpec(status=403, description="Not the event owner or an admin"),
            ErrorSpec(status=404, description="Event not found"),
            ErrorSpec(status=409, description="Transition not allowed"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_OWNER_OR_ADMIN,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/events/{event_id}",
        handler=cancel_event,
        resource="events",
        tags=["Events"],
        summary="Cancel event",
        description=(
            "Soft-delete: cancel every live registration, then mark the "
            "event CANCELLED. Repeating the call is a no-op."
        ),
        operation_id="cancel_event",
        response_model=EventCancellationResponse,
        errors=[
            ErrorSpec(status=403, description="Not the event owner or an admin"),
            ErrorSpec(status=404, description="Event not found"),
            ErrorSpec(status=503, description="Storage failure during cascade"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_OWNER_OR_ADMIN,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/waitlist-promotions",
        handler=promote_waitlist,
        resource="events",
        tags=["Events"],
        summary="Promote waitlist",
        description="Confirm waitlisted registrations in arrival order while seats remain.",
        operation_id="promote_event_waitlist",
        response_model=WaitlistPromotionResponse,
        errors=[
            ErrorSpec(status=403, description="Not the event owner or an admin"),
            ErrorSpec(status=404, description="Event not found"),
            ErrorSpec(status=410, description="Event cancelled"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_OWNER_OR_ADMIN,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/organizers/{organizer_id}/events",
        handler=list_organizer_events,
        resource="events",
        tags=["Events"],
        summary="List organizer events",
        description="Page through an organizer's events, cancelled ones included.",
        operation_id="list_organizer_events",
        response_model=EventListResponse,
        errors=[ErrorSpec(status=400, description="Invalid page or size")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    ),
    # =========================================================================
    # Registrations Resource (6 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/registrations",
        handler=create_registration,
        resource="registrations",
        tags=["Registrations"],
        summary="Register for event",
        description="Admit the authenticated user as CONFIRMED, or WAITLISTED when full.",
        operation_id="create_registration",
        response_model=RegistrationResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=401, description="Not authenticated"),
            ErrorSpec(status=404, description="Event not found"),
            ErrorSpec(
                status=409,
                description="Already registered, event not published, or registration closed",
            ),
            ErrorSpec(status=410, description="Event cancelled"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/registrations/{registration_id}",
        handler=update_registration,
        resource="registrations",
        tags=["Registrations"],
        summary="Update registration",
        description="Switch between CONFIRMED and WAITLISTED, or cancel, and edit notes.",
        operation_id="update_registration",
        response_model=RegistrationResponse,
        errors=[
            ErrorSpec(status=403, description="Organizer or admin role required"),
            ErrorSpec(status=404, description="Registration not found"),
            ErrorSpec(status=409, description="Registration already cancelled"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_ORGANIZER_OR_ADMIN,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/registrations/{registration_id}",
        handler=cancel_registration,
        resource="registrations",
        tags=["Registrations"],
        summary="Cancel registration",
        description="Cancel the caller's own registration. Repeating the call is a no-op.",
        operation_id="cancel_registration",
        response_model=RegistrationResponse,
        errors=[
            ErrorSpec(status=403, description="Registration belongs to another user"),
            ErrorSpec(status=404, description="Registration not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Ownership is enforced by the cancellation handler",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/registrations/{registration_id}/attendance",
        handler=update_attendance,
        resource="registrations",
        tags=["Registrations"],
        summary="Mark attendance",
        operation_id="update_registration_attendance",
        response_model=RegistrationResponse,
        errors=[
            ErrorSpec(status=403, description="Organizer or admin role required"),
            ErrorSpec(status=404, description="Registration not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_ORGANIZER_OR_ADMIN,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/{user_id}/registrations",
        handler=list_user_registrations,
        resource="registrations",
        tags=["Registrations"],
        summary="List user registrations",
        operation_id="list_user_registrations",
        response_model=RegistrationListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}/registrations",
        handler=list_event_registrations,
        resource="registrations",
        tags=["Registrations"],
        summary="List event registrations",
        operation_id="list_event_registrations",
        response_model=RegistrationListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    # =========================================================================
    # Dashboard Resource (1 endpoint)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/dashboard/registrations",
        handler=get_dashboard_registrations,
        resource="dashboard",
        tags=["Dashboard"],
        summary="Dashboard registrations",
        description=(
            "The caller's active (confirmed or waitlisted) or confirmed "
            "registrations, each with its event."
        ),
        operation_id="get_dashboard_registrations",
        response_model=DashboardResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    # =========================================================================
    # Admin Resource (1 endpoint)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/admin/event-cancellations/resumptions",
        handler=resume_event_cancellations,
        resource="admin",
        tags=["Admin"],
        summary="Resume event cancellations",
        description="Finish cancellation cascades that stopped part way.",
        operation_id="resume_event_cancellations",
        response_model=CancellationResumeResponse,
        errors=[
            ErrorSpec(status=403, description="Admin role required"),
            ErrorSpec(status=503, description="Storage failure during cascade"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.ROLES, roles=(UserRole.ADMIN,)),
    ),
]
