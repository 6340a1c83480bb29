"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import EventCreateRequest, RegistrationResponse
"""

from src.schemas.common_schemas import PaginatedMeta
from src.schemas.event_schemas import (
    CancellationResumeResponse,
    CategoryListResponse,
    EventCancellationResponse,
    EventCreateRequest,
    EventListResponse,
    EventResponse,
    EventStatusUpdateRequest,
    EventUpdateRequest,
    LocationSchema,
)
from src.schemas.registration_schemas import (
    AttendanceUpdateRequest,
    DashboardResponse,
    RegistrationCreateRequest,
    RegistrationListResponse,
    RegistrationResponse,
    RegistrationUpdateRequest,
    RegistrationWithEventResponse,
    WaitlistPromotionResponse,
)

__all__ = [
    # Common
    "PaginatedMeta",
    # Events
    "CancellationResumeResponse",
    "CategoryListResponse",
    "EventCancellationResponse",
    "EventCreateRequest",
    "EventListResponse",
    "EventResponse",
    "EventStatusUpdateRequest",
    "EventUpdateRequest",
    "LocationSchema",
    # Registrations
    "AttendanceUpdateRequest",
    "DashboardResponse",
    "RegistrationCreateRequest",
    "RegistrationListResponse",
    "RegistrationResponse",
    "RegistrationUpdateRequest",
    "RegistrationWithEventResponse",
    "WaitlistPromotionResponse",
]
