"""Registration request and response schemas.

Pydantic schemas for registration and dashboard endpoints.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos.registration_dtos import (
    RegistrationWithEvent,
    WaitlistPromotionResult,
)
from src.domain.entities.registration import Registration
from src.domain.enums.registration_status import RegistrationStatus
from src.domain.types import RegistrationNotes
from src.schemas.event_schemas import EventResponse


# =============================================================================
# Request Schemas
# =============================================================================


class RegistrationCreateRequest(BaseModel):
    """Request to register the authenticated user for an event."""

    event_id: UUID = Field(..., description="Event to register for")
    notes: RegistrationNotes


class RegistrationUpdateRequest(BaseModel):
    """Organizer/admin status and notes edit."""

    status: RegistrationStatus = Field(
        ..., description="Target status", examples=["confirmed", "waitlisted"]
    )
    notes: RegistrationNotes


class AttendanceUpdateRequest(BaseModel):
    attended: bool = Field(..., description="Whether the attendee showed up")


# =============================================================================
# Response Schemas
# =============================================================================


class RegistrationResponse(BaseModel):
    """Single registration response."""

    id: UUID = Field(..., description="Registration unique identifier")
    event_id: UUID
    user_id: UUID
    status: RegistrationStatus
    registration_date: datetime
    notes: str | None = None
    attended: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, registration: Registration) -> "RegistrationResponse":
        """Convert domain entity to response schema.

        Args:
            registration: Registration entity.

        Returns:
            RegistrationResponse for API response.
        """
        return cls(
            id=registration.id,
            event_id=registration.event_id,
            user_id=registration.user_id,
            status=registration.status,
            registration_date=registration.registration_date,
            notes=registration.notes,
            attended=registration.attended,
            created_at=registration.created_at,
            updated_at=registration.updated_at,
        )


class RegistrationListResponse(BaseModel):
    """All registrations for a user or event (cancelled included)."""

    registrations: list[RegistrationResponse]
    total_count: int = Field(..., description="Number of registrations")

    @classmethod
    def from_entities(
        cls, registrations: list[Registration]
    ) -> "RegistrationListResponse":
        return cls(
            registrations=[RegistrationResponse.from_entity(r) for r in registrations],
            total_count=len(registrations),
        )


class RegistrationWithEventResponse(BaseModel):
    """Dashboard entry pairing a registration with its event."""

    registration: RegistrationResponse
    event: EventResponse

    @classmethod
    def from_dto(cls, dto: RegistrationWithEvent) -> "RegistrationWithEventResponse":
        return cls(
            registration=RegistrationResponse.from_entity(dto.registration),
            event=EventResponse.from_entity(dto.event),
        )


class DashboardResponse(BaseModel):
    """Registrations with their events for the authenticated user."""

    scope: str = Field(..., description="active or confirmed", examples=["active"])
    items: list[RegistrationWithEventResponse]
    total_count: int


class WaitlistPromotionResponse(BaseModel):
    """Result of an explicit waitlist promotion."""

    promoted: list[RegistrationResponse] = Field(
        ..., description="Registrations confirmed, oldest first"
    )
    remaining_waitlisted: int = Field(
        ..., description="Registrations still waiting"
    )

    @classmethod
    def from_dto(cls, dto: WaitlistPromotionResult) -> "WaitlistPromotionResponse":
        return cls(
            promoted=[RegistrationResponse.from_entity(r) for r in dto.promoted],
            remaining_waitlisted=dto.remaining_waitlisted,
        )
