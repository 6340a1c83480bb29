"""Event request and response schemas.

Pydantic schemas for event API endpoints. Includes:
- Request schemas (client → API), validated with the shared annotated types
- Response schemas (API → client)
- DTO-to-schema conversion methods
"""

from datetime import datetime
from typing import Self
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from src.application.dtos.event_dtos import EventDetails, EventPage, EventSummary
from src.domain.entities.event import Event
from src.domain.enums.event_category import EventCategory
from src.domain.enums.event_status import EventStatus
from src.domain.enums.location_type import LocationType
from src.domain.types import (
    Capacity,
    EventDescription,
    EventTitle,
    FutureDatetime,
    Tags,
)
from src.domain.value_objects.location import Location
from src.schemas.common_schemas import PaginatedMeta


# =============================================================================
# Shared Components
# =============================================================================


class LocationSchema(BaseModel):
    """Event location.

    Physical and hybrid events need address and city; online and hybrid
    events need a virtual link.
    """

    type: LocationType = Field(..., description="Location type")
    address: str | None = Field(None, max_length=300, description="Street address")
    city: str | None = Field(None, max_length=120, description="City")
    country: str | None = Field(None, max_length=120, description="Country")
    virtual_link: str | None = Field(
        None,
        max_length=500,
        description="Join URL for online attendees",
        examples=["https://meet.example.com/abc"],
    )

    @model_validator(mode="after")
    def check_required_fields(self) -> Self:
        """Reject locations missing fields required by their type."""
        if self.type.requires_venue() and not (self.address and self.city):
            raise ValueError(f"{self.type.value} location requires address and city")
        if self.type.requires_virtual_link() and not self.virtual_link:
            raise ValueError(f"{self.type.value} location requires virtual_link")
        return self

    def to_value_object(self) -> Location:
        return Location(
            type=self.type,
            address=self.address,
            city=self.city,
            country=self.country,
            virtual_link=self.virtual_link,
        )

    @classmethod
    def from_value_object(cls, location: Location) -> "LocationSchema":
        return cls(
            type=location.type,
            address=location.address,
            city=location.city,
            country=location.country,
            virtual_link=location.virtual_link,
        )


# =============================================================================
# Request Schemas
# =============================================================================


class EventCreateRequest(BaseModel):
    """Request to create an event.

    Time window and registration deadline must lie in the future, and the
    event must end after it starts.
    """

    title: EventTitle
    description: EventDescription
    category: EventCategory = Field(..., description="Event category")
    start_at: FutureDatetime = Field(..., description="Start time (ISO 8601)")
    end_at: FutureDatetime = Field(..., description="End time (ISO 8601)")
    location: LocationSchema
    capacity: Capacity
    registration_deadline: FutureDatetime = Field(
        ..., description="Registrations are refused after this moment"
    )
    tags: Tags
    image_url: str | None = Field(None, max_length=500, description="Cover image URL")
    requirements: str | None = Field(
        None, max_length=2000, description="What attendees should bring or know"
    )
    agenda: str | None = Field(None, max_length=5000, description="Free-text agenda")

    @model_validator(mode="after")
    def check_time_window(self) -> Self:
        """Ensure the event ends after it starts."""
        if self.end_at <= self.start_at:
            raise ValueError("end_at must be after start_at")
        return self

    def to_details(self) -> EventDetails:
        """Convert to the application-layer EventDetails DTO."""
        return EventDetails(
            title=self.title,
            description=self.description,
            category=self.category,
            start_at=self.start_at,
            end_at=self.end_at,
            location=self.location.to_value_object(),
            capacity=self.capacity,
            registration_deadline=self.registration_deadline,
            tags=self.tags,
            image_url=self.image_url,
            requirements=self.requirements,
            agenda=self.agenda,
        )


class EventUpdateRequest(EventCreateRequest):
    """Request to update an event (full replacement of descriptive fields)."""


class EventStatusUpdateRequest(BaseModel):
    """Request to change an event's lifecycle status."""

    status: EventStatus = Field(
        ..., description="Target status", examples=["published", "cancelled"]
    )


# =============================================================================
# Response Schemas
# =============================================================================


class EventResponse(BaseModel):
    """Single event response.

    Attributes:
        registered_count: Confirmed registrations (omitted in dashboard
            projections, which do not count).
    """

    id: UUID = Field(..., description="Event unique identifier")
    organizer_id: UUID = Field(..., description="Owning organizer")
    title: str
    description: str
    category: EventCategory
    start_at: datetime
    end_at: datetime
    location: LocationSchema
    capacity: int
    registration_deadline: datetime
    status: EventStatus
    tags: list[str]
    image_url: str | None = None
    requirements: str | None = None
    agenda: str | None = None
    registered_count: int | None = Field(
        None, description="Confirmed registrations right now"
    )
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls, event: Event, registered_count: int | None = None
    ) -> "EventResponse":
        """Convert domain entity to response schema.

        Args:
            event: Event entity.
            registered_count: Optional confirmed registration count.

        Returns:
            EventResponse for API response.
        """
        return cls(
            id=event.id,
            organizer_id=event.organizer_id,
            title=event.title,
            description=event.description,
            category=event.category,
            start_at=event.start_at,
            end_at=event.end_at,
            location=LocationSchema.from_value_object(event.location),
            capacity=event.capacity,
            registration_deadline=event.registration_deadline,
            status=event.status,
            tags=list(event.tags),
            image_url=event.image_url,
            requirements=event.requirements,
            agenda=event.agenda,
            registered_count=registered_count,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )

    @classmethod
    def from_dto(cls, dto: EventSummary) -> "EventResponse":
        return cls.from_entity(dto.event, registered_count=dto.registered_count)


class EventListResponse(BaseModel):
    """Paginated list of visible events."""

    events: list[EventResponse] = Field(..., description="Events on this page")
    meta: PaginatedMeta

    @classmethod
    def from_dto(cls, page: EventPage) -> "EventListResponse":
        return cls(
            events=[EventResponse.from_dto(item) for item in page.items],
            meta=PaginatedMeta.from_pagination(
                page=page.page, page_size=page.size, total_count=page.total
            ),
        )


class CategoryListResponse(BaseModel):
    categories: list[EventCategory] = Field(..., description="Available categories")


class EventCancellationResponse(BaseModel):
    """Result of cancelling an event."""

    event_id: UUID = Field(..., description="Cancelled event")
    status: EventStatus = Field(EventStatus.CANCELLED, description="Final status")
    cancelled_registrations: int = Field(
        ..., description="Registrations cancelled by this cascade run"
    )


class CancellationResumeResponse(BaseModel):
    """Result of resuming interrupted cancellation cascades."""

    completed_event_ids: list[UUID] = Field(
        ..., description="Events whose cascade was completed"
    )
