"""Event DTOs (Data Transfer Objects).

Carry event data between the presentation and application layers.
"""

from dataclasses import dataclass, field
from datetime import datetime

from src.domain.entities.event import Event
from src.domain.enums.event_category import EventCategory
from src.domain.value_objects.location import Location


@dataclass(frozen=True, kw_only=True)
class EventDetails:
    """Mutable descriptive fields of an event.

    Shared by CreateEvent and UpdateEvent: update overwrites every field.
    Timestamps are validated as future values at the boundary.
    """

    title: str
    description: str
    category: EventCategory
    start_at: datetime
    end_at: datetime
    location: Location
    capacity: int
    registration_deadline: datetime
    tags: list[str] = field(default_factory=list)
    image_url: str | None = None
    requirements: str | None = None
    agenda: str | None = None


@dataclass(frozen=True, kw_only=True)
class EventSummary:
    """Event with its current confirmed registration count.

    Attributes:
        event: Event entity.
        registered_count: Confirmed registrations right now.
    """

    event: Event
    registered_count: int


@dataclass(frozen=True, kw_only=True)
class EventPage:
    """One page of visible events.

    Attributes:
        items: Events on this page.
        total: Visible events across all pages.
        page: 1-based page number.
        size: Requested page size.
    """

    items: list[EventSummary]
    total: int
    page: int
    size: int

    @property
    def pages(self) -> int:
        """Total number of pages (0 when there are no events)."""
        return (self.total + self.size - 1) // self.size
