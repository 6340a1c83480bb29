"""Event queries (CQRS read operations).

Queries NEVER change state and do NOT emit domain events. Cancelled
events are treated as absent by every query.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetEvent:
    """Get a single event by ID.

    Fails Gone when the event exists but is cancelled.

    Attributes:
        event_id: Event to retrieve.
    """

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListEvents:
    """List visible events, one page at a time.

    Attributes:
        page: 1-based page number.
        size: Events per page.
    """

    page: int = 1
    size: int = 20


@dataclass(frozen=True, kw_only=True)
class ListEventsByOrganizer:
    """List an organizer's visible events, one page at a time.

    Attributes:
        organizer_id: Owning organizer.
        page: 1-based page number.
        size: Events per page.
    """

    organizer_id: UUID
    page: int = 1
    size: int = 20


@dataclass(frozen=True, kw_only=True)
class ListCategories:
    """List the event categories events can be filed under."""
