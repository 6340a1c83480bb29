"""EventRepository protocol for event persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol (SQLAlchemy and in-memory).
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.event import Event


class EventRepository(Protocol):
    """Event repository protocol (port).

    Defines the interface for event persistence operations. Events are never
    physically deleted; cancellation is a status change saved like any other.

    Methods:
        find_by_id: Retrieve event by ID (optionally row-locked)
        find_visible: Page of non-cancelled events
        count_visible: Number of non-cancelled events
        find_visible_by_organizer: Page of an organizer's non-cancelled events
        count_visible_by_organizer: Number of an organizer's non-cancelled events
        find_pending_cancellation: Events with an unfinished cancellation cascade
        save: Create or update event
    """

    async def find_by_id(
        self, event_id: UUID, *, for_update: bool = False
    ) -> Event | None:
        """Find event by ID, including cancelled events.

        Args:
            event_id: Event's unique identifier.
            for_update: Lock the row until the unit of work ends (used to
                serialize admission decisions for one event across processes).

        Returns:
            Event if found, None otherwise.
        """
        ...

    async def find_visible(self, offset: int, limit: int) -> list[Event]:
        """Find non-cancelled events ordered by start time.

        Args:
            offset: Number of events to skip.
            limit: Maximum number of events to return.

        Returns:
            List of events (empty if none).
        """
        ...

    async def count_visible(self) -> int:
        """Count non-cancelled events."""
        ...

    async def find_visible_by_organizer(
        self, organizer_id: UUID, offset: int, limit: int
    ) -> list[Event]:
        """Find an organizer's non-cancelled events ordered by start time.

        Args:
            organizer_id: Organizer's user id.
            offset: Number of events to skip.
            limit: Maximum number of events to return.

        Returns:
            List of events (empty if none).
        """
        ...

    async def count_visible_by_organizer(self, organizer_id: UUID) -> int:
        """Count an organizer's non-cancelled events."""
        ...

    async def find_pending_cancellation(self) -> list[Event]:
        """Find events whose cancellation marker is set but status is not CANCELLED.

        Returns:
            List of events needing their cascade completed.
        """
        ...

    async def save(self, event: Event) -> None:
        """Create or update event.

        Args:
            event: Event entity to persist.
        """
        ...
