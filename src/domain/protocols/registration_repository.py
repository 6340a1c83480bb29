"""RegistrationRepository protocol for registration persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol (SQLAlchemy and in-memory).
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.registration import Registration
from src.domain.enums.registration_status import RegistrationStatus


class RegistrationRepository(Protocol):
    """Registration repository protocol (port).

    Methods:
        find_by_id: Retrieve registration by ID
        find_by_event_id: All registrations for an event (any status)
        find_by_user_id: All registrations for a user (any status)
        find_active: The non-cancelled registration for (event, user), if any
        count_by_event_and_status: Count registrations in a status for an event
        find_by_event_and_status: Registrations in a status for an event,
            oldest registration_date first
        save: Create or update registration
    """

    async def find_by_id(self, registration_id: UUID) -> Registration | None:
        """Find registration by ID.

        Returns:
            Registration if found, None otherwise.
        """
        ...

    async def find_by_event_id(self, event_id: UUID) -> list[Registration]:
        """Find all registrations for an event, including cancelled ones."""
        ...

    async def find_by_user_id(self, user_id: UUID) -> list[Registration]:
        """Find all registrations for a user, including cancelled ones."""
        ...

    async def find_active(
        self, event_id: UUID, user_id: UUID
    ) -> Registration | None:
        """Find the user's non-cancelled registration for an event.

        Returns:
            Active registration if one exists, None otherwise.
        """
        ...

    async def count_by_event_and_status(
        self, event_id: UUID, status: RegistrationStatus
    ) -> int:
        """Count an event's registrations with the given status.

        Must reflect every registration saved earlier in the same unit of work.
        """
        ...

    async def find_by_event_and_status(
        self, event_id: UUID, status: RegistrationStatus
    ) -> list[Registration]:
        """Find an event's registrations with the given status.

        Returns:
            Registrations ordered by registration_date ascending (FIFO).
        """
        ...

    async def save(self, registration: Registration) -> None:
        """Create or update registration."""
        ...
