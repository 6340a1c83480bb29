"""Capacity ledger service.

Answers "is there room for one more confirmed registration in this event,
right now?". The confirmed count is derived from registration records on
every call, never cached, so it cannot drift from the rows it counts.

Architecture:
    - Application service (reads through RegistrationRepository)
    - Pure read, no side effects
    - Does not resolve the event: callers pass capacity explicitly

Usage:
    ledger = CapacityLedger(registration_repo)

    async with admission_lock.hold(event.id):
        if await ledger.has_capacity(event.id, event.capacity):
            ...

    Repository exceptions propagate to the calling handler, which turns
    them into StorageError results.
"""

from uuid import UUID

from src.domain.enums.registration_status import RegistrationStatus
from src.domain.protocols.registration_repository import RegistrationRepository


class CapacityLedger:
    """Confirmed-registration accounting for events.

    Dependencies (injected via constructor):
        - RegistrationRepository: Source of registration counts
    """

    def __init__(self, registration_repo: RegistrationRepository) -> None:
        self._registration_repo = registration_repo

    async def confirmed_count(self, event_id: UUID) -> int:
        """Count CONFIRMED registrations for an event.

        Args:
            event_id: Event to count.

        Returns:
            Number of confirmed registrations, reflecting all prior committed
            admissions.
        """
        return await self._registration_repo.count_by_event_and_status(
            event_id, RegistrationStatus.CONFIRMED
        )

    async def has_capacity(self, event_id: UUID, capacity: int) -> bool:
        """Check whether one more registration can be confirmed.

        Args:
            event_id: Event to check.
            capacity: The event's current capacity.

        Returns:
            True if confirmed_count(event_id) < capacity.
        """
        return await self.confirmed_count(event_id) < capacity
