"""AdmissionLockProtocol for per-event admission serialization.

The confirmed-registration count per event is the only shared mutable
resource in the engine. Admission decisions for the same event run one at a
time while the lock is held; different events never contend.

Usage:
    async with admission_lock.hold(event_id):
        confirmed = await ledger.confirmed_count(event_id)
        ...
        await registration_repo.save(registration)
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol
from uuid import UUID


class AdmissionLockProtocol(Protocol):
    """Per-event mutual exclusion for check-then-insert admission."""

    def hold(self, event_id: UUID) -> AbstractAsyncContextManager[None]:
        """Acquire the admission lock for an event.

        Args:
            event_id: Event whose admission decisions must be serialized.

        Returns:
            Async context manager; the lock is held inside the block.
        """
        ...
