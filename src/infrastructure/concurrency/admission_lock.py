"""In-process admission lock.

Implements AdmissionLockProtocol with one asyncio.Lock per event id. All
admission decisions for an event run on one event loop in one process, so
the lock serializes the confirmed-count read and the registration insert.

Multi-process deployments additionally rely on the row lock taken by
EventRepository.find_by_id(for_update=True) on PostgreSQL.

Usage:
    >>> lock = InMemoryAdmissionLock()
    >>> async with lock.hold(event_id):
    ...     ...
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID


class InMemoryAdmissionLock:
    """Per-event asyncio locks.

    Locks for different events are independent. Lock objects are created
    lazily and dropped once no coroutine holds or waits on them.
    """

    def __init__(self) -> None:
        self._locks: dict[UUID, asyncio.Lock] = {}
        self._waiters: dict[UUID, int] = {}

    @asynccontextmanager
    async def hold(self, event_id: UUID) -> AsyncIterator[None]:
        """Hold the admission lock for an event for the duration of the block."""
        lock = self._locks.setdefault(event_id, asyncio.Lock())
        self._waiters[event_id] = self._waiters.get(event_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._waiters[event_id] -= 1
            if self._waiters[event_id] == 0:
                del self._waiters[event_id]
                del self._locks[event_id]

    def is_held(self, event_id: UUID) -> bool:
        """Whether any coroutine currently holds the event's lock."""
        lock = self._locks.get(event_id)
        return lock is not None and lock.locked()
