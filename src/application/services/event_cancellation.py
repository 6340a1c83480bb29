"""Event cancellation cascade service.

Soft-deletes an event and cancels every registration that depends on it.
Shared by the CancelEvent, UpdateEventStatus (→ CANCELLED) and
ResumeEventCancellations handlers.

Cascade steps (each write is its own commit):
    1. Persist the cancellation marker on the event
    2. Cancel every active registration and persist each one
    3. Set event status CANCELLED, clear the marker, persist

A failure between steps leaves the marker in place. Re-running the cascade
is safe: already-cancelled registrations are skipped, so the resume path
simply runs it again.

Registrations are cancelled through Registration.cancel() directly; the
per-user ownership check of CancelRegistration does not apply to this
administrative action.

Concurrency:
    The cascade holds the event's admission lock and re-loads the event FOR
    UPDATE, so it never interleaves with an admission for the same event.
    Admission treats an event with a pending marker as gone; a registration
    that committed before the marker was written is seen by step 2.
"""

from uuid_extensions import uuid7

from src.application.errors.failures import event_not_found, storage_failure
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.event import Event
from src.domain.events.event_lifecycle_events import (
    EventCancellationAttempted,
    EventCancellationFailed,
    EventCancellationSucceeded,
)
from src.domain.protocols.admission_lock_protocol import AdmissionLockProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.registration_repository import RegistrationRepository


class EventCancellationService:
    """Runs the (resumable) cancellation cascade for one event.

    Dependencies (injected via constructor):
        - EventRepository: Event persistence
        - RegistrationRepository: Dependent registrations
        - AdmissionLockProtocol: Excludes concurrent admissions
        - EventBusProtocol: Cascade lifecycle events
    """

    def __init__(
        self,
        event_repo: EventRepository,
        registration_repo: RegistrationRepository,
        admission_lock: AdmissionLockProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._registration_repo = registration_repo
        self._admission_lock = admission_lock
        self._event_bus = event_bus

    async def cancel(
        self, event: Event, *, resumed: bool = False
    ) -> Result[int, DomainError]:
        """Run the cascade for an already-resolved event.

        The event is re-loaded under the admission lock; the passed instance
        only identifies it and is not modified.

        Args:
            event: Event to cancel (may already be CANCELLED or carry a
                pending marker).
            resumed: True when completing an interrupted cascade.

        Returns:
            Success(int): Number of registrations cancelled by this run.
            Failure(NotFoundError): Event disappeared before the lock was taken.
            Failure(StorageError): A write failed; the marker stays set.

        Side Effects:
            - Publishes EventCancellationAttempted once the marker is saved
            - Publishes EventCancellationSucceeded or EventCancellationFailed
        """
        async with self._admission_lock.hold(event.id):
            try:
                current = await self._event_repo.find_by_id(event.id, for_update=True)
            except Exception as e:
                return Failure(error=storage_failure("load event", e))

            if current is None:
                return Failure(error=event_not_found(event.id))

            return await self._cascade(current, resumed=resumed)

    async def _cascade(
        self, event: Event, *, resumed: bool
    ) -> Result[int, DomainError]:
        cancelled = 0
        attempted_published = False
        operation = "persist cancellation marker"

        try:
            if not event.is_cancelled():
                event.begin_cancellation()
                await self._event_repo.save(event)

            await self._event_bus.publish(
                EventCancellationAttempted(
                    event_id=uuid7(),
                    event_entity_id=event.id,
                    resumed=resumed,
                )
            )
            attempted_published = True

            operation = "cancel registrations"
            registrations = await self._registration_repo.find_by_event_id(event.id)
            for registration in registrations:
                if registration.cancel():
                    await self._registration_repo.save(registration)
                    cancelled += 1

            operation = "finalize event cancellation"
            event.complete_cancellation()
            await self._event_repo.save(event)

        except Exception as e:
            if attempted_published:
                await self._event_bus.publish(
                    EventCancellationFailed(
                        event_id=uuid7(),
                        event_entity_id=event.id,
                        cancelled_registrations=cancelled,
                        reason=f"{operation}: {e}",
                    )
                )
            return Failure(error=storage_failure(operation, e))

        await self._event_bus.publish(
            EventCancellationSucceeded(
                event_id=uuid7(),
                event_entity_id=event.id,
                cancelled_registrations=cancelled,
            )
        )
        return Success(value=cancelled)
