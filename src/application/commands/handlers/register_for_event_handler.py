"""RegisterForEvent command handler.

Admission decision: the registering user is CONFIRMED while the event's
confirmed count is below its capacity, WAITLISTED otherwise.

Concurrency:
    Check-then-insert runs while the per-event admission lock is held, and
    the event row is loaded FOR UPDATE so the decision is also serialized
    across processes on databases with row locks. Two concurrent
    registrations for the same event therefore never both take the last
    slot.
"""

from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.application.commands.registration_commands import RegisterForEvent
from src.application.errors.failures import (
    event_gone,
    event_not_found,
    storage_failure,
)
from src.application.services.capacity_ledger import CapacityLedger
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.registration import Registration
from src.domain.enums.event_status import EventStatus
from src.domain.errors import EventError, RegistrationError
from src.domain.events.registration_events import RegistrationCreated
from src.domain.protocols.admission_lock_protocol import AdmissionLockProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.registration_repository import RegistrationRepository


class RegisterForEventHandler:
    """Handler for RegisterForEvent command.

    Dependencies (injected via constructor):
        - EventRepository: Resolves (and row-locks) the event
        - RegistrationRepository: Duplicate check and persistence
        - CapacityLedger: Admission decision
        - AdmissionLockProtocol: Per-event serialization
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        event_repo: EventRepository,
        registration_repo: RegistrationRepository,
        ledger: CapacityLedger,
        admission_lock: AdmissionLockProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._registration_repo = registration_repo
        self._ledger = ledger
        self._admission_lock = admission_lock
        self._event_bus = event_bus

    async def handle(
        self, cmd: RegisterForEvent
    ) -> Result[Registration, DomainError]:
        """Handle RegisterForEvent command.

        Returns:
            Success(Registration): CONFIRMED or WAITLISTED registration.
            Failure(NotFoundError): Event does not exist.
            Failure(GoneError): Event is cancelled or being cancelled.
            Failure(ConflictError): Duplicate active registration, event not
                published, or registration deadline passed.
            Failure(StorageError): Read or write failed.

        Side Effects:
            - Publishes RegistrationCreated event (on success)
        """
        async with self._admission_lock.hold(cmd.event_id):
            result = await self._admit(cmd)

        if isinstance(result, Success):
            registration = result.value
            await self._event_bus.publish(
                RegistrationCreated(
                    event_id=uuid7(),
                    registration_id=registration.id,
                    event_entity_id=registration.event_id,
                    user_id=registration.user_id,
                    status=registration.status,
                )
            )
        return result

    async def _admit(
        self, cmd: RegisterForEvent
    ) -> Result[Registration, DomainError]:
        try:
            event = await self._event_repo.find_by_id(cmd.event_id, for_update=True)
        except Exception as e:
            return Failure(error=storage_failure("load event", e))

        if event is None:
            return Failure(error=event_not_found(cmd.event_id))
        if event.is_cancelled() or event.is_cancellation_pending():
            return Failure(error=event_gone(cmd.event_id))
        if event.status == EventStatus.DRAFT:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EVENT_NOT_PUBLISHED,
                    message=EventError.EVENT_NOT_PUBLISHED,
                    resource_type="Event",
                    conflicting_field="status",
                )
            )
        if not event.is_registration_open(datetime.now(UTC)):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.REGISTRATION_CLOSED,
                    message=EventError.REGISTRATION_CLOSED,
                    resource_type="Event",
                    conflicting_field="registration_deadline",
                )
            )

        try:
            existing = await self._registration_repo.find_active(
                cmd.event_id, cmd.user_id
            )
            if existing is not None:
                return Failure(
                    error=_already_registered({"registration_id": str(existing.id)})
                )

            has_capacity = await self._ledger.has_capacity(event.id, event.capacity)
            registration = Registration.admit(
                event_id=event.id,
                user_id=cmd.user_id,
                has_capacity=has_capacity,
                notes=cmd.notes,
            )
            await self._registration_repo.save(registration)
        except IntegrityError:
            # Unique index on active (event_id, user_id) caught a duplicate
            return Failure(error=_already_registered())
        except Exception as e:
            return Failure(error=storage_failure("save registration", e))

        return Success(value=registration)


def _already_registered(details: dict[str, str] | None = None) -> ConflictError:
    return ConflictError(
        code=ErrorCode.REGISTRATION_ALREADY_EXISTS,
        message=RegistrationError.ALREADY_REGISTERED,
        resource_type="Registration",
        conflicting_field="user_id",
        details=details,
    )
