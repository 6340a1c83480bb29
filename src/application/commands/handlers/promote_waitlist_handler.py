"""PromoteWaitlist command handler.

Explicit, organizer/admin-triggered FIFO promotion: waitlisted
registrations are confirmed in registration_date order while the event has
free capacity. Runs under the same per-event admission lock as
registration so promotion and admission never race for a slot.
"""

from uuid_extensions import uuid7

from src.application.commands.registration_commands import PromoteWaitlist
from src.application.dtos.registration_dtos import WaitlistPromotionResult
from src.application.errors.failures import (
    event_gone,
    event_not_found,
    storage_failure,
)
from src.application.services.capacity_ledger import CapacityLedger
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.registration import Registration
from src.domain.enums.registration_status import RegistrationStatus
from src.domain.events.registration_events import WaitlistPromoted
from src.domain.protocols.admission_lock_protocol import AdmissionLockProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.registration_repository import RegistrationRepository


class PromoteWaitlistHandler:
    """Handler for PromoteWaitlist command.

    Dependencies (injected via constructor):
        - EventRepository: Resolves (and row-locks) the event
        - RegistrationRepository: Waitlist and persistence
        - CapacityLedger: Free slots
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
        self, cmd: PromoteWaitlist
    ) -> Result[WaitlistPromotionResult, DomainError]:
        """Handle PromoteWaitlist command.

        Returns:
            Success(WaitlistPromotionResult): Promoted registrations (possibly
                none when the event is full or the waitlist is empty).
            Failure(NotFoundError): Event does not exist.
            Failure(GoneError): Event is cancelled or being cancelled.
            Failure(StorageError): Read or write failed.
        """
        promoted: list[Registration] = []

        async with self._admission_lock.hold(cmd.event_id):
            try:
                event = await self._event_repo.find_by_id(
                    cmd.event_id, for_update=True
                )
                if event is None:
                    return Failure(error=event_not_found(cmd.event_id))
                if event.is_cancelled() or event.is_cancellation_pending():
                    return Failure(error=event_gone(cmd.event_id))

                free = event.capacity - await self._ledger.confirmed_count(event.id)
                waitlist = await self._registration_repo.find_by_event_and_status(
                    event.id, RegistrationStatus.WAITLISTED
                )
                for registration in waitlist[: max(free, 0)]:
                    registration.promote()
                    await self._registration_repo.save(registration)
                    promoted.append(registration)
            except Exception as e:
                return Failure(error=storage_failure("promote waitlist", e))

        for registration in promoted:
            await self._event_bus.publish(
                WaitlistPromoted(
                    event_id=uuid7(),
                    registration_id=registration.id,
                    event_entity_id=registration.event_id,
                    user_id=registration.user_id,
                )
            )
        return Success(
            value=WaitlistPromotionResult(
                promoted=promoted,
                remaining_waitlisted=len(waitlist) - len(promoted),
            )
        )
