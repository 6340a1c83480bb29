"""UpdateEventStatus command handler.

Sets an event's status by name. Edges outside the event transition table
are rejected with InvalidTransitionError; CANCELLED runs the cancellation
cascade so no active registration is left under a cancelled event.
"""

from uuid_extensions import uuid7

from src.application.commands.event_commands import UpdateEventStatus
from src.application.dtos.event_dtos import EventSummary
from src.application.errors.failures import (
    event_not_found,
    invalid_transition,
    storage_failure,
)
from src.application.services.capacity_ledger import CapacityLedger
from src.application.services.event_cancellation import EventCancellationService
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums.event_status import EventStatus
from src.domain.errors import EventError
from src.domain.events.event_lifecycle_events import EventUpdated
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.event_repository import EventRepository


class UpdateEventStatusHandler:
    """Handler for UpdateEventStatus command.

    Dependencies (injected via constructor):
        - EventRepository: For persistence
        - CapacityLedger: registered_count for the response
        - EventCancellationService: Cascade for → CANCELLED
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        event_repo: EventRepository,
        ledger: CapacityLedger,
        cancellation: EventCancellationService,
        event_bus: EventBusProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._ledger = ledger
        self._cancellation = cancellation
        self._event_bus = event_bus

    async def handle(
        self, cmd: UpdateEventStatus
    ) -> Result[EventSummary, DomainError]:
        """Handle UpdateEventStatus command.

        Returns:
            Success(EventSummary): Status applied (same-status is a no-op).
            Failure(NotFoundError): Event does not exist.
            Failure(InvalidTransitionError): Edge not allowed.
            Failure(StorageError): Read or write failed.
        """
        try:
            event = await self._event_repo.find_by_id(cmd.event_id)
        except Exception as e:
            return Failure(error=storage_failure("load event", e))

        if event is None:
            return Failure(error=event_not_found(cmd.event_id))

        if not event.status.can_transition_to(cmd.status):
            return Failure(
                error=invalid_transition(
                    "Event",
                    EventError.INVALID_TRANSITION,
                    event.status.value,
                    cmd.status.value,
                )
            )

        if cmd.status == EventStatus.CANCELLED:
            cascade = await self._cancellation.cancel(event)
            if isinstance(cascade, Failure):
                return Failure(error=cascade.error)
            try:
                cancelled = await self._event_repo.find_by_id(event.id)
            except Exception as e:
                return Failure(error=storage_failure("load event", e))
            if cancelled is None:
                return Failure(error=event_not_found(event.id))
            return Success(value=EventSummary(event=cancelled, registered_count=0))

        previous = event.status
        event.change_status(cmd.status)

        try:
            if event.status != previous:
                await self._event_repo.save(event)
            registered_count = await self._ledger.confirmed_count(event.id)
        except Exception as e:
            return Failure(error=storage_failure("save event", e))

        if event.status != previous:
            await self._event_bus.publish(
                EventUpdated(
                    event_id=uuid7(),
                    event_entity_id=event.id,
                    status=event.status.value,
                )
            )
        return Success(
            value=EventSummary(event=event, registered_count=registered_count)
        )
