"""UpdateEvent command handler.

Overwrites all mutable descriptive fields and the location of an event.
Ownership (organizer-owns-event or admin) is enforced before dispatch.
"""

from uuid_extensions import uuid7

from src.application.commands.event_commands import UpdateEvent
from src.application.dtos.event_dtos import EventSummary
from src.application.errors.failures import (
    event_gone,
    event_not_found,
    invalid_event_fields,
    storage_failure,
)
from src.application.services.capacity_ledger import CapacityLedger
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events.event_lifecycle_events import EventUpdated
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.event_repository import EventRepository


class UpdateEventHandler:
    """Handler for UpdateEvent command.

    Dependencies (injected via constructor):
        - EventRepository: For persistence
        - CapacityLedger: registered_count for the response
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        event_repo: EventRepository,
        ledger: CapacityLedger,
        event_bus: EventBusProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._ledger = ledger
        self._event_bus = event_bus

    async def handle(self, cmd: UpdateEvent) -> Result[EventSummary, DomainError]:
        """Handle UpdateEvent command.

        Returns:
            Success(EventSummary): Event updated.
            Failure(NotFoundError): Event does not exist.
            Failure(GoneError): Event is cancelled.
            Failure(ValidationError): Replacement fields are invalid.
            Failure(StorageError): Read or write failed.
        """
        details = cmd.details

        try:
            event = await self._event_repo.find_by_id(cmd.event_id)
        except Exception as e:
            return Failure(error=storage_failure("load event", e))

        if event is None:
            return Failure(error=event_not_found(cmd.event_id))
        if event.is_cancelled():
            return Failure(error=event_gone(cmd.event_id))

        result = event.update_details(
            title=details.title,
            description=details.description,
            category=details.category,
            start_at=details.start_at,
            end_at=details.end_at,
            location=details.location,
            capacity=details.capacity,
            registration_deadline=details.registration_deadline,
            tags=list(details.tags),
            image_url=details.image_url,
            requirements=details.requirements,
            agenda=details.agenda,
        )
        if isinstance(result, Failure):
            return Failure(error=invalid_event_fields(result.error))

        try:
            await self._event_repo.save(event)
            registered_count = await self._ledger.confirmed_count(event.id)
        except Exception as e:
            return Failure(error=storage_failure("save event", e))

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
