"""CreateEvent command handler.

Creates a PUBLISHED event owned by the acting organizer.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols, events)
- Uses Result types for error handling
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.event_commands import CreateEvent
from src.application.dtos.event_dtos import EventSummary
from src.application.errors.failures import invalid_event_fields, storage_failure
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.event import Event
from src.domain.enums.event_status import EventStatus
from src.domain.events.event_lifecycle_events import EventCreated
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.event_repository import EventRepository


class CreateEventHandler:
    """Handler for CreateEvent command.

    Dependencies (injected via constructor):
        - EventRepository: For persistence
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        event_repo: EventRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._event_bus = event_bus

    async def handle(self, cmd: CreateEvent) -> Result[EventSummary, DomainError]:
        """Handle CreateEvent command.

        Args:
            cmd: CreateEvent command.

        Returns:
            Success(EventSummary): Event created (registered_count 0).
            Failure(ValidationError): Invalid title, description, capacity
                or time window.
            Failure(StorageError): Event could not be saved.
        """
        details = cmd.details
        now = datetime.now(UTC)

        try:
            event = Event(
                id=uuid7(),
                organizer_id=cmd.organizer_id,
                title=details.title,
                description=details.description,
                category=details.category,
                start_at=details.start_at,
                end_at=details.end_at,
                location=details.location,
                capacity=details.capacity,
                registration_deadline=details.registration_deadline,
                status=EventStatus.PUBLISHED,
                tags=list(details.tags),
                image_url=details.image_url,
                requirements=details.requirements,
                agenda=details.agenda,
                created_at=now,
                updated_at=now,
            )
        except ValueError as e:
            return Failure(error=invalid_event_fields(str(e)))

        try:
            await self._event_repo.save(event)
        except Exception as e:
            return Failure(error=storage_failure("save event", e))

        await self._event_bus.publish(
            EventCreated(
                event_id=uuid7(),
                event_entity_id=event.id,
                organizer_id=event.organizer_id,
                title=event.title,
                capacity=event.capacity,
            )
        )
        return Success(value=EventSummary(event=event, registered_count=0))
