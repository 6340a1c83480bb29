"""CancelEvent command handler.

"Deleting" an event is a soft transition to CANCELLED that cascades to
every dependent registration. Cancelling an already cancelled event
succeeds and sweeps up any registration a previous run left active.
"""

from src.application.commands.event_commands import CancelEvent
from src.application.errors.failures import event_not_found, storage_failure
from src.application.services.event_cancellation import EventCancellationService
from src.core.errors import DomainError
from src.core.result import Failure, Result
from src.domain.protocols.event_repository import EventRepository


class CancelEventHandler:
    """Handler for CancelEvent command.

    Dependencies (injected via constructor):
        - EventRepository: To resolve the event
        - EventCancellationService: Runs the cascade
    """

    def __init__(
        self,
        event_repo: EventRepository,
        cancellation: EventCancellationService,
    ) -> None:
        self._event_repo = event_repo
        self._cancellation = cancellation

    async def handle(self, cmd: CancelEvent) -> Result[int, DomainError]:
        """Handle CancelEvent command.

        Returns:
            Success(int): Registrations cancelled by this run.
            Failure(NotFoundError): Event does not exist.
            Failure(StorageError): Cascade interrupted (resumable).
        """
        try:
            event = await self._event_repo.find_by_id(cmd.event_id)
        except Exception as e:
            return Failure(error=storage_failure("load event", e))

        if event is None:
            return Failure(error=event_not_found(cmd.event_id))

        return await self._cancellation.cancel(event)
