"""ResumeEventCancellations command handler.

Repair entry point for cascades interrupted by a storage failure: every
event still carrying a cancellation marker has its cascade re-run.
"""

from uuid import UUID

from src.application.commands.event_commands import ResumeEventCancellations
from src.application.errors.failures import storage_failure
from src.application.services.event_cancellation import EventCancellationService
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.event_repository import EventRepository


class ResumeEventCancellationsHandler:
    """Handler for ResumeEventCancellations command.

    Dependencies (injected via constructor):
        - EventRepository: Finds events with a pending marker
        - EventCancellationService: Re-runs each cascade
    """

    def __init__(
        self,
        event_repo: EventRepository,
        cancellation: EventCancellationService,
    ) -> None:
        self._event_repo = event_repo
        self._cancellation = cancellation

    async def handle(
        self, cmd: ResumeEventCancellations
    ) -> Result[list[UUID], DomainError]:
        """Handle ResumeEventCancellations command.

        Stops at the first cascade that fails again; events completed before
        it stay completed.

        Returns:
            Success(list[UUID]): Ids of events whose cascade was completed.
            Failure(StorageError): Lookup or a cascade failed.
        """
        try:
            pending = await self._event_repo.find_pending_cancellation()
        except Exception as e:
            return Failure(error=storage_failure("find pending cancellations", e))

        completed: list[UUID] = []
        for event in pending:
            result = await self._cancellation.cancel(event, resumed=True)
            if isinstance(result, Failure):
                return Failure(error=result.error)
            completed.append(event.id)

        return Success(value=completed)
