"""GetEvent query handler.

Reading a cancelled event by id fails Gone: cancelled events are invisible
to normal reads.
"""

from src.application.dtos.event_dtos import EventSummary
from src.application.errors.failures import (
    event_gone,
    event_not_found,
    storage_failure,
)
from src.application.queries.event_queries import GetEvent
from src.application.services.capacity_ledger import CapacityLedger
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.event_repository import EventRepository


class GetEventHandler:
    """Handler for GetEvent query.

    Dependencies (injected via constructor):
        - EventRepository: Event retrieval
        - CapacityLedger: registered_count
    """

    def __init__(self, event_repo: EventRepository, ledger: CapacityLedger) -> None:
        self._event_repo = event_repo
        self._ledger = ledger

    async def handle(self, query: GetEvent) -> Result[EventSummary, DomainError]:
        """Handle GetEvent query.

        Returns:
            Success(EventSummary): Visible event with its confirmed count.
            Failure(NotFoundError): Event does not exist.
            Failure(GoneError): Event is cancelled.
            Failure(StorageError): Read failed.
        """
        try:
            event = await self._event_repo.find_by_id(query.event_id)
            if event is None:
                return Failure(error=event_not_found(query.event_id))
            if event.is_cancelled():
                return Failure(error=event_gone(query.event_id))

            registered_count = await self._ledger.confirmed_count(event.id)
        except Exception as e:
            return Failure(error=storage_failure("load event", e))

        return Success(
            value=EventSummary(event=event, registered_count=registered_count)
        )
