"""Event listing query handlers.

Listings never include CANCELLED events. Pagination is 1-based.
"""

from src.application.dtos.event_dtos import EventPage, EventSummary
from src.application.errors.failures import storage_failure
from src.application.queries.event_queries import (
    ListCategories,
    ListEvents,
    ListEventsByOrganizer,
)
from src.application.services.capacity_ledger import CapacityLedger
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.event import Event
from src.domain.enums.event_category import EventCategory
from src.domain.protocols.event_repository import EventRepository


def _validate_page(page: int, size: int, max_size: int) -> ValidationError | None:
    if page < 1:
        return ValidationError(
            code=ErrorCode.INVALID_PAGE,
            message="Page must be at least 1",
            field="page",
        )
    if size < 1 or size > max_size:
        return ValidationError(
            code=ErrorCode.INVALID_PAGE,
            message=f"Page size must be between 1 and {max_size}",
            field="size",
        )
    return None


class ListEventsHandler:
    """Handler for ListEvents query.

    Dependencies (injected via constructor):
        - EventRepository: Visible event retrieval
        - CapacityLedger: registered_count per event
        - max_page_size: Upper bound on the requested size
    """

    def __init__(
        self,
        event_repo: EventRepository,
        ledger: CapacityLedger,
        max_page_size: int = 100,
    ) -> None:
        self._event_repo = event_repo
        self._ledger = ledger
        self._max_page_size = max_page_size

    async def handle(self, query: ListEvents) -> Result[EventPage, DomainError]:
        """Handle ListEvents query.

        Returns:
            Success(EventPage): Page of visible events.
            Failure(ValidationError): Page or size out of range.
            Failure(StorageError): Read failed.
        """
        error = _validate_page(query.page, query.size, self._max_page_size)
        if error is not None:
            return Failure(error=error)

        offset = (query.page - 1) * query.size
        try:
            events = await self._event_repo.find_visible(offset, query.size)
            total = await self._event_repo.count_visible()
            items = await _summarize(events, self._ledger)
        except Exception as e:
            return Failure(error=storage_failure("list events", e))

        return Success(
            value=EventPage(items=items, total=total, page=query.page, size=query.size)
        )


class ListEventsByOrganizerHandler:
    """Handler for ListEventsByOrganizer query."""

    def __init__(
        self,
        event_repo: EventRepository,
        ledger: CapacityLedger,
        max_page_size: int = 100,
    ) -> None:
        self._event_repo = event_repo
        self._ledger = ledger
        self._max_page_size = max_page_size

    async def handle(
        self, query: ListEventsByOrganizer
    ) -> Result[EventPage, DomainError]:
        """Handle ListEventsByOrganizer query.

        Returns:
            Success(EventPage): Page of the organizer's visible events.
            Failure(ValidationError): Page or size out of range.
            Failure(StorageError): Read failed.
        """
        error = _validate_page(query.page, query.size, self._max_page_size)
        if error is not None:
            return Failure(error=error)

        offset = (query.page - 1) * query.size
        try:
            events = await self._event_repo.find_visible_by_organizer(
                query.organizer_id, offset, query.size
            )
            total = await self._event_repo.count_visible_by_organizer(
                query.organizer_id
            )
            items = await _summarize(events, self._ledger)
        except Exception as e:
            return Failure(error=storage_failure("list organizer events", e))

        return Success(
            value=EventPage(items=items, total=total, page=query.page, size=query.size)
        )


class ListCategoriesHandler:
    """Handler for ListCategories query (static catalog, cannot fail)."""

    async def handle(self, query: ListCategories) -> Result[list[EventCategory], DomainError]:
        return Success(value=list(EventCategory))


async def _summarize(events: list[Event], ledger: CapacityLedger) -> list[EventSummary]:
    return [
        EventSummary(
            event=event, registered_count=await ledger.confirmed_count(event.id)
        )
        for event in events
    ]
