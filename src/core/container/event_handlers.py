"""Event lifecycle handler factories.

Request-scoped handler instances for event commands and queries. Each
factory receives repositories via FastAPI Depends (sharing the request
session) and pulls app-scoped singletons from the container.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_admission_lock
from src.core.container.repositories import (
    get_event_repository,
    get_registration_repository,
)
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.registration_repository import RegistrationRepository

if TYPE_CHECKING:
    from src.application.commands.handlers.cancel_event_handler import (
        CancelEventHandler,
    )
    from src.application.commands.handlers.create_event_handler import (
        CreateEventHandler,
    )
    from src.application.commands.handlers.resume_event_cancellations_handler import (
        ResumeEventCancellationsHandler,
    )
    from src.application.commands.handlers.update_event_handler import (
        UpdateEventHandler,
    )
    from src.application.commands.handlers.update_event_status_handler import (
        UpdateEventStatusHandler,
    )
    from src.application.queries.handlers.get_event_handler import GetEventHandler
    from src.application.queries.handlers.list_events_handler import (
        ListCategoriesHandler,
        ListEventsByOrganizerHandler,
        ListEventsHandler,
    )
    from src.application.services.event_cancellation import (
        EventCancellationService,
    )


def _cancellation_service(
    event_repo: EventRepository,
    registration_repo: RegistrationRepository,
) -> "EventCancellationService":
    from src.application.services.event_cancellation import (
        EventCancellationService,
    )

    return EventCancellationService(
        event_repo=event_repo,
        registration_repo=registration_repo,
        admission_lock=get_admission_lock(),
        event_bus=get_event_bus(),
    )


# ============================================================================
# Command Handlers
# ============================================================================


async def get_create_event_handler(
    event_repo: EventRepository = Depends(get_event_repository),
) -> "CreateEventHandler":
    """Get CreateEvent command handler (request-scoped)."""
    from src.application.commands.handlers.create_event_handler import (
        CreateEventHandler,
    )

    return CreateEventHandler(event_repo=event_repo, event_bus=get_event_bus())


async def get_update_event_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "UpdateEventHandler":
    """Get UpdateEvent command handler (request-scoped)."""
    from src.application.commands.handlers.update_event_handler import (
        UpdateEventHandler,
    )
    from src.application.services.capacity_ledger import CapacityLedger

    return UpdateEventHandler(
        event_repo=event_repo,
        ledger=CapacityLedger(registration_repo=registration_repo),
        event_bus=get_event_bus(),
    )


async def get_update_event_status_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "UpdateEventStatusHandler":
    """Get UpdateEventStatus command handler (request-scoped).

    Transitions to CANCELLED run the same cascade as CancelEvent.
    """
    from src.application.commands.handlers.update_event_status_handler import (
        UpdateEventStatusHandler,
    )
    from src.application.services.capacity_ledger import CapacityLedger

    return UpdateEventStatusHandler(
        event_repo=event_repo,
        ledger=CapacityLedger(registration_repo=registration_repo),
        cancellation=_cancellation_service(event_repo, registration_repo),
        event_bus=get_event_bus(),
    )


async def get_cancel_event_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "CancelEventHandler":
    """Get CancelEvent command handler (request-scoped)."""
    from src.application.commands.handlers.cancel_event_handler import (
        CancelEventHandler,
    )

    return CancelEventHandler(
        event_repo=event_repo,
        cancellation=_cancellation_service(event_repo, registration_repo),
    )


async def get_resume_event_cancellations_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "ResumeEventCancellationsHandler":
    """Get ResumeEventCancellations command handler (request-scoped)."""
    from src.application.commands.handlers.resume_event_cancellations_handler import (
        ResumeEventCancellationsHandler,
    )

    return ResumeEventCancellationsHandler(
        event_repo=event_repo,
        cancellation=_cancellation_service(event_repo, registration_repo),
    )


# ============================================================================
# Query Handlers
# ============================================================================


async def get_get_event_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "GetEventHandler":
    """Get GetEvent query handler (request-scoped)."""
    from src.application.queries.handlers.get_event_handler import GetEventHandler
    from src.application.services.capacity_ledger import CapacityLedger

    return GetEventHandler(
        event_repo=event_repo,
        ledger=CapacityLedger(registration_repo=registration_repo),
    )


async def get_list_events_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "ListEventsHandler":
    """Get ListEvents query handler (request-scoped)."""
    from src.application.queries.handlers.list_events_handler import (
        ListEventsHandler,
    )
    from src.application.services.capacity_ledger import CapacityLedger

    return ListEventsHandler(
        event_repo=event_repo,
        ledger=CapacityLedger(registration_repo=registration_repo),
        max_page_size=settings.max_page_size,
    )


async def get_list_events_by_organizer_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "ListEventsByOrganizerHandler":
    """Get ListEventsByOrganizer query handler (request-scoped)."""
    from src.application.queries.handlers.list_events_handler import (
        ListEventsByOrganizerHandler,
    )
    from src.application.services.capacity_ledger import CapacityLedger

    return ListEventsByOrganizerHandler(
        event_repo=event_repo,
        ledger=CapacityLedger(registration_repo=registration_repo),
        max_page_size=settings.max_page_size,
    )


async def get_list_categories_handler() -> "ListCategoriesHandler":
    """Get ListCategories query handler (stateless)."""
    from src.application.queries.handlers.list_events_handler import (
        ListCategoriesHandler,
    )

    return ListCategoriesHandler()
