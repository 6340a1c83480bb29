"""Unit tests for event command and query handlers.

Handlers run against the in-memory repositories. Cascade interruptions
are simulated with a registration repository that fails after a number
of saves.

Tests cover:
- CreateEvent (PUBLISHED, validation, EventCreated)
- UpdateEvent (overwrite, Gone when cancelled)
- UpdateEventStatus (transition table, CANCELLED runs the cascade)
- CancelEvent (cascade, idempotency, lifecycle events)
- Interrupted cascade and ResumeEventCancellations
- GetEvent, ListEvents, ListEventsByOrganizer, ListCategories
"""

from datetime import timedelta

import pytest
from uuid_extensions import uuid7

from src.application.commands.event_commands import (
    CancelEvent,
    CreateEvent,
    ResumeEventCancellations,
    UpdateEvent,
    UpdateEventStatus,
)
from src.application.commands.handlers.cancel_event_handler import CancelEventHandler
from src.application.commands.handlers.create_event_handler import CreateEventHandler
from src.application.commands.handlers.resume_event_cancellations_handler import (
    ResumeEventCancellationsHandler,
)
from src.application.commands.handlers.update_event_handler import UpdateEventHandler
from src.application.commands.handlers.update_event_status_handler import (
    UpdateEventStatusHandler,
)
from src.application.queries.event_queries import (
    GetEvent,
    ListCategories,
    ListEvents,
    ListEventsByOrganizer,
)
from src.application.queries.handlers.get_event_handler import GetEventHandler
from src.application.queries.handlers.list_events_handler import (
    ListCategoriesHandler,
    ListEventsByOrganizerHandler,
    ListEventsHandler,
)
from src.application.services.capacity_ledger import CapacityLedger
from src.application.services.event_cancellation import EventCancellationService
from src.core.enums import ErrorCode
from src.core.errors import (
    GoneError,
    InvalidTransitionError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from src.core.result import Failure, Success
from src.domain.enums.event_category import EventCategory
from src.domain.enums.event_status import EventStatus
from src.domain.enums.registration_status import RegistrationStatus
from src.domain.events.event_lifecycle_events import (
    EventCancellationAttempted,
    EventCancellationFailed,
    EventCancellationSucceeded,
    EventCreated,
    EventUpdated,
)
from src.infrastructure.persistence.repositories import InMemoryRegistrationRepository
from tests.conftest import create_details, create_event, create_registration


class FlakyRegistrationRepository(InMemoryRegistrationRepository):
    """Registration repository whose saves fail after a fixed number succeed."""

    def __init__(self, store, fail_after: int) -> None:
        super().__init__(store)
        self._remaining = fail_after

    async def save(self, registration) -> None:
        if self._remaining <= 0:
            raise ConnectionError("database unavailable")
        self._remaining -= 1
        await super().save(registration)


def _recorder(event_bus, *event_types):
    received = []

    async def record(event):
        received.append(event)

    for event_type in event_types:
        event_bus.subscribe(event_type, record)
    return received


@pytest.fixture
def ledger(registration_repo):
    return CapacityLedger(registration_repo)


@pytest.fixture
def cancellation(event_repo, registration_repo, admission_lock, event_bus):
    return EventCancellationService(
        event_repo, registration_repo, admission_lock, event_bus
    )


async def _seed(event_repo, registration_repo, event, statuses):
    await event_repo.save(event)
    registrations = [create_registration(event_id=event.id, status=s) for s in statuses]
    for registration in registrations:
        await registration_repo.save(registration)
    return registrations


@pytest.mark.unit
class TestCreateEvent:
    """Test CreateEventHandler."""

    @pytest.mark.asyncio
    async def test_creates_published_event(self, event_repo, event_bus):
        received = _recorder(event_bus, EventCreated)
        handler = CreateEventHandler(event_repo, event_bus)
        organizer_id = uuid7()

        result = await handler.handle(
            CreateEvent(organizer_id=organizer_id, details=create_details())
        )

        assert isinstance(result, Success)
        event = result.value.event
        assert event.status == EventStatus.PUBLISHED
        assert event.organizer_id == organizer_id
        assert result.value.registered_count == 0
        assert await event_repo.find_by_id(event.id) is not None
        assert received[0].event_entity_id == event.id
        assert received[0].capacity == 3

    @pytest.mark.asyncio
    async def test_invalid_fields_rejected_without_saving(self, event_repo, event_bus):
        handler = CreateEventHandler(event_repo, event_bus)

        result = await handler.handle(
            CreateEvent(organizer_id=uuid7(), details=create_details(capacity=0))
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_EVENT_FIELDS
        assert await event_repo.count_visible() == 0


@pytest.mark.unit
class TestUpdateEvent:
    """Test UpdateEventHandler."""

    @pytest.mark.asyncio
    async def test_overwrites_fields_and_reports_count(
        self, event_repo, registration_repo, ledger, event_bus
    ):
        received = _recorder(event_bus, EventUpdated)
        event = create_event(capacity=2)
        await _seed(event_repo, registration_repo, event, [RegistrationStatus.CONFIRMED])
        handler = UpdateEventHandler(event_repo, ledger, event_bus)

        result = await handler.handle(
            UpdateEvent(
                event_id=event.id,
                details=create_details(title="Renamed", category=EventCategory.CONFERENCE),
            )
        )

        assert isinstance(result, Success)
        assert result.value.event.title == "Renamed"
        assert result.value.event.capacity == 3
        assert result.value.registered_count == 1
        stored = await event_repo.find_by_id(event.id)
        assert stored.category == EventCategory.CONFERENCE
        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_capacity_reduction_keeps_existing_confirmations(
        self, event_repo, registration_repo, ledger, event_bus
    ):
        event = create_event(capacity=3)
        await _seed(
            event_repo,
            registration_repo,
            event,
            [RegistrationStatus.CONFIRMED] * 3,
        )
        handler = UpdateEventHandler(event_repo, ledger, event_bus)

        result = await handler.handle(
            UpdateEvent(event_id=event.id, details=create_details(capacity=1))
        )

        assert isinstance(result, Success)
        assert result.value.registered_count == 3

    @pytest.mark.asyncio
    async def test_cancelled_event_gone(self, event_repo, ledger, event_bus):
        event = create_event(status=EventStatus.CANCELLED)
        await event_repo.save(event)
        handler = UpdateEventHandler(event_repo, ledger, event_bus)

        result = await handler.handle(
            UpdateEvent(event_id=event.id, details=create_details())
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, GoneError)

    @pytest.mark.asyncio
    async def test_missing_event_not_found(self, event_repo, ledger, event_bus):
        handler = UpdateEventHandler(event_repo, ledger, event_bus)

        result = await handler.handle(
            UpdateEvent(event_id=uuid7(), details=create_details())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EVENT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_invalid_replacement_leaves_event_untouched(
        self, event_repo, ledger, event_bus
    ):
        event = create_event(title="Original")
        await event_repo.save(event)
        handler = UpdateEventHandler(event_repo, ledger, event_bus)

        result = await handler.handle(
            UpdateEvent(event_id=event.id, details=create_details(title=" "))
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_EVENT_FIELDS
        stored = await event_repo.find_by_id(event.id)
        assert stored.title == "Original"


@pytest.mark.unit
class TestUpdateEventStatus:
    """Test UpdateEventStatusHandler."""

    @pytest.fixture
    def handler(self, event_repo, ledger, cancellation, event_bus):
        return UpdateEventStatusHandler(event_repo, ledger, cancellation, event_bus)

    @pytest.mark.asyncio
    async def test_publish_draft(self, event_repo, handler):
        event = create_event(status=EventStatus.DRAFT)
        await event_repo.save(event)

        result = await handler.handle(
            UpdateEventStatus(event_id=event.id, status=EventStatus.PUBLISHED)
        )

        assert isinstance(result, Success)
        stored = await event_repo.find_by_id(event.id)
        assert stored.status == EventStatus.PUBLISHED

    @pytest.mark.asyncio
    async def test_published_back_to_draft_rejected(self, event_repo, handler):
        event = create_event()
        await event_repo.save(event)

        result = await handler.handle(
            UpdateEventStatus(event_id=event.id, status=EventStatus.DRAFT)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, InvalidTransitionError)
        assert result.error.code == ErrorCode.INVALID_STATUS_TRANSITION
        assert result.error.from_status == "published"

    @pytest.mark.asyncio
    async def test_cancelled_cannot_be_republished(self, event_repo, handler):
        event = create_event(status=EventStatus.CANCELLED)
        await event_repo.save(event)

        result = await handler.handle(
            UpdateEventStatus(event_id=event.id, status=EventStatus.PUBLISHED)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, InvalidTransitionError)

    @pytest.mark.asyncio
    async def test_setting_cancelled_runs_cascade(
        self, event_repo, registration_repo, handler
    ):
        event = create_event()
        registrations = await _seed(
            event_repo,
            registration_repo,
            event,
            [RegistrationStatus.CONFIRMED, RegistrationStatus.WAITLISTED],
        )

        result = await handler.handle(
            UpdateEventStatus(event_id=event.id, status=EventStatus.CANCELLED)
        )

        assert isinstance(result, Success)
        assert result.value.event.status == EventStatus.CANCELLED
        for registration in registrations:
            stored = await registration_repo.find_by_id(registration.id)
            assert stored.status == RegistrationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_same_status_is_silent_noop(self, event_repo, handler, event_bus):
        received = _recorder(event_bus, EventUpdated)
        event = create_event()
        await event_repo.save(event)

        result = await handler.handle(
            UpdateEventStatus(event_id=event.id, status=EventStatus.PUBLISHED)
        )

        assert isinstance(result, Success)
        assert received == []


@pytest.mark.unit
class TestCancelEvent:
    """Test CancelEventHandler and the cascade."""

    @pytest.mark.asyncio
    async def test_cancels_event_and_active_registrations(
        self, event_repo, registration_repo, cancellation, event_bus
    ):
        received = _recorder(
            event_bus, EventCancellationAttempted, EventCancellationSucceeded
        )
        event = create_event()
        registrations = await _seed(
            event_repo,
            registration_repo,
            event,
            [
                RegistrationStatus.CONFIRMED,
                RegistrationStatus.WAITLISTED,
                RegistrationStatus.CANCELLED,
            ],
        )
        handler = CancelEventHandler(event_repo, cancellation)

        result = await handler.handle(CancelEvent(event_id=event.id))

        assert isinstance(result, Success)
        assert result.value == 2
        stored = await event_repo.find_by_id(event.id)
        assert stored.status == EventStatus.CANCELLED
        assert stored.cancellation_requested_at is None
        for registration in registrations:
            refreshed = await registration_repo.find_by_id(registration.id)
            assert refreshed.status == RegistrationStatus.CANCELLED
        assert [type(e) for e in received] == [
            EventCancellationAttempted,
            EventCancellationSucceeded,
        ]
        assert received[1].cancelled_registrations == 2

    @pytest.mark.asyncio
    async def test_cancelling_twice_succeeds(
        self, event_repo, registration_repo, cancellation
    ):
        event = create_event()
        await _seed(event_repo, registration_repo, event, [RegistrationStatus.CONFIRMED])
        handler = CancelEventHandler(event_repo, cancellation)

        await handler.handle(CancelEvent(event_id=event.id))
        result = await handler.handle(CancelEvent(event_id=event.id))

        assert isinstance(result, Success)
        assert result.value == 0

    @pytest.mark.asyncio
    async def test_cancelled_event_disappears_from_listing(
        self, event_repo, ledger, cancellation
    ):
        kept, dropped = create_event(), create_event()
        await event_repo.save(kept)
        await event_repo.save(dropped)

        await CancelEventHandler(event_repo, cancellation).handle(
            CancelEvent(event_id=dropped.id)
        )
        page = await ListEventsHandler(event_repo, ledger).handle(ListEvents())

        assert [s.event.id for s in page.value.items] == [kept.id]
        assert page.value.total == 1

    @pytest.mark.asyncio
    async def test_missing_event_not_found(self, event_repo, cancellation):
        handler = CancelEventHandler(event_repo, cancellation)

        result = await handler.handle(CancelEvent(event_id=uuid7()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)


@pytest.mark.unit
class TestInterruptedCancellation:
    """Test partial cascade failure and resumption."""

    @pytest.mark.asyncio
    async def test_failure_keeps_marker_and_resume_completes(
        self, store, event_repo, registration_repo, event_bus, admission_lock
    ):
        failed = _recorder(event_bus, EventCancellationFailed)
        event = create_event(capacity=5)
        registrations = await _seed(
            event_repo,
            registration_repo,
            event,
            [RegistrationStatus.CONFIRMED] * 3,
        )
        flaky = FlakyRegistrationRepository(store, fail_after=1)
        handler = CancelEventHandler(
            event_repo,
            EventCancellationService(event_repo, flaky, admission_lock, event_bus),
        )

        result = await handler.handle(CancelEvent(event_id=event.id))

        assert isinstance(result, Failure)
        assert isinstance(result.error, StorageError)
        assert result.error.operation == "cancel registrations"
        assert failed[0].cancelled_registrations == 1
        pending = await event_repo.find_by_id(event.id)
        assert pending.status == EventStatus.PUBLISHED
        assert pending.is_cancellation_pending() is True
        assert pending.is_registration_open() is True

        resume = ResumeEventCancellationsHandler(
            event_repo,
            EventCancellationService(
                event_repo, registration_repo, admission_lock, event_bus
            ),
        )
        resumed = await resume.handle(ResumeEventCancellations())

        assert isinstance(resumed, Success)
        assert resumed.value == [event.id]
        done = await event_repo.find_by_id(event.id)
        assert done.status == EventStatus.CANCELLED
        assert done.is_cancellation_pending() is False
        for registration in registrations:
            refreshed = await registration_repo.find_by_id(registration.id)
            assert refreshed.status == RegistrationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_resume_with_nothing_pending(self, event_repo, cancellation):
        await event_repo.save(create_event())
        handler = ResumeEventCancellationsHandler(event_repo, cancellation)

        result = await handler.handle(ResumeEventCancellations())

        assert isinstance(result, Success)
        assert result.value == []


@pytest.mark.unit
class TestEventQueries:
    """Test GetEvent, ListEvents, ListEventsByOrganizer, ListCategories."""

    @pytest.mark.asyncio
    async def test_get_event_with_registered_count(
        self, event_repo, registration_repo, ledger
    ):
        event = create_event()
        await _seed(
            event_repo,
            registration_repo,
            event,
            [RegistrationStatus.CONFIRMED, RegistrationStatus.WAITLISTED],
        )

        result = await GetEventHandler(event_repo, ledger).handle(
            GetEvent(event_id=event.id)
        )

        assert isinstance(result, Success)
        assert result.value.registered_count == 1

    @pytest.mark.asyncio
    async def test_get_cancelled_event_gone(self, event_repo, ledger):
        event = create_event(status=EventStatus.CANCELLED)
        await event_repo.save(event)

        result = await GetEventHandler(event_repo, ledger).handle(
            GetEvent(event_id=event.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EVENT_CANCELLED

    @pytest.mark.asyncio
    async def test_list_pages_ordered_by_start(self, event_repo, ledger):
        later = create_event(start_in=timedelta(days=20), deadline_in=timedelta(days=19))
        sooner = create_event(start_in=timedelta(days=5), deadline_in=timedelta(days=4))
        middle = create_event(start_in=timedelta(days=10), deadline_in=timedelta(days=9))
        draft = create_event(status=EventStatus.DRAFT, start_in=timedelta(days=1))
        for event in (later, sooner, middle, draft):
            await event_repo.save(event)
        handler = ListEventsHandler(event_repo, ledger)

        first = await handler.handle(ListEvents(page=1, size=2))
        second = await handler.handle(ListEvents(page=2, size=2))

        assert [s.event.id for s in first.value.items] == [draft.id, sooner.id]
        assert [s.event.id for s in second.value.items] == [middle.id, later.id]
        assert first.value.total == 4
        assert first.value.pages == 2

    @pytest.mark.asyncio
    async def test_page_beyond_end_is_empty(self, event_repo, ledger):
        await event_repo.save(create_event())

        result = await ListEventsHandler(event_repo, ledger).handle(
            ListEvents(page=5, size=10)
        )

        assert isinstance(result, Success)
        assert result.value.items == []
        assert result.value.total == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("page", "size"), [(0, 10), (1, 0), (1, 101)])
    async def test_invalid_page_rejected(self, event_repo, ledger, page, size):
        result = await ListEventsHandler(event_repo, ledger).handle(
            ListEvents(page=page, size=size)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PAGE

    @pytest.mark.asyncio
    async def test_list_by_organizer(self, event_repo, ledger):
        organizer_id = uuid7()
        mine = create_event(organizer_id=organizer_id)
        await event_repo.save(mine)
        await event_repo.save(create_event())

        result = await ListEventsByOrganizerHandler(event_repo, ledger).handle(
            ListEventsByOrganizer(organizer_id=organizer_id)
        )

        assert [s.event.id for s in result.value.items] == [mine.id]
        assert result.value.total == 1

    @pytest.mark.asyncio
    async def test_list_by_organizer_hides_own_cancelled_events(
        self, event_repo, ledger, cancellation
    ):
        organizer_id = uuid7()
        kept = create_event(organizer_id=organizer_id)
        dropped = create_event(organizer_id=organizer_id)
        await event_repo.save(kept)
        await event_repo.save(dropped)
        await CancelEventHandler(event_repo, cancellation).handle(
            CancelEvent(event_id=dropped.id)
        )

        result = await ListEventsByOrganizerHandler(event_repo, ledger).handle(
            ListEventsByOrganizer(organizer_id=organizer_id)
        )

        assert [s.event.id for s in result.value.items] == [kept.id]
        assert result.value.total == 1

    @pytest.mark.asyncio
    async def test_categories(self):
        result = await ListCategoriesHandler().handle(ListCategories())

        assert isinstance(result, Success)
        assert EventCategory.WORKSHOP in result.value
        assert len(result.value) == len(EventCategory)
