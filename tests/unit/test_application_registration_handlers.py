"""Unit tests for registration command handlers.

Scenario tests run the handlers against the in-memory repositories and a
real admission lock. Storage failures are simulated with AsyncMock.

Tests cover:
- Admission: CONFIRMED below capacity, WAITLISTED at capacity
- Concurrent admissions never overfill an event
- Rejections: missing, cancelled, draft, closed events, duplicates
- Re-registration after cancellation
- Owner-only, idempotent cancellation without automatic promotion
- Organizer/admin status edits and attendance
- Explicit FIFO waitlist promotion
- Cancellation cascades and admissions for one event never interleave
"""

import asyncio
from contextlib import asynccontextmanager
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.application.commands.event_commands import CancelEvent
from src.application.commands.handlers.cancel_event_handler import CancelEventHandler
from src.application.commands.handlers.cancel_registration_handler import (
    CancelRegistrationHandler,
)
from src.application.commands.handlers.mark_attendance_handler import (
    MarkAttendanceHandler,
)
from src.application.commands.handlers.promote_waitlist_handler import (
    PromoteWaitlistHandler,
)
from src.application.commands.handlers.register_for_event_handler import (
    RegisterForEventHandler,
)
from src.application.commands.handlers.update_registration_handler import (
    UpdateRegistrationHandler,
)
from src.application.commands.registration_commands import (
    CancelRegistration,
    MarkAttendance,
    PromoteWaitlist,
    RegisterForEvent,
    UpdateRegistration,
)
from src.application.services.capacity_ledger import CapacityLedger
from src.application.services.event_cancellation import EventCancellationService
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    GoneError,
    InvalidTransitionError,
    NotFoundError,
    StorageError,
)
from src.core.result import Failure, Success
from src.domain.enums.event_status import EventStatus
from src.domain.enums.registration_status import RegistrationStatus
from src.domain.events.registration_events import (
    RegistrationCancelled,
    RegistrationCreated,
    RegistrationStatusChanged,
    WaitlistPromoted,
)
from src.infrastructure.concurrency import InMemoryAdmissionLock
from src.infrastructure.persistence.repositories import InMemoryRegistrationRepository
from tests.conftest import create_event, create_registration


@pytest.fixture
def ledger(registration_repo):
    return CapacityLedger(registration_repo)


@pytest.fixture
def register_handler(event_repo, registration_repo, ledger, admission_lock, event_bus):
    return RegisterForEventHandler(
        event_repo=event_repo,
        registration_repo=registration_repo,
        ledger=ledger,
        admission_lock=admission_lock,
        event_bus=event_bus,
    )


class YieldingRegistrationRepository(InMemoryRegistrationRepository):
    """Gives up the event loop after counting and before saving.

    Concurrent admissions interleave between the capacity check and the
    insert unless something serializes them.
    """

    async def count_by_event_and_status(self, event_id, status) -> int:
        count = await super().count_by_event_and_status(event_id, status)
        await asyncio.sleep(0)
        return count

    async def save(self, registration) -> None:
        await asyncio.sleep(0)
        await super().save(registration)


class NoAdmissionLock:
    """Admission lock that excludes nothing."""

    @asynccontextmanager
    async def hold(self, event_id):
        yield


async def _register_burst(event_repo, registration_repo, admission_lock, event_bus):
    event = create_event(capacity=3)
    await event_repo.save(event)
    handler = RegisterForEventHandler(
        event_repo=event_repo,
        registration_repo=registration_repo,
        ledger=CapacityLedger(registration_repo),
        admission_lock=admission_lock,
        event_bus=event_bus,
    )
    results = await asyncio.gather(
        *(
            handler.handle(RegisterForEvent(user_id=uuid7(), event_id=event.id))
            for _ in range(10)
        )
    )
    return [r.value.status for r in results if isinstance(r, Success)]


@pytest.fixture
def cancel_handler(registration_repo, event_bus):
    return CancelRegistrationHandler(
        registration_repo=registration_repo, event_bus=event_bus
    )


def _recorder(event_bus, event_type):
    received = []

    async def record(event):
        received.append(event)

    event_bus.subscribe(event_type, record)
    return received


@pytest.mark.unit
class TestRegisterForEvent:
    """Test the admission decision."""

    @pytest.mark.asyncio
    async def test_confirmed_then_waitlisted_at_capacity(
        self, event_repo, register_handler
    ):
        event = create_event(capacity=1)
        await event_repo.save(event)

        first = await register_handler.handle(
            RegisterForEvent(user_id=uuid7(), event_id=event.id)
        )
        second = await register_handler.handle(
            RegisterForEvent(user_id=uuid7(), event_id=event.id)
        )

        assert isinstance(first, Success)
        assert first.value.status == RegistrationStatus.CONFIRMED
        assert isinstance(second, Success)
        assert second.value.status == RegistrationStatus.WAITLISTED

    @pytest.mark.asyncio
    async def test_publishes_registration_created(
        self, event_repo, register_handler, event_bus
    ):
        received = _recorder(event_bus, RegistrationCreated)
        event = create_event()
        await event_repo.save(event)
        user_id = uuid7()

        result = await register_handler.handle(
            RegisterForEvent(user_id=user_id, event_id=event.id, notes="Aisle seat")
        )

        assert isinstance(result, Success)
        assert result.value.notes == "Aisle seat"
        assert len(received) == 1
        assert received[0].event_entity_id == event.id
        assert received[0].user_id == user_id
        assert received[0].status == RegistrationStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_concurrent_registrations_never_exceed_capacity(
        self, store, event_repo, event_bus
    ):
        registration_repo = YieldingRegistrationRepository(store)

        statuses = await _register_burst(
            event_repo, registration_repo, InMemoryAdmissionLock(), event_bus
        )

        assert len(statuses) == 10
        assert statuses.count(RegistrationStatus.CONFIRMED) == 3
        assert statuses.count(RegistrationStatus.WAITLISTED) == 7
        stored = [r.status for r in store.registrations.values()]
        assert stored.count(RegistrationStatus.CONFIRMED) == 3

    @pytest.mark.asyncio
    async def test_unserialized_admissions_overfill(self, store, event_repo, event_bus):
        registration_repo = YieldingRegistrationRepository(store)

        statuses = await _register_burst(
            event_repo, registration_repo, NoAdmissionLock(), event_bus
        )

        assert statuses.count(RegistrationStatus.CONFIRMED) > 3

    @pytest.mark.asyncio
    async def test_unknown_event_not_found(self, register_handler):
        event_id = uuid7()

        result = await register_handler.handle(
            RegisterForEvent(user_id=uuid7(), event_id=event_id)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.resource_id == str(event_id)

    @pytest.mark.asyncio
    async def test_cancelled_event_gone(self, event_repo, register_handler):
        event = create_event(status=EventStatus.CANCELLED)
        await event_repo.save(event)

        result = await register_handler.handle(
            RegisterForEvent(user_id=uuid7(), event_id=event.id)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, GoneError)
        assert result.error.code == ErrorCode.EVENT_CANCELLED

    @pytest.mark.asyncio
    async def test_draft_event_conflict(self, event_repo, register_handler):
        event = create_event(status=EventStatus.DRAFT)
        await event_repo.save(event)

        result = await register_handler.handle(
            RegisterForEvent(user_id=uuid7(), event_id=event.id)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.EVENT_NOT_PUBLISHED

    @pytest.mark.asyncio
    async def test_after_deadline_conflict(self, event_repo, register_handler):
        event = create_event(deadline_in=timedelta(hours=-1))
        await event_repo.save(event)

        result = await register_handler.handle(
            RegisterForEvent(user_id=uuid7(), event_id=event.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.REGISTRATION_CLOSED

    @pytest.mark.asyncio
    async def test_duplicate_active_registration_conflict(
        self, event_repo, register_handler
    ):
        event = create_event()
        await event_repo.save(event)
        user_id = uuid7()
        first = await register_handler.handle(
            RegisterForEvent(user_id=user_id, event_id=event.id)
        )

        second = await register_handler.handle(
            RegisterForEvent(user_id=user_id, event_id=event.id)
        )

        assert isinstance(second, Failure)
        assert isinstance(second.error, ConflictError)
        assert second.error.code == ErrorCode.REGISTRATION_ALREADY_EXISTS
        assert second.error.details == {"registration_id": str(first.value.id)}

    @pytest.mark.asyncio
    async def test_reregistration_after_cancellation_allowed(
        self, event_repo, register_handler, cancel_handler
    ):
        event = create_event()
        await event_repo.save(event)
        user_id = uuid7()
        first = await register_handler.handle(
            RegisterForEvent(user_id=user_id, event_id=event.id)
        )
        await cancel_handler.handle(
            CancelRegistration(registration_id=first.value.id, acting_user_id=user_id)
        )

        again = await register_handler.handle(
            RegisterForEvent(user_id=user_id, event_id=event.id)
        )

        assert isinstance(again, Success)
        assert again.value.id != first.value.id
        assert again.value.status == RegistrationStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_storage_failure_on_save(self, event_repo, event_bus):
        event = create_event()
        await event_repo.save(event)
        registration_repo = AsyncMock()
        registration_repo.find_active.return_value = None
        registration_repo.count_by_event_and_status.return_value = 0
        registration_repo.save.side_effect = RuntimeError("disk full")
        handler = RegisterForEventHandler(
            event_repo=event_repo,
            registration_repo=registration_repo,
            ledger=CapacityLedger(registration_repo),
            admission_lock=InMemoryAdmissionLock(),
            event_bus=event_bus,
        )
        received = _recorder(event_bus, RegistrationCreated)

        result = await handler.handle(RegisterForEvent(user_id=uuid7(), event_id=event.id))

        assert isinstance(result, Failure)
        assert isinstance(result.error, StorageError)
        assert result.error.operation == "save registration"
        assert result.error.details["error_type"] == "RuntimeError"
        assert received == []

    @pytest.mark.asyncio
    async def test_unique_index_violation_is_duplicate_conflict(
        self, event_repo, event_bus
    ):
        event = create_event()
        await event_repo.save(event)
        registration_repo = AsyncMock()
        registration_repo.find_active.return_value = None
        registration_repo.count_by_event_and_status.return_value = 0
        registration_repo.save.side_effect = IntegrityError(
            "INSERT INTO registrations", {}, Exception("UNIQUE constraint failed")
        )
        handler = RegisterForEventHandler(
            event_repo=event_repo,
            registration_repo=registration_repo,
            ledger=CapacityLedger(registration_repo),
            admission_lock=InMemoryAdmissionLock(),
            event_bus=event_bus,
        )

        result = await handler.handle(RegisterForEvent(user_id=uuid7(), event_id=event.id))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.REGISTRATION_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_event_with_pending_cancellation_is_gone(
        self, event_repo, registration_repo, register_handler
    ):
        event = create_event()
        event.begin_cancellation()
        await event_repo.save(event)

        result = await register_handler.handle(
            RegisterForEvent(user_id=uuid7(), event_id=event.id)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, GoneError)
        assert await registration_repo.find_by_event_id(event.id) == []


@pytest.mark.unit
class TestCancelRegistration:
    """Test owner-only cancellation."""

    @pytest.mark.asyncio
    async def test_owner_cancels(self, registration_repo, cancel_handler, event_bus):
        received = _recorder(event_bus, RegistrationCancelled)
        registration = create_registration(event_id=uuid7())
        await registration_repo.save(registration)

        result = await cancel_handler.handle(
            CancelRegistration(
                registration_id=registration.id, acting_user_id=registration.user_id
            )
        )

        assert isinstance(result, Success)
        assert result.value.status == RegistrationStatus.CANCELLED
        stored = await registration_repo.find_by_id(registration.id)
        assert stored.status == RegistrationStatus.CANCELLED
        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_other_user_forbidden_and_unchanged(
        self, registration_repo, cancel_handler
    ):
        registration = create_registration(event_id=uuid7())
        await registration_repo.save(registration)

        result = await cancel_handler.handle(
            CancelRegistration(registration_id=registration.id, acting_user_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.REGISTRATION_NOT_OWNED
        stored = await registration_repo.find_by_id(registration.id)
        assert stored.status == RegistrationStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_second_cancel_succeeds_without_event(
        self, registration_repo, cancel_handler, event_bus
    ):
        received = _recorder(event_bus, RegistrationCancelled)
        registration = create_registration(event_id=uuid7())
        await registration_repo.save(registration)
        cmd = CancelRegistration(
            registration_id=registration.id, acting_user_id=registration.user_id
        )

        await cancel_handler.handle(cmd)
        result = await cancel_handler.handle(cmd)

        assert isinstance(result, Success)
        assert result.value.status == RegistrationStatus.CANCELLED
        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_missing_registration_not_found(self, cancel_handler):
        result = await cancel_handler.handle(
            CancelRegistration(registration_id=uuid7(), acting_user_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.REGISTRATION_NOT_FOUND

    @pytest.mark.asyncio
    async def test_freed_slot_is_not_given_to_waitlist(
        self, event_repo, registration_repo, register_handler, cancel_handler
    ):
        event = create_event(capacity=1)
        await event_repo.save(event)
        holder = await register_handler.handle(
            RegisterForEvent(user_id=uuid7(), event_id=event.id)
        )
        waiting = await register_handler.handle(
            RegisterForEvent(user_id=uuid7(), event_id=event.id)
        )

        await cancel_handler.handle(
            CancelRegistration(
                registration_id=holder.value.id, acting_user_id=holder.value.user_id
            )
        )

        stored = await registration_repo.find_by_id(waiting.value.id)
        assert stored.status == RegistrationStatus.WAITLISTED

    @pytest.mark.asyncio
    async def test_freed_slot_goes_to_next_registrant(
        self, event_repo, registration_repo, register_handler, cancel_handler, ledger
    ):
        event = create_event(capacity=2)
        await event_repo.save(event)
        a, b, c, d = (uuid7() for _ in range(4))

        async def register(user_id):
            return await register_handler.handle(
                RegisterForEvent(user_id=user_id, event_id=event.id)
            )

        reg_a = await register(a)
        reg_b = await register(b)
        reg_c = await register(c)
        await cancel_handler.handle(
            CancelRegistration(registration_id=reg_a.value.id, acting_user_id=a)
        )
        reg_d = await register(d)

        assert reg_a.value.status == RegistrationStatus.CONFIRMED
        assert reg_b.value.status == RegistrationStatus.CONFIRMED
        assert reg_c.value.status == RegistrationStatus.WAITLISTED
        assert reg_d.value.status == RegistrationStatus.CONFIRMED
        stored_c = await registration_repo.find_by_id(reg_c.value.id)
        assert stored_c.status == RegistrationStatus.WAITLISTED
        assert await ledger.confirmed_count(event.id) == 2


@pytest.mark.unit
class TestUpdateRegistration:
    """Test organizer/admin status edits."""

    @pytest.mark.asyncio
    async def test_waitlisted_to_confirmed(self, registration_repo, event_bus):
        received = _recorder(event_bus, RegistrationStatusChanged)
        registration = create_registration(
            event_id=uuid7(), status=RegistrationStatus.WAITLISTED
        )
        await registration_repo.save(registration)
        handler = UpdateRegistrationHandler(registration_repo, event_bus)

        result = await handler.handle(
            UpdateRegistration(
                registration_id=registration.id,
                status=RegistrationStatus.CONFIRMED,
                notes="Moved up",
            )
        )

        assert isinstance(result, Success)
        assert result.value.status == RegistrationStatus.CONFIRMED
        assert result.value.notes == "Moved up"
        assert received[0].old_status == RegistrationStatus.WAITLISTED
        assert received[0].new_status == RegistrationStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_cancelled_cannot_be_reactivated(self, registration_repo, event_bus):
        registration = create_registration(
            event_id=uuid7(), status=RegistrationStatus.CANCELLED
        )
        await registration_repo.save(registration)
        handler = UpdateRegistrationHandler(registration_repo, event_bus)

        result = await handler.handle(
            UpdateRegistration(
                registration_id=registration.id, status=RegistrationStatus.CONFIRMED
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, InvalidTransitionError)
        assert result.error.from_status == "cancelled"
        assert result.error.to_status == "confirmed"

    @pytest.mark.asyncio
    async def test_notes_only_edit_publishes_nothing(self, registration_repo, event_bus):
        received = _recorder(event_bus, RegistrationStatusChanged)
        registration = create_registration(event_id=uuid7())
        await registration_repo.save(registration)
        handler = UpdateRegistrationHandler(registration_repo, event_bus)

        result = await handler.handle(
            UpdateRegistration(
                registration_id=registration.id,
                status=RegistrationStatus.CONFIRMED,
                notes="Bringing a friend",
            )
        )

        assert isinstance(result, Success)
        assert received == []


@pytest.mark.unit
class TestMarkAttendance:
    """Test attendance flag."""

    @pytest.mark.asyncio
    async def test_marks_attended(self, registration_repo, event_bus):
        registration = create_registration(event_id=uuid7())
        await registration_repo.save(registration)
        handler = MarkAttendanceHandler(registration_repo, event_bus)

        result = await handler.handle(
            MarkAttendance(registration_id=registration.id, attended=True)
        )

        assert isinstance(result, Success)
        stored = await registration_repo.find_by_id(registration.id)
        assert stored.attended is True

    @pytest.mark.asyncio
    async def test_missing_registration(self, registration_repo, event_bus):
        handler = MarkAttendanceHandler(registration_repo, event_bus)

        result = await handler.handle(MarkAttendance(registration_id=uuid7(), attended=True))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)


@pytest.mark.unit
class TestPromoteWaitlist:
    """Test explicit FIFO promotion."""

    @pytest.fixture
    def promote_handler(
        self, event_repo, registration_repo, ledger, admission_lock, event_bus
    ):
        return PromoteWaitlistHandler(
            event_repo=event_repo,
            registration_repo=registration_repo,
            ledger=ledger,
            admission_lock=admission_lock,
            event_bus=event_bus,
        )

    @pytest.mark.asyncio
    async def test_promotes_oldest_first_up_to_capacity(
        self, event_repo, registration_repo, promote_handler, event_bus
    ):
        received = _recorder(event_bus, WaitlistPromoted)
        event = create_event(capacity=3)
        await event_repo.save(event)
        await registration_repo.save(create_registration(event_id=event.id))
        base = datetime.now(UTC)
        waitlisted = [
            create_registration(
                event_id=event.id,
                status=RegistrationStatus.WAITLISTED,
                registration_date=base + timedelta(minutes=offset),
            )
            for offset in (3, 1, 2)
        ]
        for registration in waitlisted:
            await registration_repo.save(registration)

        result = await promote_handler.handle(PromoteWaitlist(event_id=event.id))

        assert isinstance(result, Success)
        promoted_ids = [r.id for r in result.value.promoted]
        assert promoted_ids == [waitlisted[1].id, waitlisted[2].id]
        assert result.value.remaining_waitlisted == 1
        assert len(received) == 2
        last = await registration_repo.find_by_id(waitlisted[0].id)
        assert last.status == RegistrationStatus.WAITLISTED

    @pytest.mark.asyncio
    async def test_full_event_promotes_nobody(
        self, event_repo, registration_repo, promote_handler
    ):
        event = create_event(capacity=1)
        await event_repo.save(event)
        await registration_repo.save(create_registration(event_id=event.id))
        await registration_repo.save(
            create_registration(event_id=event.id, status=RegistrationStatus.WAITLISTED)
        )

        result = await promote_handler.handle(PromoteWaitlist(event_id=event.id))

        assert isinstance(result, Success)
        assert result.value.promoted == []
        assert result.value.remaining_waitlisted == 1

    @pytest.mark.asyncio
    async def test_cancelled_event_gone(self, event_repo, promote_handler):
        event = create_event(status=EventStatus.CANCELLED)
        await event_repo.save(event)

        result = await promote_handler.handle(PromoteWaitlist(event_id=event.id))

        assert isinstance(result, Failure)
        assert isinstance(result.error, GoneError)

    @pytest.mark.asyncio
    async def test_event_with_pending_cancellation_gone(
        self, event_repo, registration_repo, promote_handler
    ):
        event = create_event(capacity=2)
        event.begin_cancellation()
        await event_repo.save(event)
        waiting = create_registration(
            event_id=event.id, status=RegistrationStatus.WAITLISTED
        )
        await registration_repo.save(waiting)

        result = await promote_handler.handle(PromoteWaitlist(event_id=event.id))

        assert isinstance(result, Failure)
        assert isinstance(result.error, GoneError)
        stored = await registration_repo.find_by_id(waiting.id)
        assert stored.status == RegistrationStatus.WAITLISTED


class PausingRegistrationRepository(InMemoryRegistrationRepository):
    """Stops inside find_by_event_id until released."""

    def __init__(self, store) -> None:
        super().__init__(store)
        self.reached = asyncio.Event()
        self.release = asyncio.Event()

    async def find_by_event_id(self, event_id):
        self.reached.set()
        await self.release.wait()
        return await super().find_by_event_id(event_id)


@pytest.mark.unit
class TestAdmissionDuringCancellation:
    """Test that a cascade and an admission for one event never interleave."""

    @pytest.mark.asyncio
    async def test_registration_waits_for_cascade_and_is_rejected(
        self,
        store,
        event_repo,
        registration_repo,
        admission_lock,
        register_handler,
        event_bus,
    ):
        event = create_event(capacity=5)
        await event_repo.save(event)
        paused = PausingRegistrationRepository(store)
        cancel_handler = CancelEventHandler(
            event_repo,
            EventCancellationService(event_repo, paused, admission_lock, event_bus),
        )

        cascade_task = asyncio.create_task(
            cancel_handler.handle(CancelEvent(event_id=event.id))
        )
        await paused.reached.wait()
        register_task = asyncio.create_task(
            register_handler.handle(
                RegisterForEvent(user_id=uuid7(), event_id=event.id)
            )
        )
        for _ in range(5):
            await asyncio.sleep(0)
        assert not register_task.done()

        paused.release.set()
        cascade = await cascade_task
        registered = await register_task

        assert isinstance(cascade, Success)
        assert isinstance(registered, Failure)
        assert isinstance(registered.error, GoneError)
        stored_event = await event_repo.find_by_id(event.id)
        assert stored_event.status == EventStatus.CANCELLED
        registrations = await registration_repo.find_by_event_id(event.id)
        assert [r for r in registrations if r.is_active()] == []

    @pytest.mark.asyncio
    async def test_registration_committed_first_is_swept(
        self, event_repo, registration_repo, register_handler, admission_lock, event_bus
    ):
        event = create_event(capacity=5)
        await event_repo.save(event)
        cancel_handler = CancelEventHandler(
            event_repo,
            EventCancellationService(
                event_repo, registration_repo, admission_lock, event_bus
            ),
        )

        registered, cascade = await asyncio.gather(
            register_handler.handle(
                RegisterForEvent(user_id=uuid7(), event_id=event.id)
            ),
            cancel_handler.handle(CancelEvent(event_id=event.id)),
        )

        assert isinstance(registered, Success)
        assert cascade.value == 1
        stored = await registration_repo.find_by_id(registered.value.id)
        assert stored.status == RegistrationStatus.CANCELLED
