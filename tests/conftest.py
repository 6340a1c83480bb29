"""Pytest configuration and shared test helpers.

The environment is fixed before any src module is imported: settings are
loaded once per process (lru_cache), so tests always run with the
in-memory repositories, JSON logging and a known JWT secret.
"""

import os

os.environ.update(
    {
        "ENVIRONMENT": "testing",
        "DATABASE_URL": "sqlite+aiosqlite://",
        "SECRET_KEY": "test-secret-key-that-is-at-least-32-characters",
        "STORAGE_BACKEND": "memory",
        "LOG_LEVEL": "WARNING",
    }
)

import inspect  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.application.dtos.event_dtos import EventDetails  # noqa: E402
from src.domain.entities.event import Event  # noqa: E402
from src.domain.entities.registration import Registration  # noqa: E402
from src.domain.enums.event_category import EventCategory  # noqa: E402
from src.domain.enums.event_status import EventStatus  # noqa: E402
from src.domain.enums.location_type import LocationType  # noqa: E402
from src.domain.enums.registration_status import RegistrationStatus  # noqa: E402
from src.domain.value_objects.location import Location  # noqa: E402
from src.infrastructure.concurrency import InMemoryAdmissionLock  # noqa: E402
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus  # noqa: E402
from src.infrastructure.persistence.repositories import (  # noqa: E402
    InMemoryEventRepository,
    InMemoryRegistrationRepository,
    InMemoryStore,
)


# =============================================================================
# Test helper functions for domain entities
# =============================================================================


def online_location() -> Location:
    return Location(type=LocationType.ONLINE, virtual_link="https://meet.example.com/x")


def create_event(
    *,
    organizer_id: UUID | None = None,
    capacity: int = 2,
    status: EventStatus = EventStatus.PUBLISHED,
    start_in: timedelta = timedelta(days=7),
    deadline_in: timedelta = timedelta(days=6),
    title: str = "Python Meetup",
) -> Event:
    """Helper to create an Event for testing.

    Args:
        organizer_id: Owner (random when omitted).
        capacity: Maximum confirmed registrations.
        status: Lifecycle status.
        start_in: Offset of the start time from now (event lasts 2 hours).
        deadline_in: Offset of the registration deadline from now.
        title: Display title.

    Usage:
        # Published event, two seats, deadline tomorrow-ish
        event = create_event()

        # Registration already closed
        event = create_event(deadline_in=timedelta(hours=-1))
    """
    now = datetime.now(UTC)
    start = now + start_in
    return Event(
        id=uuid7(),
        organizer_id=organizer_id or uuid7(),
        title=title,
        description="Monthly community meetup",
        category=EventCategory.SOCIAL,
        start_at=start,
        end_at=start + timedelta(hours=2),
        location=online_location(),
        capacity=capacity,
        registration_deadline=now + deadline_in,
        status=status,
    )


def create_details(**overrides: object) -> EventDetails:
    """Helper to create EventDetails (create/update payload) for testing."""
    now = datetime.now(UTC)
    values: dict[str, object] = {
        "title": "Python Meetup",
        "description": "Monthly community meetup",
        "category": EventCategory.WORKSHOP,
        "start_at": now + timedelta(days=10),
        "end_at": now + timedelta(days=10, hours=3),
        "location": online_location(),
        "capacity": 3,
        "registration_deadline": now + timedelta(days=9),
        "tags": ["python"],
    }
    values.update(overrides)
    return EventDetails(**values)  # type: ignore[arg-type]


def create_registration(
    *,
    event_id: UUID,
    user_id: UUID | None = None,
    status: RegistrationStatus = RegistrationStatus.CONFIRMED,
    registration_date: datetime | None = None,
) -> Registration:
    """Helper to create a Registration in a given status for testing."""
    return Registration(
        id=uuid7(),
        event_id=event_id,
        user_id=user_id or uuid7(),
        status=status,
        registration_date=registration_date or datetime.now(UTC),
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_memory_store():
    """Empty the process-wide in-memory store around every test."""
    from src.core.container import get_memory_store

    get_memory_store().clear()
    yield
    get_memory_store().clear()


@pytest.fixture
def store() -> InMemoryStore:
    """Fresh store, independent of the container singleton."""
    return InMemoryStore()


@pytest.fixture
def event_repo(store) -> InMemoryEventRepository:
    return InMemoryEventRepository(store)


@pytest.fixture
def registration_repo(store) -> InMemoryRegistrationRepository:
    return InMemoryRegistrationRepository(store)


@pytest.fixture
def admission_lock() -> InMemoryAdmissionLock:
    """Lock shared by every handler built in one test."""
    return InMemoryAdmissionLock()


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def event_bus(mock_logger) -> InMemoryEventBus:
    """Event bus with no subscribers; tests subscribe what they observe."""
    return InMemoryEventBus(logger=mock_logger)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through TestClient")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
