"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_event_bus, get_register_for_event_handler

The container is organized into modules:
- infrastructure: Core services (db, memory store, logging, tokens, locks)
- events: Event bus and subscriptions
- repositories: Repository factories (database or memory backend)
- event_handlers: Event lifecycle handler factories
- registration_handlers: Registration handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_admission_lock,
    get_database,
    get_db_session,
    get_logger,
    get_memory_store,
    get_token_service,
)

# Event bus
from src.core.container.events import get_event_bus

# Repositories
from src.core.container.repositories import (
    get_event_repository,
    get_registration_repository,
)

# Event handlers
from src.core.container.event_handlers import (
    get_cancel_event_handler,
    get_create_event_handler,
    get_get_event_handler,
    get_list_categories_handler,
    get_list_events_by_organizer_handler,
    get_list_events_handler,
    get_resume_event_cancellations_handler,
    get_update_event_handler,
    get_update_event_status_handler,
)

# Registration handlers
from src.core.container.registration_handlers import (
    get_cancel_registration_handler,
    get_list_active_registrations_handler,
    get_list_confirmed_registrations_handler,
    get_list_registrations_by_event_handler,
    get_list_registrations_by_user_handler,
    get_mark_attendance_handler,
    get_promote_waitlist_handler,
    get_register_for_event_handler,
    get_update_registration_handler,
)

__all__ = [
    # Infrastructure
    "get_admission_lock",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_memory_store",
    "get_token_service",
    # Events
    "get_event_bus",
    # Repositories
    "get_event_repository",
    "get_registration_repository",
    # Event handlers
    "get_cancel_event_handler",
    "get_create_event_handler",
    "get_get_event_handler",
    "get_list_categories_handler",
    "get_list_events_by_organizer_handler",
    "get_list_events_handler",
    "get_resume_event_cancellations_handler",
    "get_update_event_handler",
    "get_update_event_status_handler",
    # Registration handlers
    "get_cancel_registration_handler",
    "get_list_active_registrations_handler",
    "get_list_confirmed_registrations_handler",
    "get_list_registrations_by_event_handler",
    "get_list_registrations_by_user_handler",
    "get_mark_attendance_handler",
    "get_promote_waitlist_handler",
    "get_register_for_event_handler",
    "get_update_registration_handler",
]
