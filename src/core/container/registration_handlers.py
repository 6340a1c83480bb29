"""Registration handler factories.

Request-scoped handler instances for registration commands and the
dashboard/registration queries. Admission handlers share the app-scoped
admission lock so capacity decisions for one event are serialized.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_admission_lock
from src.core.container.repositories import (
    get_event_repository,
    get_registration_repository,
)
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.registration_repository import RegistrationRepository

if TYPE_CHECKING:
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
    from src.application.queries.handlers.list_registrations_handler import (
        ListRegistrationsByEventHandler,
        ListRegistrationsByUserHandler,
    )
    from src.application.queries.handlers.registration_projection_handler import (
        ListActiveRegistrationsWithEventHandler,
        ListConfirmedRegistrationsWithEventHandler,
    )


# ============================================================================
# Command Handlers
# ============================================================================


async def get_register_for_event_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "RegisterForEventHandler":
    """Get RegisterForEvent command handler (request-scoped).

    Returns:
        RegisterForEventHandler wired to the shared admission lock.
    """
    from src.application.commands.handlers.register_for_event_handler import (
        RegisterForEventHandler,
    )
    from src.application.services.capacity_ledger import CapacityLedger

    return RegisterForEventHandler(
        event_repo=event_repo,
        registration_repo=registration_repo,
        ledger=CapacityLedger(registration_repo=registration_repo),
        admission_lock=get_admission_lock(),
        event_bus=get_event_bus(),
    )


async def get_update_registration_handler(
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "UpdateRegistrationHandler":
    """Get UpdateRegistration command handler (request-scoped)."""
    from src.application.commands.handlers.update_registration_handler import (
        UpdateRegistrationHandler,
    )

    return UpdateRegistrationHandler(
        registration_repo=registration_repo, event_bus=get_event_bus()
    )


async def get_cancel_registration_handler(
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "CancelRegistrationHandler":
    """Get CancelRegistration command handler (request-scoped)."""
    from src.application.commands.handlers.cancel_registration_handler import (
        CancelRegistrationHandler,
    )

    return CancelRegistrationHandler(
        registration_repo=registration_repo, event_bus=get_event_bus()
    )


async def get_mark_attendance_handler(
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "MarkAttendanceHandler":
    from src.application.commands.handlers.mark_attendance_handler import (
        MarkAttendanceHandler,
    )

    return MarkAttendanceHandler(
        registration_repo=registration_repo, event_bus=get_event_bus()
    )


async def get_promote_waitlist_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "PromoteWaitlistHandler":
    """Get PromoteWaitlist command handler (request-scoped)."""
    from src.application.commands.handlers.promote_waitlist_handler import (
        PromoteWaitlistHandler,
    )
    from src.application.services.capacity_ledger import CapacityLedger

    return PromoteWaitlistHandler(
        event_repo=event_repo,
        registration_repo=registration_repo,
        ledger=CapacityLedger(registration_repo=registration_repo),
        admission_lock=get_admission_lock(),
        event_bus=get_event_bus(),
    )


# ============================================================================
# Query Handlers
# ============================================================================


async def get_list_registrations_by_user_handler(
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "ListRegistrationsByUserHandler":
    from src.application.queries.handlers.list_registrations_handler import (
        ListRegistrationsByUserHandler,
    )

    return ListRegistrationsByUserHandler(registration_repo=registration_repo)


async def get_list_registrations_by_event_handler(
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "ListRegistrationsByEventHandler":
    from src.application.queries.handlers.list_registrations_handler import (
        ListRegistrationsByEventHandler,
    )

    return ListRegistrationsByEventHandler(registration_repo=registration_repo)


async def get_list_active_registrations_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "ListActiveRegistrationsWithEventHandler":
    """Get dashboard (active registrations) query handler (request-scoped)."""
    from src.application.queries.handlers.registration_projection_handler import (
        ListActiveRegistrationsWithEventHandler,
        RegistrationProjector,
    )

    return ListActiveRegistrationsWithEventHandler(
        projector=RegistrationProjector(
            registration_repo=registration_repo, event_repo=event_repo
        )
    )


async def get_list_confirmed_registrations_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
) -> "ListConfirmedRegistrationsWithEventHandler":
    """Get dashboard (confirmed registrations) query handler (request-scoped)."""
    from src.application.queries.handlers.registration_projection_handler import (
        ListConfirmedRegistrationsWithEventHandler,
        RegistrationProjector,
    )

    return ListConfirmedRegistrationsWithEventHandler(
        projector=RegistrationProjector(
            registration_repo=registration_repo, event_repo=event_repo
        )
    )
