"""Queries (CQRS read operations)."""

from src.application.queries.event_queries import (
    GetEvent,
    ListCategories,
    ListEvents,
    ListEventsByOrganizer,
)
from src.application.queries.registration_queries import (
    ListActiveRegistrationsWithEvent,
    ListConfirmedRegistrationsWithEvent,
    ListRegistrationsByEvent,
    ListRegistrationsByUser,
)

__all__ = [
    "GetEvent",
    "ListActiveRegistrationsWithEvent",
    "ListCategories",
    "ListConfirmedRegistrationsWithEvent",
    "ListEvents",
    "ListEventsByOrganizer",
    "ListRegistrationsByEvent",
    "ListRegistrationsByUser",
]
