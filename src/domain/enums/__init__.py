"""Domain enums for business logic.

Available Enums:
    - EventStatus: Event lifecycle (draft, published, cancelled)
    - EventCategory: Event classification
    - LocationType: Physical, online, hybrid
    - RegistrationStatus: Registration lifecycle (confirmed, waitlisted, cancelled)
    - UserRole: Actor roles (admin, organizer, attendee)
"""

from src.domain.enums.event_category import EventCategory
from src.domain.enums.event_status import EventStatus
from src.domain.enums.location_type import LocationType
from src.domain.enums.registration_status import RegistrationStatus
from src.domain.enums.user_role import UserRole

__all__ = [
    "EventCategory",
    "EventStatus",
    "LocationType",
    "RegistrationStatus",
    "UserRole",
]
