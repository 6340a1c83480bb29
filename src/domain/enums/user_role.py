"""Actor roles carried in the access token.

Roles gate operations in the presentation layer; the engine itself only
enforces registration ownership on cancellation.

    - admin: Manage any event and registration
    - organizer: Create events, manage own events and their registrations
    - attendee: Register for events, cancel own registrations

Usage:
    from src.domain.enums import UserRole

    if UserRole.ADMIN.value in current_user.roles:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Actor roles for role-gated operations."""

    ADMIN = "admin"
    ORGANIZER = "organizer"
    ATTENDEE = "attendee"
