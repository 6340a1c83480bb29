"""Domain errors package.

Usage:
    from src.domain.errors import EventError, RegistrationError
"""

from src.domain.errors.event_error import EventError
from src.domain.errors.registration_error import RegistrationError

__all__ = [
    "EventError",
    "RegistrationError",
]
