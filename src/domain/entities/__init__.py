"""Domain entities.

Usage:
    from src.domain.entities import Event, Registration
"""

from src.domain.entities.event import Event
from src.domain.entities.registration import Registration

__all__ = [
    "Event",
    "Registration",
]
