"""Application DTOs."""

from src.application.dtos.event_dtos import EventDetails, EventPage, EventSummary
from src.application.dtos.registration_dtos import (
    RegistrationWithEvent,
    WaitlistPromotionResult,
)

__all__ = [
    "EventDetails",
    "EventPage",
    "EventSummary",
    "RegistrationWithEvent",
    "WaitlistPromotionResult",
]
