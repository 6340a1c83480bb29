"""Registration DTOs (Data Transfer Objects)."""

from dataclasses import dataclass

from src.domain.entities.event import Event
from src.domain.entities.registration import Registration


@dataclass(frozen=True, kw_only=True)
class RegistrationWithEvent:
    """Read-only pairing of a registration with its (visible) event."""

    registration: Registration
    event: Event


@dataclass(frozen=True, kw_only=True)
class WaitlistPromotionResult:
    """Outcome of an explicit waitlist promotion.

    Attributes:
        promoted: Registrations moved from WAITLISTED to CONFIRMED, in
            promotion order.
        remaining_waitlisted: Registrations still waitlisted afterwards.
    """

    promoted: list[Registration]
    remaining_waitlisted: int
