"""Application services."""

from src.application.services.capacity_ledger import CapacityLedger
from src.application.services.event_cancellation import EventCancellationService

__all__ = ["CapacityLedger", "EventCancellationService"]
