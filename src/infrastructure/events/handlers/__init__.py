"""Event handlers for infrastructure integration."""

from src.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["LoggingEventHandler"]
