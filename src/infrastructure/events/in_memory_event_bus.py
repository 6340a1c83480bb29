"""In-memory event bus implementation.

Implements EventBusProtocol using an in-memory dictionary-based registry.
Suitable for single-process deployments.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type → list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)

Usage:
    >>> event_bus = InMemoryEventBus(logger=get_logger())
    >>> event_bus.subscribe(RegistrationCreated, handler.handle_registration_created)
    >>> await event_bus.publish(RegistrationCreated(...))
"""

import asyncio
from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe (single-process, single event loop design).

    Attributes:
        _handlers: Event class → list of async handlers.
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning) and publishing (debug).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches.
            handler: Async callable invoked with the event.
        """
        self._handlers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of handlers subscribed to an event type."""
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Handler exceptions are logged but NOT propagated to the publisher.
        No registered handlers is a no-op.

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,  # Fail-open
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                handler_name = getattr(handlers[idx], "__name__", repr(handlers[idx]))
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=handler_name,
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
