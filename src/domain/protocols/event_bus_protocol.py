"""Event bus protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure provides InMemoryEventBus
    - Container provides get_event_bus() factory

Usage:
    >>> event_bus = get_event_bus()
    >>> await event_bus.publish(RegistrationCreated(...))
    >>>
    >>> async def on_created(event: RegistrationCreated) -> None:
    ...     print(event.status)
    >>>
    >>> event_bus.subscribe(RegistrationCreated, on_created)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and never fails the publishing operation.
        2. **Async support**: All handlers are async.
        3. **Type-based routing**: Handlers receive only events of the exact
           type they subscribed to.
        4. **No ordering guarantees**: Handlers may execute concurrently.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle.
            handler: Async callable invoked with the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish. Publish only after the state it
                describes has been persisted.
        """
        ...
