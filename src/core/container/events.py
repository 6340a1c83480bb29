# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing.
Configures all event handlers and subscriptions at startup using
registry-driven auto-wiring.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Event handlers are registered at startup from EVENT_REGISTRY. For each
    entry the handler method name is computed from workflow_name + phase and
    looked up on LoggingEventHandler.

    Mode-dependent behavior when a method is missing:
        - STRICT (default): RuntimeError at startup
        - GRACEFUL: warning logged, event left unsubscribed

    Returns:
        Event bus implementing EventBusProtocol.

    Usage:
        # Application Layer (direct use)
        event_bus = get_event_bus()
        await event_bus.publish(RegistrationCreated(...))
    """
    from src.core.config import get_settings
    from src.core.container.infrastructure import get_logger
    from src.domain.events.registry import EVENT_REGISTRY
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    strict_mode = get_settings().events_strict_mode
    logger = get_logger()

    event_bus = InMemoryEventBus(logger=logger)
    logging_handler = LoggingEventHandler(logger=logger)

    for metadata in EVENT_REGISTRY:
        if not metadata.requires_logging:
            continue

        method_name = metadata.handler_method
        handler_method = getattr(logging_handler, method_name, None)
        if handler_method is None:
            if strict_mode:
                raise RuntimeError(
                    f"EVENTS_STRICT_MODE: Missing required logging handler\n"
                    f"Event: {metadata.event_class.__name__}\n"
                    f"Expected method: LoggingEventHandler.{method_name}"
                )
            logger.warning(
                "Missing logging handler (graceful mode)",
                event_class=metadata.event_class.__name__,
                handler_method=method_name,
            )
            continue

        event_bus.subscribe(metadata.event_class, handler_method)

    return event_bus
