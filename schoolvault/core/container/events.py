"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions
are wired once, here.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schoolvault.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns an InMemoryEventBus with LoggingEventHandler subscribed to
    every lifecycle and membership event.
    """
    from schoolvault.core.container.infrastructure import get_logger
    from schoolvault.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from schoolvault.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)
    LoggingEventHandler(logger=logger).subscribe_all(event_bus)
    return event_bus
