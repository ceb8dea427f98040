"""Event bus protocol (port) for domain events.

Implementations:
    - InMemoryEventBus: schoolvault/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(RecordTrashSucceeded, handler.handle_record_trash_succeeded)
    >>> await event_bus.publish(RecordTrashSucceeded(...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from schoolvault.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async callable receiving one event and returning None."""


class EventBusProtocol(Protocol):
    """Publisher/subscriber mediator for domain events.

    Key Requirements:
        1. Fail-open: one handler failure must not stop the others, and
           never reaches the publisher.
        2. Handlers are async and run concurrently (no ordering guarantee).
        3. Routing is by exact event type (no inheritance matching).
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register handler for event_type. Called at container wiring time."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Run every handler registered for type(event).

        Handler exceptions are logged, not propagated.
        """
        ...
