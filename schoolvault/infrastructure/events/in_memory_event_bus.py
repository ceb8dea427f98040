"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based handler registry.
Suitable for a single process; lifecycle events are informational and
never part of a transaction.

Architecture:
    - Dictionary-based handler registry (event_type → list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(RecordTrashSucceeded, log_handler.handle_record_trash_succeeded)
    >>> await bus.publish(RecordTrashSucceeded(...))
"""

import asyncio
from collections import defaultdict

from schoolvault.domain.events.base_event import DomainEvent
from schoolvault.domain.protocols.event_bus_protocol import EventHandler
from schoolvault.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe (single-threaded async design).

    Attributes:
        _handlers: Event class → list of async handlers.
        _logger: Logger for handler failures.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register handler for event_type (exact type match only).

        No duplicate detection: registering the same handler twice runs it
        twice.
        """
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Run all handlers for type(event) concurrently.

        Flow:
            1. Look up handlers for type(event)
            2. If no handlers, return immediately (no-op)
            3. Execute all handlers with asyncio.gather(return_exceptions=True)
            4. Log any handler exceptions (warning level)

        Never raises handler exceptions to the publisher.
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
            return_exceptions=True,
        )

        for handler, result in zip(handlers, results, strict=True):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handler, "__name__", repr(handler)),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of handlers subscribed to event_type."""
        return len(self._handlers.get(event_type, []))
