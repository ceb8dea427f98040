"""Unit tests for InMemoryEventBus.

Tests cover:
- Exact-type routing
- Fail-open publishing (handler errors logged, never raised)
- No-op publish without subscribers
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from schoolvault.domain.events import RecordTrashAttempted, RecordTrashSucceeded
from schoolvault.infrastructure.events.in_memory_event_bus import InMemoryEventBus


def make_event() -> RecordTrashAttempted:
    return RecordTrashAttempted(entity="student", entity_id=uuid7(), actor_id=uuid7())


@pytest.mark.unit
class TestInMemoryEventBus:
    """Test InMemoryEventBus."""

    @pytest.mark.asyncio
    async def test_publish_calls_subscribed_handlers(self):
        # Arrange
        bus = InMemoryEventBus(logger=MagicMock())
        first, second = AsyncMock(), AsyncMock()
        bus.subscribe(RecordTrashAttempted, first)
        bus.subscribe(RecordTrashAttempted, second)
        event = make_event()

        # Act
        await bus.publish(event)

        # Assert
        first.assert_awaited_once_with(event)
        second.assert_awaited_once_with(event)

    @pytest.mark.asyncio
    async def test_routing_is_by_exact_type(self):
        bus = InMemoryEventBus(logger=MagicMock())
        handler = AsyncMock()
        bus.subscribe(RecordTrashSucceeded, handler)

        await bus.publish(make_event())

        handler.assert_not_called()

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        logger = MagicMock()
        bus = InMemoryEventBus(logger=logger)

        async def broken(event):
            raise RuntimeError("handler crashed")

        healthy = AsyncMock()
        bus.subscribe(RecordTrashAttempted, broken)
        bus.subscribe(RecordTrashAttempted, healthy)

        await bus.publish(make_event())

        healthy.assert_awaited_once()
        logger.warning.assert_called_once()
        args, kwargs = logger.warning.call_args
        assert args[0] == "event_handler_failed"
        assert kwargs["handler_name"] == "broken"
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error_message"] == "handler crashed"

    @pytest.mark.asyncio
    async def test_publish_without_handlers_is_noop(self):
        logger = MagicMock()
        bus = InMemoryEventBus(logger=logger)

        await bus.publish(make_event())

        logger.debug.assert_not_called()

    def test_handler_count(self):
        bus = InMemoryEventBus(logger=MagicMock())
        bus.subscribe(RecordTrashAttempted, AsyncMock())

        assert bus.handler_count(RecordTrashAttempted) == 1
        assert bus.handler_count(RecordTrashSucceeded) == 0
