"""Unit tests for LoggingEventHandler."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from uuid_extensions import uuid7

from schoolvault.domain.events import (
    MembershipGranted,
    MembershipRevoked,
    RecordReactivated,
    RecordRestoreAttempted,
    RecordRestoreFailed,
    RecordRestoreSucceeded,
    RecordTrashAttempted,
    RecordTrashFailed,
    RecordTrashSucceeded,
    TrashCleanupCompleted,
)
from schoolvault.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)
from schoolvault.infrastructure.events.in_memory_event_bus import InMemoryEventBus


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test structured logging of domain events."""

    def test_subscribe_all_covers_every_event(self):
        bus = InMemoryEventBus(logger=MagicMock())

        LoggingEventHandler(logger=MagicMock()).subscribe_all(bus)

        for event_type in (
            RecordTrashAttempted,
            RecordTrashSucceeded,
            RecordTrashFailed,
            RecordRestoreAttempted,
            RecordRestoreSucceeded,
            RecordRestoreFailed,
            RecordReactivated,
            TrashCleanupCompleted,
            MembershipGranted,
            MembershipRevoked,
        ):
            assert bus.handler_count(event_type) == 1

    @pytest.mark.asyncio
    async def test_trash_succeeded_logged_at_info(self):
        logger = MagicMock()
        handler = LoggingEventHandler(logger=logger)
        entity_id = uuid7()

        await handler.handle_record_trash_succeeded(
            RecordTrashSucceeded(
                entity="student", entity_id=entity_id, actor_id=uuid7(), affected=True
            )
        )

        args, kwargs = logger.info.call_args
        assert args[0] == "record_trash_succeeded"
        assert kwargs["entity_id"] == str(entity_id)
        assert kwargs["affected"] is True

    @pytest.mark.asyncio
    async def test_failed_events_logged_at_warning(self):
        logger = MagicMock()
        handler = LoggingEventHandler(logger=logger)

        await handler.handle_record_restore_failed(
            RecordRestoreFailed(
                entity="user",
                entity_id=uuid7(),
                actor_id=uuid7(),
                reason="record_not_in_trash",
            )
        )

        args, kwargs = logger.warning.call_args
        assert args[0] == "record_restore_failed"
        assert kwargs["error_code"] == "record_not_in_trash"
        logger.info.assert_not_called()

    @pytest.mark.asyncio
    async def test_cleanup_completed_logs_counts(self):
        logger = MagicMock()
        handler = LoggingEventHandler(logger=logger)
        cutoff = datetime(2026, 1, 1, tzinfo=UTC)

        await handler.handle_trash_cleanup_completed(
            TrashCleanupCompleted(cutoff=cutoff, purged_users=2, purged_students=7)
        )

        args, kwargs = logger.info.call_args
        assert args[0] == "trash_cleanup_completed"
        assert kwargs["cutoff"] == cutoff.isoformat()
        assert kwargs["purged_users"] == 2
        assert kwargs["purged_students"] == 7

    @pytest.mark.asyncio
    async def test_published_through_bus(self):
        logger = MagicMock()
        bus = InMemoryEventBus(logger=MagicMock())
        LoggingEventHandler(logger=logger).subscribe_all(bus)

        await bus.publish(
            MembershipRevoked(
                account_id=uuid7(), institution_id=uuid7(), actor_id=uuid7()
            )
        )

        assert logger.info.call_args[0][0] == "membership_revoked"
