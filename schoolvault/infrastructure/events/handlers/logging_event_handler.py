"""Logging event handler for domain events.

Structured logging for every lifecycle and membership event.

Log Levels:
    - INFO: ATTEMPTED and SUCCEEDED events, cleanup, membership changes
    - WARNING: FAILED events

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> logging_handler.subscribe_all(event_bus)
"""

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
from schoolvault.domain.protocols.event_bus_protocol import EventBusProtocol
from schoolvault.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def subscribe_all(self, event_bus: EventBusProtocol) -> None:
        """Subscribe one handler method per event type."""
        event_bus.subscribe(RecordTrashAttempted, self.handle_record_trash_attempted)
        event_bus.subscribe(RecordTrashSucceeded, self.handle_record_trash_succeeded)
        event_bus.subscribe(RecordTrashFailed, self.handle_record_trash_failed)
        event_bus.subscribe(
            RecordRestoreAttempted, self.handle_record_restore_attempted
        )
        event_bus.subscribe(
            RecordRestoreSucceeded, self.handle_record_restore_succeeded
        )
        event_bus.subscribe(RecordRestoreFailed, self.handle_record_restore_failed)
        event_bus.subscribe(RecordReactivated, self.handle_record_reactivated)
        event_bus.subscribe(
            TrashCleanupCompleted, self.handle_trash_cleanup_completed
        )
        event_bus.subscribe(MembershipGranted, self.handle_membership_granted)
        event_bus.subscribe(MembershipRevoked, self.handle_membership_revoked)

    # =========================================================================
    # Move to Trash
    # =========================================================================

    async def handle_record_trash_attempted(self, event: RecordTrashAttempted) -> None:
        self._logger.info(
            "record_trash_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            entity=event.entity,
            entity_id=str(event.entity_id),
            actor_id=str(event.actor_id),
        )

    async def handle_record_trash_succeeded(self, event: RecordTrashSucceeded) -> None:
        """Log completed trash operation (INFO level).

        affected=False marks a repeated request on an already-trashed record.
        """
        self._logger.info(
            "record_trash_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            entity=event.entity,
            entity_id=str(event.entity_id),
            actor_id=str(event.actor_id),
            affected=event.affected,
        )

    async def handle_record_trash_failed(self, event: RecordTrashFailed) -> None:
        self._logger.warning(
            "record_trash_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            entity=event.entity,
            entity_id=str(event.entity_id),
            actor_id=str(event.actor_id),
            error_code=event.reason,
        )

    # =========================================================================
    # Restore from Trash
    # =========================================================================

    async def handle_record_restore_attempted(
        self, event: RecordRestoreAttempted
    ) -> None:
        self._logger.info(
            "record_restore_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            entity=event.entity,
            entity_id=str(event.entity_id),
            actor_id=str(event.actor_id),
        )

    async def handle_record_restore_succeeded(
        self, event: RecordRestoreSucceeded
    ) -> None:
        self._logger.info(
            "record_restore_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            entity=event.entity,
            entity_id=str(event.entity_id),
            actor_id=str(event.actor_id),
        )

    async def handle_record_restore_failed(self, event: RecordRestoreFailed) -> None:
        self._logger.warning(
            "record_restore_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            entity=event.entity,
            entity_id=str(event.entity_id),
            actor_id=str(event.actor_id),
            error_code=event.reason,
        )

    # =========================================================================
    # Reactivation / Cleanup
    # =========================================================================

    async def handle_record_reactivated(self, event: RecordReactivated) -> None:
        self._logger.info(
            "record_reactivated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            entity=event.entity,
            entity_id=str(event.entity_id),
            actor_id=str(event.actor_id),
        )

    async def handle_trash_cleanup_completed(
        self, event: TrashCleanupCompleted
    ) -> None:
        self._logger.info(
            "trash_cleanup_completed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            cutoff=event.cutoff.isoformat(),
            purged_users=event.purged_users,
            purged_students=event.purged_students,
        )

    # =========================================================================
    # Membership
    # =========================================================================

    async def handle_membership_granted(self, event: MembershipGranted) -> None:
        self._logger.info(
            "membership_granted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            membership_id=str(event.membership_id),
            account_id=str(event.account_id),
            institution_id=str(event.institution_id),
            role=event.role,
            actor_id=str(event.actor_id),
        )

    async def handle_membership_revoked(self, event: MembershipRevoked) -> None:
        self._logger.info(
            "membership_revoked",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            account_id=str(event.account_id),
            institution_id=str(event.institution_id),
            actor_id=str(event.actor_id),
        )
