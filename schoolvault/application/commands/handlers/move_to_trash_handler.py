"""MoveToTrash command handler.

Moves an account or student into the trash with a single compare-and-set
update. Trashing an already-trashed record succeeds with False and keeps
the original attribution.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer and application services
- Uses Result types for error handling
- Emits 3-state domain events (Attempted → Succeeded/Failed)
"""

from datetime import UTC, datetime

from schoolvault.application.commands.trash_commands import MoveToTrash
from schoolvault.application.services import AuthorizationService, TrashRecords
from schoolvault.core.errors import DomainError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.events import (
    RecordTrashAttempted,
    RecordTrashFailed,
    RecordTrashSucceeded,
)
from schoolvault.domain.protocols import EventBusProtocol


class MoveToTrashHandler:
    """Handler for MoveToTrash command.

    Order of checks: record exists, then the actor may trash it.

    Dependencies (injected via constructor):
        - TrashRecords: Entity lookup and repository dispatch
        - AuthorizationService: Trash permission check
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        records: TrashRecords,
        authz: AuthorizationService,
        event_bus: EventBusProtocol,
    ) -> None:
        self._records = records
        self._authz = authz
        self._event_bus = event_bus

    async def handle(self, cmd: MoveToTrash) -> Result[bool, DomainError]:
        """Handle MoveToTrash command.

        Args:
            cmd: MoveToTrash command.

        Returns:
            Success(True): Record moved to the trash.
            Success(False): Record was already in the trash (no change).
            Failure(NotFoundError): No such record.
            Failure(AuthorizationError | UnknownActorError): Not allowed.

        Side Effects:
            - Publishes RecordTrashAttempted event (always)
            - Publishes RecordTrashSucceeded event (on success)
            - Publishes RecordTrashFailed event (on failure)
        """
        await self._event_bus.publish(
            RecordTrashAttempted(
                entity=cmd.entity.value,
                entity_id=cmd.entity_id,
                actor_id=cmd.actor_id,
            )
        )

        found = await self._records.find(cmd.entity, cmd.entity_id)
        if isinstance(found, Failure):
            await self._emit_failed(cmd, found.error)
            return Failure(error=found.error)
        record = found.value

        allowed = await self._authz.require_trash(
            cmd.actor_id, cmd.entity, self._records.resource_of(cmd.entity, record)
        )
        if isinstance(allowed, Failure):
            await self._emit_failed(cmd, allowed.error)
            return Failure(error=allowed.error)

        try:
            affected = await self._records.repository(cmd.entity).move_to_trash(
                cmd.entity_id, cmd.actor_id, datetime.now(UTC)
            )
        except Exception:
            await self._emit_failed_reason(cmd, "store_error")
            raise

        await self._event_bus.publish(
            RecordTrashSucceeded(
                entity=cmd.entity.value,
                entity_id=cmd.entity_id,
                actor_id=cmd.actor_id,
                affected=affected,
            )
        )
        return Success(value=affected)

    async def _emit_failed(self, cmd: MoveToTrash, error: DomainError) -> None:
        await self._emit_failed_reason(cmd, error.code.value)

    async def _emit_failed_reason(self, cmd: MoveToTrash, reason: str) -> None:
        await self._event_bus.publish(
            RecordTrashFailed(
                entity=cmd.entity.value,
                entity_id=cmd.entity_id,
                actor_id=cmd.actor_id,
                reason=reason,
            )
        )
