"""RestoreFromTrash command handler.

Clears the trash fields of an account or student. The record stays
inactive; reactivation is a separate command (ReactivateRecord).

Architecture:
- Application layer handler
- Uses Result types for error handling
- Emits 3-state domain events (Attempted → Succeeded/Failed)
"""

from schoolvault.application.commands.trash_commands import RestoreFromTrash
from schoolvault.application.services import AuthorizationService, TrashRecords
from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import DomainError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.errors import NotInTrashError, TrashError
from schoolvault.domain.events import (
    RecordRestoreAttempted,
    RecordRestoreFailed,
    RecordRestoreSucceeded,
)
from schoolvault.domain.protocols import EventBusProtocol


class RestoreFromTrashHandler:
    """Handler for RestoreFromTrash command.

    Restore requires the same permission as trashing (master for accounts,
    delete on the student's institution for students).

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

    async def handle(self, cmd: RestoreFromTrash) -> Result[bool, DomainError]:
        """Handle RestoreFromTrash command.

        Returns:
            Success(True): Record restored (deleted_at/deleted_by cleared).
            Failure(NotFoundError): No such record.
            Failure(AuthorizationError | UnknownActorError): Not allowed.
            Failure(NotInTrashError): Record is not in the trash.
        """
        await self._event_bus.publish(
            RecordRestoreAttempted(
                entity=cmd.entity.value,
                entity_id=cmd.entity_id,
                actor_id=cmd.actor_id,
            )
        )

        found = await self._records.find(cmd.entity, cmd.entity_id)
        if isinstance(found, Failure):
            return await self._fail(cmd, found.error)
        record = found.value

        allowed = await self._authz.require_trash(
            cmd.actor_id, cmd.entity, self._records.resource_of(cmd.entity, record)
        )
        if isinstance(allowed, Failure):
            return await self._fail(cmd, allowed.error)

        if not record.is_trashed():
            return await self._fail(cmd, self._not_in_trash(cmd))

        try:
            restored = await self._records.repository(cmd.entity).restore_from_trash(
                cmd.entity_id
            )
        except Exception:
            await self._emit_failed(cmd, "store_error")
            raise

        # Restored concurrently between the read and the update.
        if not restored:
            return await self._fail(cmd, self._not_in_trash(cmd))

        await self._event_bus.publish(
            RecordRestoreSucceeded(
                entity=cmd.entity.value,
                entity_id=cmd.entity_id,
                actor_id=cmd.actor_id,
            )
        )
        return Success(value=True)

    @staticmethod
    def _not_in_trash(cmd: RestoreFromTrash) -> NotInTrashError:
        return NotInTrashError(
            code=ErrorCode.RECORD_NOT_IN_TRASH,
            message=TrashError.NOT_IN_TRASH,
            entity=cmd.entity.value,
            entity_id=str(cmd.entity_id),
        )

    async def _fail(
        self, cmd: RestoreFromTrash, error: DomainError
    ) -> Result[bool, DomainError]:
        await self._emit_failed(cmd, error.code.value)
        return Failure(error=error)

    async def _emit_failed(self, cmd: RestoreFromTrash, reason: str) -> None:
        await self._event_bus.publish(
            RecordRestoreFailed(
                entity=cmd.entity.value,
                entity_id=cmd.entity_id,
                actor_id=cmd.actor_id,
                reason=reason,
            )
        )
