"""ReactivateRecord command handler.

Explicit admin step that sets is_active=True on an account or student
that is not in the trash.
"""

from schoolvault.application.commands.trash_commands import ReactivateRecord
from schoolvault.application.services import AuthorizationService, TrashRecords
from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import ConflictError, DomainError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.enums import Action
from schoolvault.domain.errors import TrashError
from schoolvault.domain.events import RecordReactivated
from schoolvault.domain.protocols import EventBusProtocol


class ReactivateRecordHandler:
    """Handler for ReactivateRecord command.

    Authorised as update on the record (tenant admin, or master).

    Dependencies (injected via constructor):
        - TrashRecords: Entity lookup and repository dispatch
        - AuthorizationService: Update permission check
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

    async def handle(self, cmd: ReactivateRecord) -> Result[bool, DomainError]:
        """Handle ReactivateRecord command.

        Returns:
            Success(True): Record is active.
            Failure(NotFoundError): No such record.
            Failure(AuthorizationError | UnknownActorError): Not allowed.
            Failure(ConflictError): Record is in the trash (RECORD_IN_TRASH).
        """
        found = await self._records.find(cmd.entity, cmd.entity_id)
        if isinstance(found, Failure):
            return Failure(error=found.error)
        record = found.value

        allowed = await self._authz.require(
            cmd.actor_id,
            Action.UPDATE,
            self._records.resource_of(cmd.entity, record),
        )
        if isinstance(allowed, Failure):
            return Failure(error=allowed.error)

        if record.is_trashed() or not await self._records.repository(
            cmd.entity
        ).reactivate(cmd.entity_id):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.RECORD_IN_TRASH,
                    message=TrashError.STILL_IN_TRASH,
                    resource_type=cmd.entity.value,
                    conflicting_field="deleted_at",
                )
            )

        await self._event_bus.publish(
            RecordReactivated(
                entity=cmd.entity.value,
                entity_id=cmd.entity_id,
                actor_id=cmd.actor_id,
            )
        )
        return Success(value=True)
