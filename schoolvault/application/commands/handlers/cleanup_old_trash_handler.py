"""CleanupOldTrash command handler.

Permanently removes accounts and students whose deleted_at is strictly
older than the retention period. Each entity type is purged in its own
transaction; running it again with the same arguments purges nothing.

Architecture:
- Application layer handler
- System operation: no actor, no authorization check
- Publishes TrashCleanupCompleted
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from schoolvault.application.commands.trash_commands import CleanupOldTrash
from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import DomainError, ValidationError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.errors import TrashError
from schoolvault.domain.events import TrashCleanupCompleted
from schoolvault.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    StudentRepository,
)


@dataclass(frozen=True, kw_only=True)
class CleanupReport:
    """Counts of records removed by one cleanup run.

    Attributes:
        purged_users: Accounts permanently deleted.
        purged_students: Students permanently deleted.
        cutoff: Records trashed strictly before this instant were purged.
    """

    purged_users: int
    purged_students: int
    cutoff: datetime


class CleanupOldTrashHandler:
    """Handler for CleanupOldTrash command.

    Dependencies (injected via constructor):
        - AccountRepository: Account purge
        - StudentRepository: Student purge
        - EventBusProtocol: For domain events
        - default_days: Retention used when the command leaves days unset
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        student_repo: StudentRepository,
        event_bus: EventBusProtocol,
        default_days: int = 90,
    ) -> None:
        self._account_repo = account_repo
        self._student_repo = student_repo
        self._event_bus = event_bus
        self._default_days = default_days

    async def handle(self, cmd: CleanupOldTrash) -> Result[CleanupReport, DomainError]:
        """Handle CleanupOldTrash command.

        Returns:
            Success(CleanupReport): Purge counts per entity type.
            Failure(ValidationError): days below 1, or a naive now.
        """
        days = cmd.days if cmd.days is not None else self._default_days
        if days < 1:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_RETENTION_PERIOD,
                    message=TrashError.INVALID_RETENTION_PERIOD,
                    field="days",
                )
            )

        if cmd.now is not None and cmd.now.utcoffset() is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=TrashError.NAIVE_REFERENCE_TIME,
                    field="now",
                )
            )

        # deleted_at is stored as UTC; the cutoff must be compared in UTC too.
        now = cmd.now.astimezone(UTC) if cmd.now is not None else datetime.now(UTC)
        cutoff = now - timedelta(days=days)

        purged_students = await self._student_repo.purge_trashed_before(cutoff)
        purged_users = await self._account_repo.purge_trashed_before(cutoff)

        await self._event_bus.publish(
            TrashCleanupCompleted(
                cutoff=cutoff,
                purged_users=purged_users,
                purged_students=purged_students,
            )
        )
        return Success(
            value=CleanupReport(
                purged_users=purged_users,
                purged_students=purged_students,
                cutoff=cutoff,
            )
        )
