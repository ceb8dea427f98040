"""Trash lifecycle commands (CQRS write operations).

All commands are immutable (frozen=True) and keyword-only (kw_only=True).
The acting account is always explicit: commands carry actor_id instead of
relying on an ambient session identity.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from schoolvault.domain.enums import TrashableEntity


@dataclass(frozen=True, kw_only=True)
class MoveToTrash:
    """Move an account or student to the trash.

    State Transition: Active → Trashed (no-op if already trashed)

    Attributes:
        entity: USER or STUDENT.
        entity_id: Record to trash.
        actor_id: Account performing the operation (recorded as deleted_by).

    Example:
        >>> result = await handler.handle(MoveToTrash(
        ...     entity=TrashableEntity.STUDENT,
        ...     entity_id=student_id,
        ...     actor_id=admin_id,
        ... ))
    """

    entity: TrashableEntity
    entity_id: UUID
    actor_id: UUID


@dataclass(frozen=True, kw_only=True)
class RestoreFromTrash:
    """Restore a trashed account or student.

    State Transition: Trashed → Active (is_active stays False)

    Attributes:
        entity: USER or STUDENT.
        entity_id: Record to restore.
        actor_id: Account performing the operation.
    """

    entity: TrashableEntity
    entity_id: UUID
    actor_id: UUID


@dataclass(frozen=True, kw_only=True)
class CleanupOldTrash:
    """Permanently purge records trashed longer than the retention period.

    System operation (scheduled externally), so it carries no actor.

    Attributes:
        days: Retention period in days (records exactly this old are kept).
            None uses the configured trash_retention_days.
        now: Reference instant (timezone-aware, any offset). None uses the
            current UTC time.
    """

    days: int | None = None
    now: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class ReactivateRecord:
    """Set an active (non-trashed) account or student back to is_active=True.

    Restoring never reactivates; this is the separate explicit step.

    Attributes:
        entity: USER or STUDENT.
        entity_id: Record to reactivate.
        actor_id: Account performing the operation.
    """

    entity: TrashableEntity
    entity_id: UUID
    actor_id: UUID
