"""Trash lifecycle domain events.

Pattern: 3 events per workflow (ATTEMPTED → SUCCEEDED/FAILED)
- *Attempted: Operation requested (before authorization)
- *Succeeded: Operation completed
- *Failed: Operation rejected (denied, missing, wrong state)

Workflows:
1. Move to trash
2. Restore from trash

Single events:
- RecordReactivated: Record explicitly reactivated by an admin
- TrashCleanupCompleted: Scheduled purge finished

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from schoolvault.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Move to Trash (Workflow 1)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class RecordTrashAttempted(DomainEvent):
    """Move-to-trash requested.

    Attributes:
        entity: Entity kind ("user" or "student").
        entity_id: Target record.
        actor_id: Account requesting the operation.
    """

    entity: str
    entity_id: UUID
    actor_id: UUID


@dataclass(frozen=True, kw_only=True)
class RecordTrashSucceeded(DomainEvent):
    """Move-to-trash completed.

    Attributes:
        entity: Entity kind.
        entity_id: Target record.
        actor_id: Account that performed the operation.
        affected: False when the record was already in the trash.
    """

    entity: str
    entity_id: UUID
    actor_id: UUID
    affected: bool


@dataclass(frozen=True, kw_only=True)
class RecordTrashFailed(DomainEvent):
    """Move-to-trash rejected.

    Attributes:
        entity: Entity kind.
        entity_id: Target record.
        actor_id: Account that requested the operation.
        reason: Error code of the failure.
    """

    entity: str
    entity_id: UUID
    actor_id: UUID
    reason: str


# ═══════════════════════════════════════════════════════════════
# Restore from Trash (Workflow 2)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class RecordRestoreAttempted(DomainEvent):
    """Restore requested."""

    entity: str
    entity_id: UUID
    actor_id: UUID


@dataclass(frozen=True, kw_only=True)
class RecordRestoreSucceeded(DomainEvent):
    """Restore completed. The record stays inactive."""

    entity: str
    entity_id: UUID
    actor_id: UUID


@dataclass(frozen=True, kw_only=True)
class RecordRestoreFailed(DomainEvent):
    """Restore rejected.

    Attributes:
        reason: Error code of the failure.
    """

    entity: str
    entity_id: UUID
    actor_id: UUID
    reason: str


# ═══════════════════════════════════════════════════════════════
# Single-state events
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class RecordReactivated(DomainEvent):
    """Record set back to is_active=True by an admin."""

    entity: str
    entity_id: UUID
    actor_id: UUID


@dataclass(frozen=True, kw_only=True)
class TrashCleanupCompleted(DomainEvent):
    """Scheduled purge finished.

    Attributes:
        cutoff: Records trashed strictly before this instant were purged.
        purged_users: Number of accounts permanently removed.
        purged_students: Number of students permanently removed.
    """

    cutoff: datetime
    purged_users: int
    purged_students: int
