"""Trash sub-state shared by accounts and students.

A record is either active (both fields None) or trashed (deleted_at set).
deleted_by names the account that performed the trash operation; it is
None only for active records, or for trashed records whose deleter has
since been purged.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class TrashState:
    """Trash sub-state.

    Attributes:
        deleted_at: When the record was moved to the trash (None = active).
        deleted_by: Account that moved it (None when active).

    Raises:
        ValueError: If deleted_by is set on an active state.

    Example:
        >>> TrashState.active().is_trashed
        False
        >>> TrashState(deleted_at=now, deleted_by=admin_id).is_trashed
        True
    """

    deleted_at: datetime | None = None
    deleted_by: UUID | None = None

    def __post_init__(self) -> None:
        if self.deleted_at is None and self.deleted_by is not None:
            raise ValueError("deleted_by requires deleted_at")

    @classmethod
    def active(cls) -> "TrashState":
        return cls()

    @property
    def is_trashed(self) -> bool:
        return self.deleted_at is not None
