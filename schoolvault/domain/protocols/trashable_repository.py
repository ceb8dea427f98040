"""TrashableRepository protocol: trash primitives shared by accounts and students.

Port (interface) for hexagonal architecture. The lifecycle handlers depend
on this protocol only, so accounts and students follow one state machine.

State machine:
    Active --move_to_trash--> Trashed --restore_from_trash--> Active (inactive)
                                 |
                                 +--purge_trashed_before--> Purged (row gone)
"""

from datetime import datetime
from typing import Protocol, TypeVar
from uuid import UUID

from schoolvault.domain.entities import Account, Student

T_co = TypeVar("T_co", bound=Account | Student, covariant=True)


class TrashableRepository(Protocol[T_co]):
    """Trash lifecycle persistence (port).

    Every mutating method is a single conditional UPDATE/DELETE so that
    concurrent callers are serialised by the store's row locks.
    """

    async def find_by_id(self, record_id: UUID) -> T_co | None:
        """Find a record by id regardless of its trash state."""
        ...

    async def move_to_trash(
        self, record_id: UUID, actor_id: UUID, now: datetime
    ) -> bool:
        """Compare-and-set the record into the trash.

        Sets deleted_at=now, deleted_by=actor_id and is_active=False only
        where deleted_at IS NULL.

        Returns:
            True if a row changed, False when the record was already
            trashed (its attribution is left untouched).
        """
        ...

    async def restore_from_trash(self, record_id: UUID) -> bool:
        """Clear deleted_at/deleted_by where deleted_at IS NOT NULL.

        is_active stays False.

        Returns:
            True if a row changed.
        """
        ...

    async def reactivate(self, record_id: UUID) -> bool:
        """Set is_active=True where the record is not trashed.

        Returns:
            True if a row changed.
        """
        ...

    async def purge_trashed_before(self, cutoff: datetime) -> int:
        """Permanently delete records with deleted_at strictly before cutoff.

        Back-references to purged rows are cleared or cascaded in the same
        transaction.

        Returns:
            Number of records removed.
        """
        ...

    async def list_active(self, institution_id: UUID) -> list[T_co]:
        """Records of the institution with deleted_at IS NULL."""
        ...

    async def list_trashed(self, institution_id: UUID) -> list[T_co]:
        """Records of the institution with deleted_at IS NOT NULL."""
        ...
