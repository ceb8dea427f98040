"""Shared trash primitives for repositories of trashable tables.

Every mutation is a single UPDATE/DELETE with the state condition in its
WHERE clause, so concurrent requests on one row are serialised by the
row lock and exactly one of them sees a changed row. Each method commits
its own transaction.
"""

from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from schoolvault.infrastructure.persistence.models import AccountModel, StudentModel

EntityT = TypeVar("EntityT")
ModelT = TypeVar("ModelT", AccountModel, StudentModel)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps read back from SQLite."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class TrashRepositoryMixin(Generic[ModelT, EntityT]):
    """Trash lifecycle queries shared by account and student repositories.

    Subclasses set `model` and implement `_to_domain`.

    Reads use populate_existing so rows changed by bulk UPDATE statements
    are never served stale from the session identity map.
    """

    model: ClassVar[Any]
    session: AsyncSession

    def _to_domain(self, model: ModelT) -> EntityT:
        raise NotImplementedError

    async def find_by_id(self, record_id: UUID) -> EntityT | None:
        stmt = (
            select(self.model)
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return self._to_domain(row)

    async def move_to_trash(
        self, record_id: UUID, actor_id: UUID, now: datetime
    ) -> bool:
        """UPDATE ... SET deleted_at, deleted_by, is_active=false
        WHERE id = ? AND deleted_at IS NULL.
        """
        stmt = (
            update(self.model)
            .where(self.model.id == record_id, self.model.deleted_at.is_(None))
            .values(deleted_at=now, deleted_by=actor_id, is_active=False)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1  # type: ignore[attr-defined]

    async def restore_from_trash(self, record_id: UUID) -> bool:
        """Clear the trash fields; is_active is left untouched (False)."""
        stmt = (
            update(self.model)
            .where(self.model.id == record_id, self.model.deleted_at.is_not(None))
            .values(deleted_at=None, deleted_by=None)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1  # type: ignore[attr-defined]

    async def reactivate(self, record_id: UUID) -> bool:
        stmt = (
            update(self.model)
            .where(self.model.id == record_id, self.model.deleted_at.is_(None))
            .values(is_active=True)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1  # type: ignore[attr-defined]

    async def purge_trashed_before(self, cutoff: datetime) -> int:
        """DELETE trashed rows with deleted_at < cutoff (strict).

        Foreign keys clear or cascade the back-references (deleted_by,
        teacher_id, access request links, memberships, occurrences).
        """
        stmt = (
            delete(self.model)
            .where(self.model.deleted_at.is_not(None), self.model.deleted_at < cutoff)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return int(result.rowcount)  # type: ignore[attr-defined]

    async def list_active(self, institution_id: UUID) -> list[EntityT]:
        return await self._list(institution_id, trashed=False)

    async def list_trashed(self, institution_id: UUID) -> list[EntityT]:
        return await self._list(institution_id, trashed=True)

    async def _list(self, institution_id: UUID, *, trashed: bool) -> list[EntityT]:
        partition = (
            self.model.deleted_at.is_not(None)
            if trashed
            else self.model.deleted_at.is_(None)
        )
        stmt = (
            select(self.model)
            .where(self.model.institution_id == institution_id, partition)
            .order_by(self.model.created_at, self.model.id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]
