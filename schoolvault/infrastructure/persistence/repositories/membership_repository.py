"""MembershipRepository - SQLAlchemy implementation of MembershipRepository protocol.

Maps between domain Membership entities and the user_institutions table.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import ConflictError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.entities import Membership
from schoolvault.domain.enums import MembershipRole
from schoolvault.infrastructure.persistence.models import MembershipModel
from schoolvault.infrastructure.persistence.repositories.trash_repository import (
    as_utc,
)


class MembershipRepository:
    """SQLAlchemy implementation of MembershipRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(
        self, account_id: UUID, institution_id: UUID
    ) -> Membership | None:
        """Lookup through the (user_id, institution_id) unique index."""
        stmt = select(MembershipModel).where(
            MembershipModel.user_id == account_id,
            MembershipModel.institution_id == institution_id,
        )
        result = await self.session.execute(stmt)
        membership_model = result.scalar_one_or_none()

        if membership_model is None:
            return None

        return self._to_domain(membership_model)

    async def save(self, membership: Membership) -> Result[None, ConflictError]:
        self.session.add(self._to_model(membership))
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.MEMBERSHIP_ALREADY_EXISTS,
                    message="Account is already a member of this institution",
                    resource_type="membership",
                    conflicting_field="institution_id",
                )
            )
        return Success(value=None)

    async def delete(self, account_id: UUID, institution_id: UUID) -> bool:
        stmt = (
            delete(MembershipModel)
            .where(
                MembershipModel.user_id == account_id,
                MembershipModel.institution_id == institution_id,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1  # type: ignore[attr-defined]

    def _to_domain(self, membership_model: MembershipModel) -> Membership:
        return Membership(
            id=membership_model.id,
            account_id=membership_model.user_id,
            institution_id=membership_model.institution_id,
            role=MembershipRole(membership_model.role),
            created_at=as_utc(membership_model.created_at),  # type: ignore[arg-type]
        )

    def _to_model(self, membership: Membership) -> MembershipModel:
        return MembershipModel(
            id=membership.id,
            user_id=membership.account_id,
            institution_id=membership.institution_id,
            role=membership.role.value,
            created_at=membership.created_at,
        )
