"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Account entities and the users table (AccountModel).
"""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import ConflictError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.entities import Account
from schoolvault.domain.enums import GlobalRole
from schoolvault.infrastructure.persistence.models import AccountModel
from schoolvault.infrastructure.persistence.repositories.trash_repository import (
    TrashRepositoryMixin,
    as_utc,
)


class AccountRepository(TrashRepositoryMixin[AccountModel, Account]):
    """SQLAlchemy implementation of AccountRepository protocol.

    Does NOT inherit from the protocol (structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = AccountRepository(session)
        ...     account = await repo.find_by_email("ana@school.example")
    """

    model = AccountModel

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email (case-insensitive)."""
        stmt = select(AccountModel).where(
            func.lower(AccountModel.email) == email.lower()
        )
        result = await self.session.execute(stmt)
        account_model = result.scalar_one_or_none()

        if account_model is None:
            return None

        return self._to_domain(account_model)

    async def save(self, account: Account) -> Result[None, ConflictError]:
        """Create new account. Email is stored lowercase."""
        self.session.add(self._to_model(account))
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="Email already registered",
                    resource_type="account",
                    conflicting_field="email",
                )
            )
        return Success(value=None)

    def _to_domain(self, account_model: AccountModel) -> Account:
        return Account(
            id=account_model.id,
            email=account_model.email,
            name=account_model.name,
            global_role=GlobalRole(account_model.role),
            is_active=account_model.is_active,
            institution_id=account_model.institution_id,
            deleted_at=as_utc(account_model.deleted_at),
            deleted_by=account_model.deleted_by,
            created_at=as_utc(account_model.created_at),  # type: ignore[arg-type]
            updated_at=as_utc(account_model.updated_at),  # type: ignore[arg-type]
        )

    def _to_model(self, account: Account) -> AccountModel:
        return AccountModel(
            id=account.id,
            email=account.email.lower(),
            name=account.name,
            role=account.global_role.value,
            is_active=account.is_active,
            institution_id=account.institution_id,
            deleted_at=account.deleted_at,
            deleted_by=account.deleted_by,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
