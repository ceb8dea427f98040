"""Lookup service for records with a trash lifecycle.

Routes a TrashableEntity to its repository and builds the ResourceRef the
tenant policy evaluates for a loaded record, so lifecycle handlers treat
accounts and students uniformly.

Usage:
    records = TrashRecords(account_repo, student_repo)

    result = await records.find(TrashableEntity.STUDENT, student_id)
    if isinstance(result, Success):
        resource = records.resource_of(TrashableEntity.STUDENT, result.value)
"""

from uuid import UUID

from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import NotFoundError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.entities import Account, Student
from schoolvault.domain.enums import TrashableEntity
from schoolvault.domain.errors import TrashError
from schoolvault.domain.protocols import (
    AccountRepository,
    StudentRepository,
    TrashableRepository,
)
from schoolvault.domain.value_objects import ResourceRef


class TrashRecords:
    """Entity-kind dispatch over the account and student repositories.

    Dependencies (injected via constructor):
        - AccountRepository: USER records
        - StudentRepository: STUDENT records
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        student_repo: StudentRepository,
    ) -> None:
        self._account_repo = account_repo
        self._student_repo = student_repo

    def repository(
        self, entity: TrashableEntity
    ) -> TrashableRepository[Account] | TrashableRepository[Student]:
        if entity is TrashableEntity.USER:
            return self._account_repo
        return self._student_repo

    async def find(
        self, entity: TrashableEntity, record_id: UUID
    ) -> Result[Account | Student, NotFoundError]:
        """Load a record in any trash state.

        Returns:
            Success(record), or Failure(NotFoundError) if no row exists.
        """
        record = await self.repository(entity).find_by_id(record_id)
        if record is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.RECORD_NOT_FOUND,
                    message=TrashError.RECORD_NOT_FOUND,
                    resource_type=entity.value,
                    resource_id=str(record_id),
                )
            )
        return Success(value=record)

    @staticmethod
    def resource_of(entity: TrashableEntity, record: Account | Student) -> ResourceRef:
        """ResourceRef for policy evaluation of a loaded record.

        Accounts are scoped by their home institution (None for platform
        accounts, which only masters can manage).
        """
        if isinstance(record, Account):
            return ResourceRef(
                resource_type=entity.resource_type,
                institution_id=record.institution_id,
                account_id=record.id,
                record_id=record.id,
            )
        return ResourceRef(
            resource_type=entity.resource_type,
            institution_id=record.institution_id,
            record_id=record.id,
        )
