"""StudentRepository - SQLAlchemy implementation of StudentRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Student entities and StudentModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import ConflictError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.entities import Student
from schoolvault.infrastructure.persistence.models import StudentModel
from schoolvault.infrastructure.persistence.repositories.trash_repository import (
    TrashRepositoryMixin,
    as_utc,
)


class StudentRepository(TrashRepositoryMixin[StudentModel, Student]):
    """SQLAlchemy implementation of StudentRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    model = StudentModel

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def registration_number_taken(
        self, institution_id: UUID, registration_number: str | None
    ) -> bool:
        """Check for an existing student with the same number (NULL included).

        Trashed students count until purged.
        """
        if registration_number is None:
            same_number = StudentModel.registration_number.is_(None)
        else:
            same_number = StudentModel.registration_number == registration_number

        stmt = (
            select(StudentModel.id)
            .where(StudentModel.institution_id == institution_id, same_number)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, student: Student) -> Result[None, ConflictError]:
        """Create new student.

        The unique constraint rejects a concurrent duplicate that slipped
        past registration_number_taken.
        """
        self.session.add(self._to_model(student))
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.REGISTRATION_NUMBER_TAKEN,
                    message="Registration number already used in this institution",
                    resource_type="student",
                    conflicting_field="registration_number",
                )
            )
        return Success(value=None)

    def _to_domain(self, student_model: StudentModel) -> Student:
        return Student(
            id=student_model.id,
            institution_id=student_model.institution_id,
            class_id=student_model.class_id,
            name=student_model.name,
            registration_number=student_model.registration_number,
            is_active=student_model.is_active,
            deleted_at=as_utc(student_model.deleted_at),
            deleted_by=student_model.deleted_by,
            created_at=as_utc(student_model.created_at),  # type: ignore[arg-type]
            updated_at=as_utc(student_model.updated_at),  # type: ignore[arg-type]
        )

    def _to_model(self, student: Student) -> StudentModel:
        return StudentModel(
            id=student.id,
            institution_id=student.institution_id,
            class_id=student.class_id,
            name=student.name,
            registration_number=student.registration_number,
            is_active=student.is_active,
            deleted_at=student.deleted_at,
            deleted_by=student.deleted_by,
            created_at=student.created_at,
            updated_at=student.updated_at,
        )
