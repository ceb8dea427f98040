"""StudentRepository protocol for student persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from schoolvault.core.errors import ConflictError
from schoolvault.core.result import Result
from schoolvault.domain.entities import Student
from schoolvault.domain.protocols.trashable_repository import TrashableRepository


class StudentRepository(TrashableRepository[Student], Protocol):
    """Student repository protocol (port).

    Registration numbers are unique per institution with NULLS NOT
    DISTINCT semantics: two students of one institution without a number
    conflict as well.
    """

    async def registration_number_taken(
        self, institution_id: UUID, registration_number: str | None
    ) -> bool:
        """Whether another student of the institution holds this number.

        None matches an existing student without a number. Trashed students
        keep their number reserved until purged.
        """
        ...

    async def save(self, student: Student) -> Result[None, ConflictError]:
        """Create a new student.

        Returns:
            Success(None), or Failure(ConflictError) with
            REGISTRATION_NUMBER_TAKEN when the unique constraint fires.
        """
        ...
