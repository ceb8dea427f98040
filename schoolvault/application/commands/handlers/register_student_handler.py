"""RegisterStudent command handler.

Enrolls a student in an institution. Registration numbers are unique per
institution, and a second student without a number conflicts too.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from schoolvault.application.commands.student_commands import RegisterStudent
from schoolvault.application.services import AuthorizationService
from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import ConflictError, DomainError, ValidationError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.entities import Student
from schoolvault.domain.enums import Action, ResourceType
from schoolvault.domain.protocols import StudentRepository
from schoolvault.domain.value_objects import ResourceRef


class RegisterStudentError:
    """RegisterStudent-specific error messages."""

    NAME_REQUIRED = "Student name cannot be empty"
    REGISTRATION_NUMBER_TAKEN = "Registration number already used in this institution"


class RegisterStudentHandler:
    """Handler for RegisterStudent command.

    Authorised as insert on student (tenant admin, or master).

    Dependencies (injected via constructor):
        - StudentRepository: Persistence and uniqueness check
        - AuthorizationService: Insert permission on student
    """

    def __init__(
        self,
        student_repo: StudentRepository,
        authz: AuthorizationService,
    ) -> None:
        self._student_repo = student_repo
        self._authz = authz

    async def handle(self, cmd: RegisterStudent) -> Result[Student, DomainError]:
        """Handle RegisterStudent command.

        Returns:
            Success(Student): Student created (active).
            Failure(ValidationError): Empty name.
            Failure(AuthorizationError | UnknownActorError): Not allowed.
            Failure(ConflictError): Registration number taken (NULL included).
        """
        name = cmd.name.strip()
        if not name:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=RegisterStudentError.NAME_REQUIRED,
                    field="name",
                )
            )

        allowed = await self._authz.require(
            cmd.actor_id,
            Action.INSERT,
            ResourceRef(
                resource_type=ResourceType.STUDENT,
                institution_id=cmd.institution_id,
            ),
        )
        if isinstance(allowed, Failure):
            return Failure(error=allowed.error)

        if await self._student_repo.registration_number_taken(
            cmd.institution_id, cmd.registration_number
        ):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.REGISTRATION_NUMBER_TAKEN,
                    message=RegisterStudentError.REGISTRATION_NUMBER_TAKEN,
                    resource_type=ResourceType.STUDENT.value,
                    conflicting_field="registration_number",
                )
            )

        now = datetime.now(UTC)
        student = Student(
            id=uuid7(),
            institution_id=cmd.institution_id,
            name=name,
            class_id=cmd.class_id,
            registration_number=cmd.registration_number,
            created_at=now,
            updated_at=now,
        )
        # The store constraint still catches a concurrent duplicate.
        saved = await self._student_repo.save(student)
        if isinstance(saved, Failure):
            return Failure(error=saved.error)
        return Success(value=student)
