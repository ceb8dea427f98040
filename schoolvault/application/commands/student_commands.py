"""Student commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterStudent:
    """Enroll a new student in an institution.

    Attributes:
        institution_id: Owning institution (immutable afterwards).
        name: Student name.
        actor_id: Account registering the student.
        registration_number: School registration number. At most one
            student per institution may be registered without one.
        class_id: Optional initial class.

    Example:
        >>> result = await handler.handle(RegisterStudent(
        ...     institution_id=inst_id,
        ...     name="Joana Lima",
        ...     registration_number="2024-0042",
        ...     actor_id=admin_id,
        ... ))
    """

    institution_id: UUID
    name: str
    actor_id: UUID
    registration_number: str | None = None
    class_id: UUID | None = None
