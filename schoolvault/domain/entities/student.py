"""Student domain entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from schoolvault.domain.value_objects import TrashState


@dataclass
class Student:
    """Student enrolled in one institution.

    institution_id never changes after creation. registration_number is
    unique per institution, and at most one student per institution may
    have none.

    Attributes:
        id: Unique student identifier.
        institution_id: Owning institution.
        name: Student name.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
        class_id: Current class (None when unassigned or the class was removed).
        registration_number: School registration number.
        is_active: Whether the student is currently enrolled.
        deleted_at: When the student was trashed (None = active).
        deleted_by: Account that trashed the student.
    """

    id: UUID
    institution_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
    class_id: UUID | None = None
    registration_number: str | None = None
    is_active: bool = True
    deleted_at: datetime | None = None
    deleted_by: UUID | None = None

    @property
    def trash_state(self) -> TrashState:
        return TrashState(deleted_at=self.deleted_at, deleted_by=self.deleted_by)

    def is_trashed(self) -> bool:
        return self.deleted_at is not None
