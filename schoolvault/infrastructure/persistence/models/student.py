"""Student model (students table).

Constraints:
    - uq_students_institution_id_registration_number: registration number
      unique per institution. On PostgreSQL it is NULLS NOT DISTINCT, so
      at most one student per institution has no number; other backends
      rely on the repository's explicit NULL check.

Indexes:
    - ix_students_deleted_at: (deleted_at) for cleanup scans
    - ix_students_institution_active: (institution_id, deleted_at) partial,
      WHERE deleted_at IS NULL
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String, UniqueConstraint, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from schoolvault.infrastructure.persistence.base import BaseMutableModel, TrashMixin


class StudentModel(TrashMixin, BaseMutableModel):
    """Student row with trash fields."""

    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint(
            "institution_id",
            "registration_number",
            postgresql_nulls_not_distinct=True,
        ),
        Index(
            "ix_students_institution_active",
            "institution_id",
            "deleted_at",
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    institution_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("institutions.id", ondelete="CASCADE"),
        nullable=False,
    )
    class_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("classes.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    registration_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
