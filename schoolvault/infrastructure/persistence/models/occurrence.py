"""Occurrence type and occurrence models.

Occurrences are removed with their student (CASCADE) and keep a NULL
teacher_id when the reporting account is purged.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from schoolvault.infrastructure.persistence.base import BaseModel


class OccurrenceTypeModel(BaseModel):
    """Disciplinary occurrence type configured per institution."""

    __tablename__ = "occurrence_types"
    __table_args__ = (
        CheckConstraint("severity IN ('low', 'medium', 'high')", name="severity"),
    )

    institution_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("institutions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    severity: Mapped[str | None] = mapped_column(String(50), nullable=True)


class OccurrenceModel(BaseModel):
    """Disciplinary occurrence filed by a teacher about a student."""

    __tablename__ = "occurrences"

    institution_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("institutions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    teacher_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    class_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("classes.id", ondelete="SET NULL"),
        nullable=True,
    )
    occurrence_type_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("occurrence_types.id", ondelete="CASCADE"),
        nullable=False,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    occurred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
