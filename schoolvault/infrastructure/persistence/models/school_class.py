"""Class model (classes table)."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from schoolvault.infrastructure.persistence.base import BaseMutableModel


class SchoolClassModel(BaseMutableModel):
    """Academic class of an institution for one academic year."""

    __tablename__ = "classes"

    institution_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("institutions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    academic_year: Mapped[int] = mapped_column(Integer, nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
