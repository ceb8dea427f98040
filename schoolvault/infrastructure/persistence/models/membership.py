"""Membership model (user_institutions table).

The (user_id, institution_id) unique constraint backs the indexed lookup
behind every authorization check.
"""

from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from schoolvault.infrastructure.persistence.base import BaseModel


class MembershipModel(BaseModel):
    """Account role inside one institution (immutable row)."""

    __tablename__ = "user_institutions"
    __table_args__ = (
        UniqueConstraint("user_id", "institution_id"),
        CheckConstraint("role IN ('admin', 'professor')", name="role"),
    )

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    institution_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("institutions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String(50), nullable=False)
