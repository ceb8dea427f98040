"""Access request model (access_requests table)."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, CheckConstraint, DateTime, ForeignKey, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from schoolvault.domain.enums import AccessRequestStatus
from schoolvault.infrastructure.persistence.base import BaseModel


class AccessRequestModel(BaseModel):
    """Request for system access (new institution or new user).

    user_id and approved_by are SET NULL when the account is purged.
    """

    __tablename__ = "access_requests"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')", name="status"
        ),
    )

    institution_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("institutions.id", ondelete="CASCADE"),
        nullable=True,
    )
    user_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    approved_by: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=AccessRequestStatus.PENDING.value,
        server_default=AccessRequestStatus.PENDING.value,
    )
    request_data: Mapped[dict[str, Any] | None] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=True,
    )
    processed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
