"""Account model (users table).

Trash fields:
    - deleted_at: NULL = active; set when moved to the trash
    - deleted_by: acting account; SET NULL when that account is purged

Indexes:
    - ix_users_deleted_at: (deleted_at) for cleanup scans
    - ix_users_institution_active: (institution_id, deleted_at) partial,
      WHERE deleted_at IS NULL, for active listings
"""

from uuid import UUID

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from schoolvault.domain.enums import GlobalRole
from schoolvault.infrastructure.persistence.base import BaseMutableModel, TrashMixin

_ROLES = ", ".join(f"'{role}'" for role in GlobalRole.values())


class AccountModel(TrashMixin, BaseMutableModel):
    """Account row.

    Fields:
        email: Unique login email (stored lowercase)
        name: Display name
        role: Global role (master, admin, professor)
        is_active: False after trashing until explicitly reactivated
        institution_id: Home institution (nullable, SET NULL)
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(f"role IN ({_ROLES})", name="role"),
        Index(
            "ix_users_institution_active",
            "institution_id",
            "deleted_at",
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=GlobalRole.PROFESSOR.value,
        server_default=GlobalRole.PROFESSOR.value,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    institution_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("institutions.id", ondelete="SET NULL"),
        nullable=True,
    )
