"""Base model and mixins for all database tables.

This module provides:
- BaseModel: Declarative base for ALL models (id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for mutable models (combines the above)
- TrashMixin: deleted_at / deleted_by columns for trashable tables

Domain entities do NOT inherit from these; repositories map between them.

Architecture:
    BaseModel (id, created_at)
        ↑
        ├── BaseMutableModel (+ updated_at)
        │   ├── InstitutionModel, SchoolClassModel
        │   └── AccountModel, StudentModel (+ TrashMixin)
        │
        └── MembershipModel, OccurrenceModel, ... (no updated_at)
"""

from datetime import datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, ForeignKey, MetaData, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column
from uuid_extensions import uuid7

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class BaseModel(DeclarativeBase):
    """Declarative base for all database models.

    Provides:
    - id: UUID primary key (uuid7, time-ordered)
    - created_at: Timestamp when the row was inserted (UTC)
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Adds updated_at, refreshed on every ORM update."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable models (id, created_at, updated_at)."""

    __abstract__ = True


class TrashMixin:
    """Soft-delete columns.

    deleted_at IS NULL means active. deleted_by references the acting
    account and is set to NULL when that account is purged.
    """

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        index=True,
    )

    @declared_attr
    def deleted_by(cls) -> Mapped[PythonUUID | None]:
        return mapped_column(
            Uuid,
            ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        )
