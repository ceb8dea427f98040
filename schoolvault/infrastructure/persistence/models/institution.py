"""Institution model: the tenant boundary."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from schoolvault.infrastructure.persistence.base import BaseMutableModel


class InstitutionModel(BaseMutableModel):
    """School registered in the system.

    Every tenant-scoped table references institutions.id with ON DELETE
    CASCADE.
    """

    __tablename__ = "institutions"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
