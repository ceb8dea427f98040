"""Repository implementations (SQLAlchemy adapters for domain ports)."""

from schoolvault.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from schoolvault.infrastructure.persistence.repositories.membership_repository import (
    MembershipRepository,
)
from schoolvault.infrastructure.persistence.repositories.student_repository import (
    StudentRepository,
)

__all__ = [
    "AccountRepository",
    "MembershipRepository",
    "StudentRepository",
]
