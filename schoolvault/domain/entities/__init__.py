"""Domain entities.

Entities have identity and mutable state. They carry no persistence or
framework dependencies.
"""

from schoolvault.domain.entities.account import Account
from schoolvault.domain.entities.membership import Membership
from schoolvault.domain.entities.student import Student

__all__ = [
    "Account",
    "Membership",
    "Student",
]
