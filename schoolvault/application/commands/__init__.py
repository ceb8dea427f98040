"""Commands (CQRS write operations)."""

from schoolvault.application.commands.membership_commands import (
    GrantMembership,
    RevokeMembership,
)
from schoolvault.application.commands.student_commands import RegisterStudent
from schoolvault.application.commands.trash_commands import (
    CleanupOldTrash,
    MoveToTrash,
    ReactivateRecord,
    RestoreFromTrash,
)

__all__ = [
    "CleanupOldTrash",
    "GrantMembership",
    "MoveToTrash",
    "ReactivateRecord",
    "RegisterStudent",
    "RestoreFromTrash",
    "RevokeMembership",
]
