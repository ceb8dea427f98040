"""Global account roles.

The global role is a ceiling, not the operative permission. Inside an
institution an account acts with the role recorded on its membership,
except for MASTER which bypasses tenant scoping entirely.
"""

from enum import Enum


class GlobalRole(str, Enum):
    """Account-wide role.

    String Enum:
        Values are lowercase and match the stored column values.
    """

    MASTER = "master"
    """Platform operator. Allowed every action on every tenant."""

    ADMIN = "admin"
    """Institution administrator (operative rights come from memberships)."""

    PROFESSOR = "professor"
    """Teacher account (operative rights come from memberships)."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings."""
        return [role.value for role in cls]
