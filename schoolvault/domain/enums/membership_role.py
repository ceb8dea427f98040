"""Roles an account can hold inside a single institution."""

from enum import Enum


class MembershipRole(str, Enum):
    """Local role recorded on a membership row.

    An account may be ADMIN in one institution and PROFESSOR in another.
    """

    ADMIN = "admin"
    PROFESSOR = "professor"
