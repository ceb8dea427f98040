"""Actor value object: the account performing an operation."""

from dataclasses import dataclass
from uuid import UUID

from schoolvault.domain.enums import GlobalRole


@dataclass(frozen=True, slots=True)
class Actor:
    """Identity and global role of the acting account.

    Built from the stored account, never from caller-supplied claims.

    Attributes:
        id: Account id.
        global_role: Stored global role of the account.
    """

    id: UUID
    global_role: GlobalRole

    @property
    def is_master(self) -> bool:
        """Masters bypass tenant scoping for every action."""
        return self.global_role is GlobalRole.MASTER
