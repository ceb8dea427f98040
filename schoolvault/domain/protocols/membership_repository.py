"""MembershipRepository protocol for account/institution links.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from schoolvault.core.errors import ConflictError
from schoolvault.core.result import Result
from schoolvault.domain.entities import Membership


class MembershipRepository(Protocol):
    """Membership repository protocol (port).

    find() backs every authorization check; implementations must resolve
    it through the (account_id, institution_id) unique index.
    """

    async def find(
        self, account_id: UUID, institution_id: UUID
    ) -> Membership | None:
        """Membership of account in institution, or None."""
        ...

    async def save(self, membership: Membership) -> Result[None, ConflictError]:
        """Create a membership.

        Returns:
            Success(None), or Failure(ConflictError) with
            MEMBERSHIP_ALREADY_EXISTS for a duplicate pair.
        """
        ...

    async def delete(self, account_id: UUID, institution_id: UUID) -> bool:
        """Remove the membership. Returns False if none existed."""
        ...
