"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from schoolvault.core.errors import ConflictError
from schoolvault.core.result import Result
from schoolvault.domain.entities import Account
from schoolvault.domain.protocols.trashable_repository import TrashableRepository


class AccountRepository(TrashableRepository[Account], Protocol):
    """Account repository protocol (port).

    Adds lookup and creation to the shared trash primitives. list_active and
    list_trashed filter on the account's home institution.

    Example:
        >>> account = await repo.find_by_id(actor_id)
        >>> if account is None:
        ...     return Failure(error=UnknownActorError(...))
    """

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email (case-insensitive)."""
        ...

    async def save(self, account: Account) -> Result[None, ConflictError]:
        """Create a new account.

        Returns:
            Success(None), or Failure(ConflictError) with
            EMAIL_ALREADY_EXISTS when the email is taken.
        """
        ...
