"""Account domain entity (stored in the users table).

Accounts are global identities. Tenant rights come from memberships; the
optional institution_id is the account's home institution and only scopes
listings and account-level permission checks.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from schoolvault.domain.enums import GlobalRole
from schoolvault.domain.value_objects import Actor, TrashState


@dataclass
class Account:
    """Account entity with trash lifecycle state.

    Business Rules:
        - Trashing forces is_active to False
        - Restoring clears the trash fields but leaves is_active False
        - Reactivation is a separate explicit step

    Attributes:
        id: Unique account identifier.
        email: Login email (globally unique).
        name: Display name.
        global_role: Account-wide role ceiling.
        is_active: Whether the account may act.
        institution_id: Home institution (None for platform accounts).
        deleted_at: When the account was trashed (None = active).
        deleted_by: Account that trashed it.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> account = Account(
        ...     id=uuid7(),
        ...     email="ana@school.example",
        ...     name="Ana",
        ...     global_role=GlobalRole.PROFESSOR,
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> account.is_trashed()
        False
    """

    id: UUID
    email: str
    name: str
    global_role: GlobalRole
    created_at: datetime
    updated_at: datetime
    is_active: bool = True
    institution_id: UUID | None = None
    deleted_at: datetime | None = None
    deleted_by: UUID | None = None

    @property
    def trash_state(self) -> TrashState:
        return TrashState(deleted_at=self.deleted_at, deleted_by=self.deleted_by)

    def is_trashed(self) -> bool:
        return self.deleted_at is not None

    def as_actor(self) -> Actor:
        """Build the Actor used by the tenant policy.

        A trashed account is still a known actor; the policy decides on
        role and membership alone.
        """
        return Actor(id=self.id, global_role=self.global_role)
