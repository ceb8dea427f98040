"""Membership commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID

from schoolvault.domain.enums import MembershipRole


@dataclass(frozen=True, kw_only=True)
class GrantMembership:
    """Give an account a role inside an institution.

    Attributes:
        account_id: Account joining the institution.
        institution_id: Institution to join.
        role: Local role (admin or professor).
        actor_id: Account granting the membership.
    """

    account_id: UUID
    institution_id: UUID
    role: MembershipRole
    actor_id: UUID


@dataclass(frozen=True, kw_only=True)
class RevokeMembership:
    """Remove an account from an institution."""

    account_id: UUID
    institution_id: UUID
    actor_id: UUID
