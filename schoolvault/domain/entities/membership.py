"""Membership entity: an account's role inside one institution."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from schoolvault.domain.enums import MembershipRole


@dataclass
class Membership:
    """Link between an account and an institution.

    The (account_id, institution_id) pair is unique. The recorded role is
    the account's operative permission inside that institution.

    Attributes:
        id: Unique membership identifier.
        account_id: Member account.
        institution_id: Institution the role applies to.
        role: Local role (admin or professor).
        created_at: When the membership was granted.
    """

    id: UUID
    account_id: UUID
    institution_id: UUID
    role: MembershipRole
    created_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role is MembershipRole.ADMIN
