"""Membership domain events.

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass
from uuid import UUID

from schoolvault.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class MembershipGranted(DomainEvent):
    """Account added to an institution.

    Attributes:
        membership_id: New membership row.
        account_id: Member account.
        institution_id: Institution joined.
        role: Local role granted.
        actor_id: Account that granted it.
    """

    membership_id: UUID
    account_id: UUID
    institution_id: UUID
    role: str
    actor_id: UUID


@dataclass(frozen=True, kw_only=True)
class MembershipRevoked(DomainEvent):
    """Account removed from an institution."""

    account_id: UUID
    institution_id: UUID
    actor_id: UUID
