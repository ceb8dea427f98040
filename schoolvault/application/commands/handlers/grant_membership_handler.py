"""GrantMembership command handler.

Links an account to an institution with a local role. Authorised as
insert on membership (tenant admin, or master).
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from schoolvault.application.commands.membership_commands import GrantMembership
from schoolvault.application.services import AuthorizationService
from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import ConflictError, DomainError, NotFoundError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.entities import Membership
from schoolvault.domain.enums import Action, ResourceType
from schoolvault.domain.events import MembershipGranted
from schoolvault.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    MembershipRepository,
)
from schoolvault.domain.value_objects import ResourceRef


class GrantMembershipError:
    """GrantMembership-specific error messages."""

    ACCOUNT_NOT_FOUND = "Account not found"
    ALREADY_MEMBER = "Account is already a member of this institution"


class GrantMembershipHandler:
    """Handler for GrantMembership command.

    Dependencies (injected via constructor):
        - AccountRepository: Target account existence
        - MembershipRepository: Persistence
        - AuthorizationService: Insert permission on membership
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        membership_repo: MembershipRepository,
        authz: AuthorizationService,
        event_bus: EventBusProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._membership_repo = membership_repo
        self._authz = authz
        self._event_bus = event_bus

    async def handle(self, cmd: GrantMembership) -> Result[Membership, DomainError]:
        """Handle GrantMembership command.

        Returns:
            Success(Membership): Membership created.
            Failure(AuthorizationError | UnknownActorError): Not allowed.
            Failure(NotFoundError): Target account does not exist.
            Failure(ConflictError): Pair already linked.
        """
        allowed = await self._authz.require(
            cmd.actor_id,
            Action.INSERT,
            ResourceRef(
                resource_type=ResourceType.MEMBERSHIP,
                institution_id=cmd.institution_id,
                account_id=cmd.account_id,
            ),
        )
        if isinstance(allowed, Failure):
            return Failure(error=allowed.error)

        if await self._account_repo.find_by_id(cmd.account_id) is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.RECORD_NOT_FOUND,
                    message=GrantMembershipError.ACCOUNT_NOT_FOUND,
                    resource_type=ResourceType.ACCOUNT.value,
                    resource_id=str(cmd.account_id),
                )
            )

        if await self._membership_repo.find(cmd.account_id, cmd.institution_id):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.MEMBERSHIP_ALREADY_EXISTS,
                    message=GrantMembershipError.ALREADY_MEMBER,
                    resource_type=ResourceType.MEMBERSHIP.value,
                    conflicting_field="institution_id",
                )
            )

        membership = Membership(
            id=uuid7(),
            account_id=cmd.account_id,
            institution_id=cmd.institution_id,
            role=cmd.role,
            created_at=datetime.now(UTC),
        )
        saved = await self._membership_repo.save(membership)
        if isinstance(saved, Failure):
            return Failure(error=saved.error)

        await self._event_bus.publish(
            MembershipGranted(
                membership_id=membership.id,
                account_id=membership.account_id,
                institution_id=membership.institution_id,
                role=membership.role.value,
                actor_id=cmd.actor_id,
            )
        )
        return Success(value=membership)
