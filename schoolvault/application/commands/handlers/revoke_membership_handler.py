"""RevokeMembership command handler."""

from schoolvault.application.commands.membership_commands import RevokeMembership
from schoolvault.application.services import AuthorizationService
from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import DomainError, NotFoundError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.enums import Action, ResourceType
from schoolvault.domain.events import MembershipRevoked
from schoolvault.domain.protocols import EventBusProtocol, MembershipRepository
from schoolvault.domain.value_objects import ResourceRef


class RevokeMembershipHandler:
    """Handler for RevokeMembership command.

    Authorised as delete on membership (tenant admin, or master).
    """

    def __init__(
        self,
        membership_repo: MembershipRepository,
        authz: AuthorizationService,
        event_bus: EventBusProtocol,
    ) -> None:
        self._membership_repo = membership_repo
        self._authz = authz
        self._event_bus = event_bus

    async def handle(self, cmd: RevokeMembership) -> Result[None, DomainError]:
        """Handle RevokeMembership command.

        Returns:
            Success(None): Membership removed.
            Failure(AuthorizationError | UnknownActorError): Not allowed.
            Failure(NotFoundError): No such membership (MEMBERSHIP_NOT_FOUND).
        """
        allowed = await self._authz.require(
            cmd.actor_id,
            Action.DELETE,
            ResourceRef(
                resource_type=ResourceType.MEMBERSHIP,
                institution_id=cmd.institution_id,
                account_id=cmd.account_id,
            ),
        )
        if isinstance(allowed, Failure):
            return Failure(error=allowed.error)

        if not await self._membership_repo.delete(cmd.account_id, cmd.institution_id):
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.MEMBERSHIP_NOT_FOUND,
                    message="Membership not found",
                    resource_type=ResourceType.MEMBERSHIP.value,
                    resource_id=f"{cmd.account_id}:{cmd.institution_id}",
                )
            )

        await self._event_bus.publish(
            MembershipRevoked(
                account_id=cmd.account_id,
                institution_id=cmd.institution_id,
                actor_id=cmd.actor_id,
            )
        )
        return Success(value=None)
