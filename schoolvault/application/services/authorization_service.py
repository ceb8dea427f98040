"""Authorization service.

Loads the facts the tenant policy needs (acting account, membership in the
resource's institution) and returns its decision. Every command and query
handler passes through this service before touching the store.

Architecture:
    - Application service (uses repositories; the injected policy is pure)
    - Returns Result types; a deny is a Success carrying a deny decision
      from authorize(), and a Failure(AuthorizationError) from require()
    - No side effects besides structured logging

Usage:
    authz = AuthorizationService(account_repo, membership_repo, policy, logger)

    result = await authz.require(actor_id, Action.DELETE, ResourceRef(
        resource_type=ResourceType.STUDENT,
        institution_id=student.institution_id,
        record_id=student.id,
    ))
    if isinstance(result, Failure):
        return result
"""

from collections.abc import Callable
from uuid import UUID

from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import AuthorizationError, DomainError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.entities import Membership
from schoolvault.domain.enums import Action, TrashableEntity
from schoolvault.domain.errors import (
    AuthorizationMessages,
    InvalidResourceError,
    UnknownActorError,
)
from schoolvault.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    MembershipRepository,
    TenantPolicyProtocol,
)
from schoolvault.domain.value_objects import (
    Actor,
    AuthorizationDecision,
    ResourceRef,
)

Decide = Callable[[Actor, Membership | None], AuthorizationDecision]


class AuthorizationService:
    """Resolve actor and membership, then evaluate the tenant policy.

    Dependencies (injected via constructor):
        - AccountRepository: Resolves actor_id to the stored global role
        - MembershipRepository: Indexed (account, institution) lookup
        - TenantPolicyProtocol: Pure allow/deny decision
        - LoggerProtocol: Decision logging
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        membership_repo: MembershipRepository,
        policy: TenantPolicyProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._membership_repo = membership_repo
        self._policy = policy
        self._logger = logger

    async def authorize(
        self,
        actor_id: UUID,
        action: Action,
        resource: ResourceRef,
    ) -> Result[AuthorizationDecision, DomainError]:
        """Evaluate (actor, action, resource).

        Returns:
            Success(AuthorizationDecision): allow or deny with reason.
            Failure(InvalidResourceError): institution_id missing on a
                tenant-scoped resource.
            Failure(UnknownActorError): actor_id matches no account.
        """
        result = await self._decide(
            actor_id,
            resource,
            action.value,
            lambda actor, membership: self._policy.evaluate(
                actor, action, resource, membership
            ),
        )
        match result:
            case Success(value=(_, decision)):
                return Success(value=decision)
            case Failure(error=error):
                return Failure(error=error)

    async def require(
        self,
        actor_id: UUID,
        action: Action,
        resource: ResourceRef,
    ) -> Result[Actor, DomainError]:
        """Like authorize(), but a deny becomes Failure(AuthorizationError).

        Returns:
            Success(Actor): Allowed; the resolved actor is returned so
                callers don't fetch it again.
            Failure(DomainError): Denied, malformed resource or unknown actor.
        """
        return self._as_requirement(
            await self._decide(
                actor_id,
                resource,
                action.value,
                lambda actor, membership: self._policy.evaluate(
                    actor, action, resource, membership
                ),
            ),
            resource,
            action.value,
        )

    async def require_trash(
        self,
        actor_id: UUID,
        entity: TrashableEntity,
        resource: ResourceRef,
    ) -> Result[Actor, DomainError]:
        """Require permission to move entity to, or restore it from, the trash.

        Accounts require the master role; students require the delete
        permission on the student's institution.
        """
        return self._as_requirement(
            await self._decide(
                actor_id,
                resource,
                "trash",
                lambda actor, membership: self._policy.evaluate_trash(
                    actor, entity, resource, membership
                ),
            ),
            resource,
            "trash",
        )

    async def _decide(
        self,
        actor_id: UUID,
        resource: ResourceRef,
        action_name: str,
        decide: Decide,
    ) -> Result[tuple[Actor, AuthorizationDecision], DomainError]:
        if not resource.is_well_formed():
            self._logger.error(
                "authorization_invalid_resource",
                actor_id=str(actor_id),
                resource_type=resource.resource_type.value,
                action=action_name,
            )
            return Failure(
                error=InvalidResourceError(
                    code=ErrorCode.INVALID_RESOURCE,
                    message=AuthorizationMessages.INVALID_RESOURCE,
                    resource_type=resource.resource_type.value,
                )
            )

        account = await self._account_repo.find_by_id(actor_id)
        if account is None:
            self._logger.warning(
                "authorization_unknown_actor",
                actor_id=str(actor_id),
                resource_type=resource.resource_type.value,
                action=action_name,
            )
            return Failure(
                error=UnknownActorError(
                    code=ErrorCode.UNKNOWN_ACTOR,
                    message=AuthorizationMessages.UNKNOWN_ACTOR,
                    actor_id=str(actor_id),
                )
            )

        actor = account.as_actor()
        membership = None
        if not actor.is_master and resource.institution_id is not None:
            membership = await self._membership_repo.find(
                actor.id, resource.institution_id
            )

        decision = decide(actor, membership)
        context = {
            "actor_id": str(actor.id),
            "global_role": actor.global_role.value,
            "action": action_name,
            "resource_type": resource.resource_type.value,
            "institution_id": (
                str(resource.institution_id) if resource.institution_id else None
            ),
            "record_id": str(resource.record_id) if resource.record_id else None,
        }
        if decision.allowed:
            self._logger.debug("authorization_allowed", **context)
        else:
            self._logger.info(
                "authorization_denied",
                reason=decision.reason.value if decision.reason else None,
                **context,
            )
        return Success(value=(actor, decision))

    def _as_requirement(
        self,
        result: Result[tuple[Actor, AuthorizationDecision], DomainError],
        resource: ResourceRef,
        action_name: str,
    ) -> Result[Actor, DomainError]:
        match result:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=(actor, decision)) if decision.allowed:
                return Success(value=actor)
            case Success(value=(_, decision)):
                return Failure(
                    error=AuthorizationError(
                        code=ErrorCode.PERMISSION_DENIED,
                        message=AuthorizationMessages.PERMISSION_DENIED,
                        reason=decision.reason.value if decision.reason else None,
                        required_permission=f"{resource.permission}:{action_name}",
                    )
                )
