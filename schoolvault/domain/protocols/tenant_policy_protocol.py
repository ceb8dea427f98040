"""Tenant policy protocol (port) for authorization decisions.

Implementations:
    - CasbinTenantPolicy: infrastructure/authorization/casbin_tenant_policy.py

Implementations decide over already-loaded facts and perform no I/O;
AuthorizationService loads the actor and its membership.
"""

from typing import Protocol

from schoolvault.domain.entities import Membership
from schoolvault.domain.enums import Action, TrashableEntity
from schoolvault.domain.value_objects import (
    Actor,
    AuthorizationDecision,
    ResourceRef,
)


class TenantPolicyProtocol(Protocol):
    """Pure allow/deny decisions for tenant-scoped resources."""

    def evaluate(
        self,
        actor: Actor,
        action: Action,
        resource: ResourceRef,
        membership: Membership | None,
    ) -> AuthorizationDecision:
        """Decide (actor, action, resource) given the actor's membership."""
        ...

    def evaluate_trash(
        self,
        actor: Actor,
        entity: TrashableEntity,
        resource: ResourceRef,
        membership: Membership | None,
    ) -> AuthorizationDecision:
        """Decide move-to-trash / restore permission for entity."""
        ...
