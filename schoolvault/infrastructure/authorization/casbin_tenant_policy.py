"""Casbin implementation of TenantPolicyProtocol.

Decision order (first match wins):
    1. Global role MASTER ⇒ allow.
    2. No membership in the resource's institution ⇒ deny NO_MEMBERSHIP.
    3. Enforcer allows (membership role, resource, action) ⇒ allow.
    4. Otherwise deny, with the reason read off the policy rows for
       (resource, action).

Rule table (policy.csv, "member" is inherited by admin and professor):
    | Resource                           | select | insert | update | delete |
    |------------------------------------|--------|--------|--------|--------|
    | class, occurrence_type, membership | member | admin  | admin  | admin  |
    | student                            | member | admin  | admin  | admin  |
    | account                            | member | admin  | admin  | master |
    | occurrence                         | member | own    | own/adm| admin  |
    | access_request                     | member | member | admin  | admin  |

"own" rows require resource.teacher_id to equal the actor. Admins are not
exempt on insert: an occurrence is always filed by its own teacher.

The enforcer is loaded once from files and only read afterwards, so
evaluate() is a pure in-memory computation.
"""

from pathlib import Path

import casbin

from schoolvault.domain.entities import Membership
from schoolvault.domain.enums import (
    Action,
    DenyReason,
    ResourceType,
    TrashableEntity,
)
from schoolvault.domain.value_objects import (
    Actor,
    AuthorizationDecision,
    ResourceRef,
)

MODEL_PATH = Path(__file__).with_name("model.conf")
POLICY_PATH = Path(__file__).with_name("policy.csv")

ADMIN_ROLE = "admin"
MASTER_ROLE = "master"


def create_enforcer(
    model_path: Path = MODEL_PATH,
    policy_path: Path = POLICY_PATH,
) -> casbin.Enforcer:
    """Load the tenant RBAC model and its file policy."""
    return casbin.Enforcer(str(model_path), str(policy_path))


class CasbinTenantPolicy:
    """Tenant-scoped authorization decisions over a casbin enforcer.

    Args:
        enforcer: Enforcer loaded with model.conf and policy.csv.
    """

    def __init__(self, enforcer: casbin.Enforcer) -> None:
        self._enforcer = enforcer

    def evaluate(
        self,
        actor: Actor,
        action: Action,
        resource: ResourceRef,
        membership: Membership | None,
    ) -> AuthorizationDecision:
        """Decide whether actor may perform action on resource.

        Args:
            actor: Acting account (stored global role).
            action: Requested action.
            resource: Target reference. Callers validate it is well formed.
            membership: Actor's membership in resource.institution_id, or None.

        Returns:
            AuthorizationDecision: allow, or deny with a reason.
        """
        if actor.is_master:
            return AuthorizationDecision.allow()

        if membership is None or membership.institution_id != resource.institution_id:
            return AuthorizationDecision.deny(DenyReason.NO_MEMBERSHIP)

        role = membership.role.value
        allowed = self._enforcer.enforce(
            role,
            resource.resource_type.value,
            action.value,
            str(resource.teacher_id) if resource.teacher_id else "",
            str(actor.id),
        )
        if allowed:
            return AuthorizationDecision.allow()
        return AuthorizationDecision.deny(
            self._deny_reason(role, resource.resource_type, action)
        )

    def evaluate_trash(
        self,
        actor: Actor,
        entity: TrashableEntity,
        resource: ResourceRef,
        membership: Membership | None,
    ) -> AuthorizationDecision:
        """Decide whether actor may move entity to, or restore it from, the trash.

        Accounts: master only. Students: the delete permission (tenant admin,
        or master).
        """
        if entity is TrashableEntity.USER and not actor.is_master:
            return AuthorizationDecision.deny(DenyReason.MASTER_REQUIRED)
        return self.evaluate(actor, Action.DELETE, resource, membership)

    def rules_for(
        self, resource_type: ResourceType, action: Action
    ) -> list[list[str]]:
        """Policy rows [role, resource, action, cond] for the pair."""
        return self._enforcer.get_filtered_policy(
            1, resource_type.value, action.value
        )

    def _deny_reason(
        self, role: str, resource_type: ResourceType, action: Action
    ) -> DenyReason:
        rules = self.rules_for(resource_type, action)
        if not rules:
            return DenyReason.NO_MATCHING_RULE

        role_manager = self._enforcer.get_role_manager()
        # The role holds a matching row, so only its "own" condition failed.
        if any(role_manager.has_link(role, rule[0]) for rule in rules):
            return DenyReason.TEACHER_MISMATCH
        if any(rule[0] == ADMIN_ROLE for rule in rules):
            return DenyReason.ADMIN_REQUIRED
        return DenyReason.MASTER_REQUIRED
