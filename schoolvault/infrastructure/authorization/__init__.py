"""Tenant authorization backed by a casbin RBAC model.

model.conf and policy.csv hold the rule table; CasbinTenantPolicy adds the
master bypass, the membership gate and the deny reasons.
"""

from schoolvault.infrastructure.authorization.casbin_tenant_policy import (
    CasbinTenantPolicy,
    create_enforcer,
)

__all__ = [
    "CasbinTenantPolicy",
    "create_enforcer",
]
