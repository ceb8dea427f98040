"""Authorization dependency factories.

Casbin RBAC enforcement for tenant role checks. The enforcer is loaded
from the packaged model.conf and policy.csv on first use.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schoolvault.domain.protocols.tenant_policy_protocol import (
        TenantPolicyProtocol,
    )


# ============================================================================
# Authorization (Casbin RBAC)
# ============================================================================


@lru_cache()
def get_tenant_policy() -> "TenantPolicyProtocol":
    """Get tenant policy singleton (app-scoped).

    The enforcer is read-only after loading, so one instance is shared by
    every session.
    """
    from schoolvault.core.container.infrastructure import get_logger
    from schoolvault.infrastructure.authorization import (
        CasbinTenantPolicy,
        create_enforcer,
    )
    from schoolvault.infrastructure.authorization.casbin_tenant_policy import (
        MODEL_PATH,
    )

    policy = CasbinTenantPolicy(create_enforcer())
    get_logger().info("casbin_enforcer_initialized", model_path=str(MODEL_PATH))
    return policy
