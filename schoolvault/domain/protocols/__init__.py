"""Domain protocols (ports).

Structural interfaces implemented by the infrastructure layer.
"""

from schoolvault.domain.protocols.account_repository import AccountRepository
from schoolvault.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from schoolvault.domain.protocols.logger_protocol import LoggerProtocol
from schoolvault.domain.protocols.membership_repository import MembershipRepository
from schoolvault.domain.protocols.student_repository import StudentRepository
from schoolvault.domain.protocols.tenant_policy_protocol import TenantPolicyProtocol
from schoolvault.domain.protocols.trashable_repository import TrashableRepository

__all__ = [
    "AccountRepository",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "MembershipRepository",
    "StudentRepository",
    "TenantPolicyProtocol",
    "TrashableRepository",
]
