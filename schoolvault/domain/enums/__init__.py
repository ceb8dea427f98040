"""Domain enums.

Available Enums:
    - GlobalRole: Account-wide role ceiling (master, admin, professor)
    - MembershipRole: Role inside one institution (admin, professor)
    - Action / ResourceType: Components of an authorization request
    - DenyReason: Why the policy denied a request
    - TrashableEntity: Record kinds that support the trash lifecycle
    - OccurrenceSeverity: Severity of an occurrence type
    - AccessRequestStatus: Review state of an access request
"""

from schoolvault.domain.enums.access_request_status import AccessRequestStatus
from schoolvault.domain.enums.deny_reason import DenyReason
from schoolvault.domain.enums.global_role import GlobalRole
from schoolvault.domain.enums.membership_role import MembershipRole
from schoolvault.domain.enums.occurrence_severity import OccurrenceSeverity
from schoolvault.domain.enums.permission import Action, ResourceType
from schoolvault.domain.enums.trashable_entity import TrashableEntity

__all__ = [
    "AccessRequestStatus",
    "Action",
    "DenyReason",
    "GlobalRole",
    "MembershipRole",
    "OccurrenceSeverity",
    "ResourceType",
    "TrashableEntity",
]
