"""Permission components for tenant-scoped authorization.

A permission check is an (Action, ResourceType) pair evaluated against the
actor's membership in the resource's institution.

Usage:
    from schoolvault.domain.enums import Action, ResourceType

    await authz.authorize(actor_id, Action.DELETE, ResourceRef(
        resource_type=ResourceType.STUDENT,
        institution_id=student.institution_id,
    ))
"""

from enum import Enum


class ResourceType(str, Enum):
    """Record types protected by the tenant policy."""

    ACCOUNT = "account"
    MEMBERSHIP = "membership"
    CLASS = "class"
    STUDENT = "student"
    OCCURRENCE_TYPE = "occurrence_type"
    OCCURRENCE = "occurrence"
    ACCESS_REQUEST = "access_request"

    @property
    def requires_institution(self) -> bool:
        """Whether a reference to this type must carry an institution_id.

        Accounts are global identities; their home institution is optional.
        """
        return self is not ResourceType.ACCOUNT


class Action(str, Enum):
    """Actions that can be performed on a resource."""

    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
