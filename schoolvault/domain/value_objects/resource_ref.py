"""Reference to the record an authorization request targets."""

from dataclasses import dataclass
from uuid import UUID

from schoolvault.domain.enums import ResourceType


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceRef:
    """Target of an authorization request.

    Only the fields the rule table inspects are carried; the policy never
    loads the record itself.

    Attributes:
        resource_type: Kind of record.
        institution_id: Owning tenant. Required for every type except ACCOUNT.
        teacher_id: Teacher attributed on an occurrence (insert/update rules).
        account_id: Account a membership row belongs to.
        record_id: Id of an existing record (informational, for logs).

    Example:
        >>> ResourceRef(
        ...     resource_type=ResourceType.OCCURRENCE,
        ...     institution_id=institution_id,
        ...     teacher_id=actor_id,
        ... )
    """

    resource_type: ResourceType
    institution_id: UUID | None = None
    teacher_id: UUID | None = None
    account_id: UUID | None = None
    record_id: UUID | None = None

    def is_well_formed(self) -> bool:
        """Whether the reference carries the fields its type requires."""
        if self.resource_type.requires_institution:
            return self.institution_id is not None
        return True

    @property
    def permission(self) -> str:
        """Resource name used in "<resource>:<action>" permission strings."""
        return self.resource_type.value
