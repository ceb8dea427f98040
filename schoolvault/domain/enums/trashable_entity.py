"""Record kinds that support the trash lifecycle."""

from enum import Enum

from schoolvault.domain.enums.permission import ResourceType


class TrashableEntity(str, Enum):
    """Entity types with a trash sub-state.

    Values match the public names used by callers ("user" for accounts).
    """

    USER = "user"
    STUDENT = "student"

    @property
    def resource_type(self) -> ResourceType:
        """Resource type the policy evaluates for this entity."""
        if self is TrashableEntity.USER:
            return ResourceType.ACCOUNT
        return ResourceType.STUDENT
