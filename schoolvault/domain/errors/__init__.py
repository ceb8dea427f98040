"""Domain errors.

Error values returned in Failure results, never raised.

Usage:
    from schoolvault.domain.errors import NotInTrashError, TrashError
"""

from schoolvault.domain.errors.authorization_error import (
    AuthorizationMessages,
    InvalidResourceError,
    UnknownActorError,
)
from schoolvault.domain.errors.trash_error import NotInTrashError, TrashError

__all__ = [
    "AuthorizationMessages",
    "InvalidResourceError",
    "NotInTrashError",
    "TrashError",
    "UnknownActorError",
]
