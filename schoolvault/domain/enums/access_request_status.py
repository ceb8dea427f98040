"""Access request review states."""

from enum import Enum


class AccessRequestStatus(str, Enum):
    """Review state of an access request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
