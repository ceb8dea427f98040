"""Application services shared by command and query handlers."""

from schoolvault.application.services.authorization_service import (
    AuthorizationService,
)
from schoolvault.application.services.trash_records import TrashRecords

__all__ = [
    "AuthorizationService",
    "TrashRecords",
]
