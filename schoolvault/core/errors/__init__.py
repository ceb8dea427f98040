"""Core errors package.

Usage:
    from schoolvault.core.errors import DomainError, NotFoundError, ConflictError
"""

from schoolvault.core.errors.common_errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from schoolvault.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthorizationError",
]
