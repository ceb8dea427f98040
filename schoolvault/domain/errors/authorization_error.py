"""Authorization domain errors.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from schoolvault.domain.errors import UnknownActorError

    if account is None:
        return Failure(error=UnknownActorError(
            code=ErrorCode.UNKNOWN_ACTOR,
            message=AuthorizationMessages.UNKNOWN_ACTOR,
            actor_id=str(actor_id),
        ))
"""

from dataclasses import dataclass

from schoolvault.core.errors import DomainError


class AuthorizationMessages:
    """Authorization error message constants.

    Error Categories:
        - Request errors: INVALID_RESOURCE, UNKNOWN_ACTOR
        - Denials: PERMISSION_DENIED
    """

    INVALID_RESOURCE = "Resource reference is missing its institution"
    """Tenant-scoped resources must name their institution."""

    UNKNOWN_ACTOR = "Acting account does not exist"
    """actor_id does not match any stored account."""

    PERMISSION_DENIED = "Permission denied"
    """Policy returned a deny decision."""


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidResourceError(DomainError):
    """Malformed resource reference (caller bug, not a denial).

    Attributes:
        resource_type: Type named by the reference.
    """

    resource_type: str


@dataclass(frozen=True, slots=True, kw_only=True)
class UnknownActorError(DomainError):
    """actor_id does not resolve to an account.

    Attributes:
        actor_id: The id that failed to resolve.
    """

    actor_id: str
