"""Outcome of a tenant policy evaluation."""

from dataclasses import dataclass

from schoolvault.domain.enums import DenyReason


@dataclass(frozen=True, slots=True)
class AuthorizationDecision:
    """Allow, or deny with a reason.

    Attributes:
        allowed: True when the action is permitted.
        reason: Why the request was denied (None when allowed).

    Example:
        >>> AuthorizationDecision.allow().allowed
        True
        >>> AuthorizationDecision.deny(DenyReason.NO_MEMBERSHIP).reason
        <DenyReason.NO_MEMBERSHIP: 'no_membership'>
    """

    allowed: bool
    reason: DenyReason | None = None

    @classmethod
    def allow(cls) -> "AuthorizationDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenyReason) -> "AuthorizationDecision":
        return cls(allowed=False, reason=reason)
