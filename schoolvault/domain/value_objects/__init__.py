"""Domain value objects (immutable, no identity)."""

from schoolvault.domain.value_objects.actor import Actor
from schoolvault.domain.value_objects.authorization_decision import (
    AuthorizationDecision,
)
from schoolvault.domain.value_objects.resource_ref import ResourceRef
from schoolvault.domain.value_objects.trash_state import TrashState

__all__ = [
    "Actor",
    "AuthorizationDecision",
    "ResourceRef",
    "TrashState",
]
