"""Domain events.

Pattern: 3 events per lifecycle workflow (ATTEMPTED → SUCCEEDED/FAILED),
plus single-state events for operations that only report a fact.
"""

from schoolvault.domain.events.base_event import DomainEvent
from schoolvault.domain.events.membership_events import (
    MembershipGranted,
    MembershipRevoked,
)
from schoolvault.domain.events.trash_events import (
    RecordReactivated,
    RecordRestoreAttempted,
    RecordRestoreFailed,
    RecordRestoreSucceeded,
    RecordTrashAttempted,
    RecordTrashFailed,
    RecordTrashSucceeded,
    TrashCleanupCompleted,
)

__all__ = [
    "DomainEvent",
    "MembershipGranted",
    "MembershipRevoked",
    "RecordReactivated",
    "RecordRestoreAttempted",
    "RecordRestoreFailed",
    "RecordRestoreSucceeded",
    "RecordTrashAttempted",
    "RecordTrashFailed",
    "RecordTrashSucceeded",
    "TrashCleanupCompleted",
]
