"""Trash lifecycle domain errors.

Usage:
    from schoolvault.domain.errors import NotInTrashError, TrashError

    if not student.is_trashed():
        return Failure(error=NotInTrashError(
            code=ErrorCode.RECORD_NOT_IN_TRASH,
            message=TrashError.NOT_IN_TRASH,
            entity="student",
            entity_id=str(student.id),
        ))
"""

from dataclasses import dataclass

from schoolvault.core.errors import DomainError


class TrashError:
    """Trash lifecycle error message constants.

    Error Categories:
        - State errors: NOT_IN_TRASH, STILL_IN_TRASH
        - Lookup errors: RECORD_NOT_FOUND
        - Input errors: INVALID_RETENTION_PERIOD, NAIVE_REFERENCE_TIME
    """

    # -------------------------------------------------------------------------
    # State Errors
    # -------------------------------------------------------------------------

    NOT_IN_TRASH = "Record is not in the trash"
    """Restore requires a trashed record."""

    STILL_IN_TRASH = "Record is in the trash and must be restored first"
    """Reactivation requires an active (non-trashed) record."""

    # -------------------------------------------------------------------------
    # Lookup Errors
    # -------------------------------------------------------------------------

    RECORD_NOT_FOUND = "Record not found"

    # -------------------------------------------------------------------------
    # Input Errors
    # -------------------------------------------------------------------------

    INVALID_RETENTION_PERIOD = "Retention period must be at least one day"

    NAIVE_REFERENCE_TIME = "Reference time must be timezone-aware"


@dataclass(frozen=True, slots=True, kw_only=True)
class NotInTrashError(DomainError):
    """Restore requested for a record that is not trashed.

    Attributes:
        entity: Entity kind ("user" or "student").
        entity_id: Id of the record.
    """

    entity: str
    entity_id: str
