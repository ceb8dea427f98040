"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError values returned in Failure results.

Categories:
- Validation errors (INVALID_*)
- Resource errors (*_NOT_FOUND, *_NOT_IN_TRASH)
- Conflict errors (*_ALREADY_EXISTS, *_TAKEN, *_IN_TRASH)
- Authorization errors (PERMISSION_DENIED, UNKNOWN_ACTOR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_RESOURCE = "invalid_resource"
    INVALID_RETENTION_PERIOD = "invalid_retention_period"

    # Resource errors
    RECORD_NOT_FOUND = "record_not_found"
    RECORD_NOT_IN_TRASH = "record_not_in_trash"
    MEMBERSHIP_NOT_FOUND = "membership_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    MEMBERSHIP_ALREADY_EXISTS = "membership_already_exists"
    REGISTRATION_NUMBER_TAKEN = "registration_number_taken"
    RECORD_IN_TRASH = "record_in_trash"
    RESOURCE_CONFLICT = "resource_conflict"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    UNKNOWN_ACTOR = "unknown_actor"
