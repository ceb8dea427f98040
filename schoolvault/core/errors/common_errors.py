"""Common error classes shared by every layer.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Target record absent
- ConflictError: Unique-constraint or state conflicts (surfaced verbatim)
- AuthorizationError: Authorization denied (never downgraded)

Usage:
    return Failure(error=NotFoundError(
        code=ErrorCode.RECORD_NOT_FOUND,
        message="Student not found",
        resource_type="student",
        resource_id=str(student_id),
    ))
"""

from dataclasses import dataclass

from schoolvault.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Record not found.

    Attributes:
        resource_type: Type of record (account, student, membership).
        resource_id: ID of the record that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Record conflict (duplicate key, incompatible state).

    Attributes:
        resource_type: Type of record in conflict.
        conflicting_field: Field that conflicts (registration_number, email).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization denied.

    Attributes:
        reason: Machine-readable deny reason from the policy.
        required_permission: "<resource>:<action>" pair that was checked.
    """

    reason: str | None = None
    required_permission: str | None = None
