"""Reasons returned with a deny decision."""

from enum import Enum


class DenyReason(str, Enum):
    """Why the tenant policy denied a request."""

    NO_MEMBERSHIP = "no_membership"
    """Actor has no membership in the resource's institution."""

    ADMIN_REQUIRED = "admin_required"
    """Rule requires the tenant admin role."""

    MASTER_REQUIRED = "master_required"
    """Rule requires the master global role."""

    TEACHER_MISMATCH = "teacher_mismatch"
    """Occurrence teacher is not the acting account."""

    NO_MATCHING_RULE = "no_matching_rule"
    """No rule covers this (resource, action) pair (default deny)."""
