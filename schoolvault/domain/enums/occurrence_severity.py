"""Occurrence type severity levels."""

from enum import Enum


class OccurrenceSeverity(str, Enum):
    """Severity configured on an occurrence type."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
