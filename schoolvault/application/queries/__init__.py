"""Queries (CQRS read operations)."""

from schoolvault.application.queries.trash_queries import ListActive, ListTrashed

__all__ = [
    "ListActive",
    "ListTrashed",
]
