"""Trash partition queries (CQRS read operations).

Queries NEVER change state and do NOT emit domain events.
"""

from dataclasses import dataclass
from uuid import UUID

from schoolvault.domain.enums import TrashableEntity


@dataclass(frozen=True, kw_only=True)
class ListActive:
    """List records of an institution that are not in the trash.

    Attributes:
        entity: USER (accounts whose home is the institution) or STUDENT.
        institution_id: Institution to list.
        actor_id: Account requesting (needs select on the institution).
    """

    entity: TrashableEntity
    institution_id: UUID
    actor_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListTrashed:
    """List records of an institution that are in the trash."""

    entity: TrashableEntity
    institution_id: UUID
    actor_id: UUID
