"""ListActive / ListTrashed query handler.

Partitions an institution's accounts or students by deleted_at nullity.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[list, DomainError]
- NO domain events (queries are side-effect free)
"""

from schoolvault.application.queries.trash_queries import ListActive, ListTrashed
from schoolvault.application.services import AuthorizationService, TrashRecords
from schoolvault.core.errors import DomainError
from schoolvault.core.result import Failure, Result, Success
from schoolvault.domain.entities import Account, Student
from schoolvault.domain.enums import Action
from schoolvault.domain.value_objects import ResourceRef


class ListRecordsHandler:
    """Handler for ListActive and ListTrashed queries.

    Gated by select on the institution (any member, or master).

    Dependencies (injected via constructor):
        - TrashRecords: Repository dispatch
        - AuthorizationService: Select permission check
    """

    def __init__(
        self,
        records: TrashRecords,
        authz: AuthorizationService,
    ) -> None:
        self._records = records
        self._authz = authz

    async def handle(
        self, query: ListActive | ListTrashed
    ) -> Result[list[Account] | list[Student], DomainError]:
        """Handle ListActive or ListTrashed query.

        Returns:
            Success(list): Matching records, oldest first.
            Failure(AuthorizationError | UnknownActorError): Not allowed.
        """
        allowed = await self._authz.require(
            query.actor_id,
            Action.SELECT,
            ResourceRef(
                resource_type=query.entity.resource_type,
                institution_id=query.institution_id,
            ),
        )
        if isinstance(allowed, Failure):
            return Failure(error=allowed.error)

        repo = self._records.repository(query.entity)
        if isinstance(query, ListTrashed):
            return Success(value=await repo.list_trashed(query.institution_id))
        return Success(value=await repo.list_active(query.institution_id))
