"""Unit tests for ReactivateRecordHandler."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from schoolvault.application.commands.handlers.reactivate_record_handler import (
    ReactivateRecordHandler,
)
from schoolvault.application.commands.trash_commands import ReactivateRecord
from schoolvault.application.services import AuthorizationService, TrashRecords
from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import AuthorizationError, ConflictError
from schoolvault.core.result import Failure, Success
from schoolvault.domain.enums import Action, GlobalRole, TrashableEntity
from schoolvault.domain.events import RecordReactivated
from schoolvault.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    StudentRepository,
)
from schoolvault.domain.value_objects import Actor
from tests.conftest import create_test_student


def create_handler():
    """Create handler with mocked dependencies."""
    account_repo = AsyncMock(spec=AccountRepository)
    student_repo = AsyncMock(spec=StudentRepository)
    authz = AsyncMock(spec=AuthorizationService)
    event_bus = AsyncMock(spec=EventBusProtocol)

    handler = ReactivateRecordHandler(
        records=TrashRecords(account_repo=account_repo, student_repo=student_repo),
        authz=authz,
        event_bus=event_bus,
    )
    return handler, student_repo, authz, event_bus


@pytest.mark.unit
class TestReactivateRecord:
    """Test ReactivateRecord handler."""

    @pytest.mark.asyncio
    async def test_reactivate_restored_student(self):
        # Arrange
        handler, student_repo, authz, event_bus = create_handler()
        actor_id = uuid7()
        student = create_test_student(uuid7(), is_active=False)
        student_repo.find_by_id.return_value = student
        student_repo.reactivate.return_value = True
        authz.require.return_value = Success(
            value=Actor(id=actor_id, global_role=GlobalRole.ADMIN)
        )

        # Act
        result = await handler.handle(
            ReactivateRecord(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=actor_id,
            )
        )

        # Assert
        assert isinstance(result, Success)
        student_repo.reactivate.assert_called_once_with(student.id)
        assert authz.require.call_args[0][1] is Action.UPDATE
        event = event_bus.publish.call_args[0][0]
        assert isinstance(event, RecordReactivated)
        assert event.entity_id == student.id

    @pytest.mark.asyncio
    async def test_trashed_record_conflicts(self):
        handler, student_repo, authz, event_bus = create_handler()
        actor_id = uuid7()
        student = create_test_student(
            uuid7(), is_active=False, deleted_at=datetime.now(UTC)
        )
        student_repo.find_by_id.return_value = student
        authz.require.return_value = Success(
            value=Actor(id=actor_id, global_role=GlobalRole.ADMIN)
        )

        result = await handler.handle(
            ReactivateRecord(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=actor_id,
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.RECORD_IN_TRASH
        student_repo.reactivate.assert_not_called()
        event_bus.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_denied_reactivation(self):
        handler, student_repo, authz, _ = create_handler()
        student = create_test_student(uuid7(), is_active=False)
        student_repo.find_by_id.return_value = student
        authz.require.return_value = Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message="Permission denied",
                reason="admin_required",
                required_permission="student:update",
            )
        )

        result = await handler.handle(
            ReactivateRecord(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        student_repo.reactivate.assert_not_called()
