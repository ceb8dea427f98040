"""Unit tests for RestoreFromTrashHandler.

Uses mocked repositories, authorization service and event bus.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from schoolvault.application.commands.handlers.restore_from_trash_handler import (
    RestoreFromTrashHandler,
)
from schoolvault.application.commands.trash_commands import RestoreFromTrash
from schoolvault.application.services import AuthorizationService, TrashRecords
from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import AuthorizationError
from schoolvault.core.result import Failure, Success
from schoolvault.domain.enums import GlobalRole, TrashableEntity
from schoolvault.domain.errors import NotInTrashError
from schoolvault.domain.events import (
    RecordRestoreAttempted,
    RecordRestoreFailed,
    RecordRestoreSucceeded,
)
from schoolvault.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    StudentRepository,
)
from schoolvault.domain.value_objects import Actor
from tests.conftest import create_test_account, create_test_student


def create_handler():
    """Create handler with mocked dependencies."""
    account_repo = AsyncMock(spec=AccountRepository)
    student_repo = AsyncMock(spec=StudentRepository)
    authz = AsyncMock(spec=AuthorizationService)
    event_bus = AsyncMock(spec=EventBusProtocol)

    handler = RestoreFromTrashHandler(
        records=TrashRecords(account_repo=account_repo, student_repo=student_repo),
        authz=authz,
        event_bus=event_bus,
    )
    return handler, account_repo, student_repo, authz, event_bus


def trashed_student():
    return create_test_student(
        uuid7(), is_active=False, deleted_at=datetime.now(UTC), deleted_by=uuid7()
    )


def published(event_bus) -> list:
    return [c[0][0] for c in event_bus.publish.call_args_list]


@pytest.mark.unit
class TestRestoreFromTrash:
    """Test RestoreFromTrash handler."""

    @pytest.mark.asyncio
    async def test_restore_student_success(self):
        # Arrange
        handler, _, student_repo, authz, event_bus = create_handler()
        actor_id = uuid7()
        student = trashed_student()
        student_repo.find_by_id.return_value = student
        student_repo.restore_from_trash.return_value = True
        authz.require_trash.return_value = Success(
            value=Actor(id=actor_id, global_role=GlobalRole.ADMIN)
        )

        # Act
        result = await handler.handle(
            RestoreFromTrash(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=actor_id,
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value is True
        student_repo.restore_from_trash.assert_called_once_with(student.id)
        student_repo.reactivate.assert_not_called()
        events = published(event_bus)
        assert [type(e) for e in events] == [
            RecordRestoreAttempted,
            RecordRestoreSucceeded,
        ]

    @pytest.mark.asyncio
    async def test_restore_active_record_fails(self):
        handler, _, student_repo, authz, event_bus = create_handler()
        actor_id = uuid7()
        student = create_test_student(uuid7())
        student_repo.find_by_id.return_value = student
        authz.require_trash.return_value = Success(
            value=Actor(id=actor_id, global_role=GlobalRole.ADMIN)
        )

        result = await handler.handle(
            RestoreFromTrash(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=actor_id,
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotInTrashError)
        assert result.error.code == ErrorCode.RECORD_NOT_IN_TRASH
        assert result.error.entity == "student"
        student_repo.restore_from_trash.assert_not_called()
        failed = published(event_bus)[-1]
        assert isinstance(failed, RecordRestoreFailed)
        assert failed.reason == "record_not_in_trash"

    @pytest.mark.asyncio
    async def test_concurrent_restore_loses_race(self):
        """Second of two concurrent restores sees no changed row."""
        handler, _, student_repo, authz, _ = create_handler()
        actor_id = uuid7()
        student = trashed_student()
        student_repo.find_by_id.return_value = student
        student_repo.restore_from_trash.return_value = False
        authz.require_trash.return_value = Success(
            value=Actor(id=actor_id, global_role=GlobalRole.ADMIN)
        )

        result = await handler.handle(
            RestoreFromTrash(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=actor_id,
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotInTrashError)

    @pytest.mark.asyncio
    async def test_restore_user_requires_permission(self):
        handler, account_repo, _, authz, _ = create_handler()
        account = create_test_account(
            is_active=False, deleted_at=datetime.now(UTC), deleted_by=uuid7()
        )
        account_repo.find_by_id.return_value = account
        authz.require_trash.return_value = Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message="Permission denied",
                reason="master_required",
                required_permission="account:trash",
            )
        )

        result = await handler.handle(
            RestoreFromTrash(
                entity=TrashableEntity.USER,
                entity_id=account.id,
                actor_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.reason == "master_required"
        account_repo.restore_from_trash.assert_not_called()

    @pytest.mark.asyncio
    async def test_restore_missing_record(self):
        handler, _, student_repo, authz, _ = create_handler()
        student_repo.find_by_id.return_value = None

        result = await handler.handle(
            RestoreFromTrash(
                entity=TrashableEntity.STUDENT,
                entity_id=uuid7(),
                actor_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RECORD_NOT_FOUND
        authz.require_trash.assert_not_called()
