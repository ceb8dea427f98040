"""Unit tests for MoveToTrashHandler.

Tests the move-to-trash command handler business logic.
Uses mocked repositories, authorization service and event bus.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from schoolvault.application.commands.handlers.move_to_trash_handler import (
    MoveToTrashHandler,
)
from schoolvault.application.commands.trash_commands import MoveToTrash
from schoolvault.application.services import AuthorizationService, TrashRecords
from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import AuthorizationError, NotFoundError
from schoolvault.core.result import Failure, Success
from schoolvault.domain.enums import GlobalRole, ResourceType, TrashableEntity
from schoolvault.domain.events import (
    RecordTrashAttempted,
    RecordTrashFailed,
    RecordTrashSucceeded,
)
from schoolvault.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    StudentRepository,
)
from schoolvault.domain.value_objects import Actor
from tests.conftest import create_test_account, create_test_student


# =============================================================================
# Test Fixtures
# =============================================================================


def create_handler() -> tuple[
    MoveToTrashHandler, AsyncMock, AsyncMock, AsyncMock, AsyncMock
]:
    """Create handler with mocked dependencies."""
    account_repo = AsyncMock(spec=AccountRepository)
    student_repo = AsyncMock(spec=StudentRepository)
    authz = AsyncMock(spec=AuthorizationService)
    event_bus = AsyncMock(spec=EventBusProtocol)

    handler = MoveToTrashHandler(
        records=TrashRecords(account_repo=account_repo, student_repo=student_repo),
        authz=authz,
        event_bus=event_bus,
    )
    return handler, account_repo, student_repo, authz, event_bus


def allow(actor_id, role=GlobalRole.ADMIN):
    return Success(value=Actor(id=actor_id, global_role=role))


def deny(reason="admin_required", permission="student:trash"):
    return Failure(
        error=AuthorizationError(
            code=ErrorCode.PERMISSION_DENIED,
            message="Permission denied",
            reason=reason,
            required_permission=permission,
        )
    )


def published(event_bus) -> list:
    return [c[0][0] for c in event_bus.publish.call_args_list]


# =============================================================================
# Success Tests
# =============================================================================


@pytest.mark.unit
class TestMoveToTrashSuccess:
    """Test successful move-to-trash flows."""

    @pytest.mark.asyncio
    async def test_trash_student_success(self):
        # Arrange
        handler, _, student_repo, authz, event_bus = create_handler()
        actor_id = uuid7()
        student = create_test_student(uuid7())
        student_repo.find_by_id.return_value = student
        student_repo.move_to_trash.return_value = True
        authz.require_trash.return_value = allow(actor_id)

        # Act
        result = await handler.handle(
            MoveToTrash(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=actor_id,
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value is True
        record_id, deleter, now = student_repo.move_to_trash.call_args[0]
        assert record_id == student.id
        assert deleter == actor_id
        assert now.tzinfo is not None

    @pytest.mark.asyncio
    async def test_authorizes_against_student_institution(self):
        handler, _, student_repo, authz, _ = create_handler()
        actor_id = uuid7()
        student = create_test_student(uuid7())
        student_repo.find_by_id.return_value = student
        student_repo.move_to_trash.return_value = True
        authz.require_trash.return_value = allow(actor_id)

        await handler.handle(
            MoveToTrash(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=actor_id,
            )
        )

        called_actor, entity, resource = authz.require_trash.call_args[0]
        assert called_actor == actor_id
        assert entity is TrashableEntity.STUDENT
        assert resource.resource_type is ResourceType.STUDENT
        assert resource.institution_id == student.institution_id
        assert resource.record_id == student.id

    @pytest.mark.asyncio
    async def test_trash_user_uses_account_repository(self):
        handler, account_repo, student_repo, authz, _ = create_handler()
        master_id = uuid7()
        account = create_test_account(institution_id=uuid7())
        account_repo.find_by_id.return_value = account
        account_repo.move_to_trash.return_value = True
        authz.require_trash.return_value = allow(master_id, GlobalRole.MASTER)

        result = await handler.handle(
            MoveToTrash(
                entity=TrashableEntity.USER,
                entity_id=account.id,
                actor_id=master_id,
            )
        )

        assert isinstance(result, Success)
        account_repo.move_to_trash.assert_called_once()
        student_repo.move_to_trash.assert_not_called()
        resource = authz.require_trash.call_args[0][2]
        assert resource.resource_type is ResourceType.ACCOUNT
        assert resource.account_id == account.id

    @pytest.mark.asyncio
    async def test_already_trashed_returns_false(self):
        """Repeated trash is a no-op success; attribution is untouched."""
        handler, _, student_repo, authz, event_bus = create_handler()
        actor_id = uuid7()
        student = create_test_student(
            uuid7(), deleted_at=datetime.now(UTC), deleted_by=uuid7()
        )
        student_repo.find_by_id.return_value = student
        student_repo.move_to_trash.return_value = False
        authz.require_trash.return_value = allow(actor_id)

        result = await handler.handle(
            MoveToTrash(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=actor_id,
            )
        )

        assert isinstance(result, Success)
        assert result.value is False
        succeeded = published(event_bus)[-1]
        assert isinstance(succeeded, RecordTrashSucceeded)
        assert succeeded.affected is False

    @pytest.mark.asyncio
    async def test_emits_attempted_then_succeeded(self):
        handler, _, student_repo, authz, event_bus = create_handler()
        actor_id = uuid7()
        student = create_test_student(uuid7())
        student_repo.find_by_id.return_value = student
        student_repo.move_to_trash.return_value = True
        authz.require_trash.return_value = allow(actor_id)

        await handler.handle(
            MoveToTrash(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=actor_id,
            )
        )

        events = published(event_bus)
        assert [type(e) for e in events] == [RecordTrashAttempted, RecordTrashSucceeded]
        assert events[0].entity == "student"
        assert events[0].entity_id == student.id
        assert events[1].actor_id == actor_id
        assert events[1].affected is True


# =============================================================================
# Failure Tests
# =============================================================================


@pytest.mark.unit
class TestMoveToTrashFailure:
    """Test move-to-trash failure paths."""

    @pytest.mark.asyncio
    async def test_record_not_found(self):
        handler, _, student_repo, authz, event_bus = create_handler()
        student_repo.find_by_id.return_value = None
        student_id = uuid7()

        result = await handler.handle(
            MoveToTrash(
                entity=TrashableEntity.STUDENT,
                entity_id=student_id,
                actor_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.RECORD_NOT_FOUND
        assert result.error.resource_id == str(student_id)
        authz.require_trash.assert_not_called()
        student_repo.move_to_trash.assert_not_called()
        failed = published(event_bus)[-1]
        assert isinstance(failed, RecordTrashFailed)
        assert failed.reason == "record_not_found"

    @pytest.mark.asyncio
    async def test_permission_denied_leaves_record_unchanged(self):
        handler, _, student_repo, authz, event_bus = create_handler()
        student = create_test_student(uuid7())
        student_repo.find_by_id.return_value = student
        authz.require_trash.return_value = deny()

        result = await handler.handle(
            MoveToTrash(
                entity=TrashableEntity.STUDENT,
                entity_id=student.id,
                actor_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.reason == "admin_required"
        student_repo.move_to_trash.assert_not_called()
        events = published(event_bus)
        assert [type(e) for e in events] == [RecordTrashAttempted, RecordTrashFailed]
        assert events[1].reason == "permission_denied"

    @pytest.mark.asyncio
    async def test_store_error_emits_failed_and_propagates(self):
        handler, _, student_repo, authz, event_bus = create_handler()
        actor_id = uuid7()
        student = create_test_student(uuid7())
        student_repo.find_by_id.return_value = student
        student_repo.move_to_trash.side_effect = RuntimeError("connection lost")
        authz.require_trash.return_value = allow(actor_id)

        with pytest.raises(RuntimeError, match="connection lost"):
            await handler.handle(
                MoveToTrash(
                    entity=TrashableEntity.STUDENT,
                    entity_id=student.id,
                    actor_id=actor_id,
                )
            )

        failed = published(event_bus)[-1]
        assert isinstance(failed, RecordTrashFailed)
        assert failed.reason == "store_error"
