"""Unit tests for GrantMembershipHandler and RevokeMembershipHandler."""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from schoolvault.application.commands.handlers.grant_membership_handler import (
    GrantMembershipHandler,
)
from schoolvault.application.commands.handlers.revoke_membership_handler import (
    RevokeMembershipHandler,
)
from schoolvault.application.commands.membership_commands import (
    GrantMembership,
    RevokeMembership,
)
from schoolvault.application.services import AuthorizationService
from schoolvault.core.enums import ErrorCode
from schoolvault.core.errors import AuthorizationError, ConflictError, NotFoundError
from schoolvault.core.result import Failure, Success
from schoolvault.domain.enums import Action, GlobalRole, MembershipRole, ResourceType
from schoolvault.domain.events import MembershipGranted, MembershipRevoked
from schoolvault.domain.protocols import (
    AccountRepository,
    EventBusProtocol,
    MembershipRepository,
)
from schoolvault.domain.value_objects import Actor
from tests.conftest import create_test_account, create_test_membership


def allowed(actor_id):
    return Success(value=Actor(id=actor_id, global_role=GlobalRole.ADMIN))


def denied():
    return Failure(
        error=AuthorizationError(
            code=ErrorCode.PERMISSION_DENIED,
            message="Permission denied",
            reason="admin_required",
            required_permission="membership:insert",
        )
    )


# =============================================================================
# GrantMembership
# =============================================================================


def create_grant_handler():
    account_repo = AsyncMock(spec=AccountRepository)
    membership_repo = AsyncMock(spec=MembershipRepository)
    authz = AsyncMock(spec=AuthorizationService)
    event_bus = AsyncMock(spec=EventBusProtocol)
    membership_repo.find.return_value = None
    membership_repo.save.return_value = Success(value=None)

    handler = GrantMembershipHandler(
        account_repo=account_repo,
        membership_repo=membership_repo,
        authz=authz,
        event_bus=event_bus,
    )
    return handler, account_repo, membership_repo, authz, event_bus


@pytest.mark.unit
class TestGrantMembership:
    """Test GrantMembership handler."""

    @pytest.mark.asyncio
    async def test_grant_success(self):
        # Arrange
        handler, account_repo, membership_repo, authz, event_bus = (
            create_grant_handler()
        )
        actor_id = uuid7()
        institution_id = uuid7()
        account = create_test_account()
        account_repo.find_by_id.return_value = account
        authz.require.return_value = allowed(actor_id)

        # Act
        result = await handler.handle(
            GrantMembership(
                account_id=account.id,
                institution_id=institution_id,
                role=MembershipRole.PROFESSOR,
                actor_id=actor_id,
            )
        )

        # Assert
        assert isinstance(result, Success)
        membership = result.value
        assert membership.account_id == account.id
        assert membership.institution_id == institution_id
        assert membership.role is MembershipRole.PROFESSOR
        membership_repo.save.assert_called_once_with(membership)

        _, action, resource = authz.require.call_args[0]
        assert action is Action.INSERT
        assert resource.resource_type is ResourceType.MEMBERSHIP
        assert resource.institution_id == institution_id

        event = event_bus.publish.call_args[0][0]
        assert isinstance(event, MembershipGranted)
        assert event.membership_id == membership.id
        assert event.role == "professor"

    @pytest.mark.asyncio
    async def test_grant_denied(self):
        handler, account_repo, membership_repo, authz, event_bus = (
            create_grant_handler()
        )
        authz.require.return_value = denied()

        result = await handler.handle(
            GrantMembership(
                account_id=uuid7(),
                institution_id=uuid7(),
                role=MembershipRole.ADMIN,
                actor_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        account_repo.find_by_id.assert_not_called()
        membership_repo.save.assert_not_called()
        event_bus.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_grant_unknown_account(self):
        handler, account_repo, membership_repo, authz, _ = create_grant_handler()
        account_repo.find_by_id.return_value = None
        authz.require.return_value = allowed(uuid7())

        result = await handler.handle(
            GrantMembership(
                account_id=uuid7(),
                institution_id=uuid7(),
                role=MembershipRole.PROFESSOR,
                actor_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.resource_type == "account"
        membership_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_grant_duplicate_pair(self):
        handler, account_repo, membership_repo, authz, _ = create_grant_handler()
        account = create_test_account()
        institution_id = uuid7()
        account_repo.find_by_id.return_value = account
        membership_repo.find.return_value = create_test_membership(
            account.id, institution_id
        )
        authz.require.return_value = allowed(uuid7())

        result = await handler.handle(
            GrantMembership(
                account_id=account.id,
                institution_id=institution_id,
                role=MembershipRole.ADMIN,
                actor_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.MEMBERSHIP_ALREADY_EXISTS
        membership_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_grant_store_conflict_passed_through(self):
        handler, account_repo, membership_repo, authz, event_bus = (
            create_grant_handler()
        )
        account_repo.find_by_id.return_value = create_test_account()
        authz.require.return_value = allowed(uuid7())
        conflict = ConflictError(
            code=ErrorCode.MEMBERSHIP_ALREADY_EXISTS,
            message="Account is already a member of this institution",
            resource_type="membership",
        )
        membership_repo.save.return_value = Failure(error=conflict)

        result = await handler.handle(
            GrantMembership(
                account_id=uuid7(),
                institution_id=uuid7(),
                role=MembershipRole.PROFESSOR,
                actor_id=uuid7(),
            )
        )

        assert result == Failure(error=conflict)
        event_bus.publish.assert_not_called()


# =============================================================================
# RevokeMembership
# =============================================================================


def create_revoke_handler():
    membership_repo = AsyncMock(spec=MembershipRepository)
    authz = AsyncMock(spec=AuthorizationService)
    event_bus = AsyncMock(spec=EventBusProtocol)

    handler = RevokeMembershipHandler(
        membership_repo=membership_repo,
        authz=authz,
        event_bus=event_bus,
    )
    return handler, membership_repo, authz, event_bus


@pytest.mark.unit
class TestRevokeMembership:
    """Test RevokeMembership handler."""

    @pytest.mark.asyncio
    async def test_revoke_success(self):
        handler, membership_repo, authz, event_bus = create_revoke_handler()
        account_id, institution_id, actor_id = uuid7(), uuid7(), uuid7()
        membership_repo.delete.return_value = True
        authz.require.return_value = allowed(actor_id)

        result = await handler.handle(
            RevokeMembership(
                account_id=account_id,
                institution_id=institution_id,
                actor_id=actor_id,
            )
        )

        assert result == Success(value=None)
        membership_repo.delete.assert_called_once_with(account_id, institution_id)
        assert authz.require.call_args[0][1] is Action.DELETE
        event = event_bus.publish.call_args[0][0]
        assert isinstance(event, MembershipRevoked)
        assert event.account_id == account_id

    @pytest.mark.asyncio
    async def test_revoke_missing_membership(self):
        handler, membership_repo, authz, event_bus = create_revoke_handler()
        membership_repo.delete.return_value = False
        authz.require.return_value = allowed(uuid7())

        result = await handler.handle(
            RevokeMembership(
                account_id=uuid7(), institution_id=uuid7(), actor_id=uuid7()
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MEMBERSHIP_NOT_FOUND
        event_bus.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_revoke_denied(self):
        handler, membership_repo, authz, _ = create_revoke_handler()
        authz.require.return_value = denied()

        result = await handler.handle(
            RevokeMembership(
                account_id=uuid7(), institution_id=uuid7(), actor_id=uuid7()
            )
        )

        assert isinstance(result, Failure)
        membership_repo.delete.assert_not_called()
