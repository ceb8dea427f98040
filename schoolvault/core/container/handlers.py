"""Handler dependency factories.

Session-scoped handler instances. Repositories created for one handler
share the session passed in; logger and event bus are app singletons.

Usage:
    async with get_database().get_session() as session:
        handler = get_move_to_trash_handler(session)
        result = await handler.handle(MoveToTrash(...))
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from schoolvault.core.config import settings
from schoolvault.core.container.authorization import get_tenant_policy
from schoolvault.core.container.events import get_event_bus
from schoolvault.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from schoolvault.application.commands.handlers.cleanup_old_trash_handler import (
        CleanupOldTrashHandler,
    )
    from schoolvault.application.commands.handlers.grant_membership_handler import (
        GrantMembershipHandler,
    )
    from schoolvault.application.commands.handlers.move_to_trash_handler import (
        MoveToTrashHandler,
    )
    from schoolvault.application.commands.handlers.reactivate_record_handler import (
        ReactivateRecordHandler,
    )
    from schoolvault.application.commands.handlers.register_student_handler import (
        RegisterStudentHandler,
    )
    from schoolvault.application.commands.handlers.restore_from_trash_handler import (
        RestoreFromTrashHandler,
    )
    from schoolvault.application.commands.handlers.revoke_membership_handler import (
        RevokeMembershipHandler,
    )
    from schoolvault.application.queries.handlers.list_records_handler import (
        ListRecordsHandler,
    )
    from schoolvault.application.services import AuthorizationService, TrashRecords


# ============================================================================
# Services (Session-Scoped)
# ============================================================================


def get_authorization_service(session: AsyncSession) -> "AuthorizationService":
    """Get AuthorizationService bound to session's repositories."""
    from schoolvault.application.services import AuthorizationService
    from schoolvault.infrastructure.persistence.repositories import (
        AccountRepository,
        MembershipRepository,
    )

    return AuthorizationService(
        account_repo=AccountRepository(session=session),
        membership_repo=MembershipRepository(session=session),
        policy=get_tenant_policy(),
        logger=get_logger(),
    )


def get_trash_records(session: AsyncSession) -> "TrashRecords":
    from schoolvault.application.services import TrashRecords
    from schoolvault.infrastructure.persistence.repositories import (
        AccountRepository,
        StudentRepository,
    )

    return TrashRecords(
        account_repo=AccountRepository(session=session),
        student_repo=StudentRepository(session=session),
    )


# ============================================================================
# Trash Lifecycle Handlers
# ============================================================================


def get_move_to_trash_handler(session: AsyncSession) -> "MoveToTrashHandler":
    from schoolvault.application.commands.handlers.move_to_trash_handler import (
        MoveToTrashHandler,
    )

    return MoveToTrashHandler(
        records=get_trash_records(session),
        authz=get_authorization_service(session),
        event_bus=get_event_bus(),
    )


def get_restore_from_trash_handler(
    session: AsyncSession,
) -> "RestoreFromTrashHandler":
    from schoolvault.application.commands.handlers.restore_from_trash_handler import (
        RestoreFromTrashHandler,
    )

    return RestoreFromTrashHandler(
        records=get_trash_records(session),
        authz=get_authorization_service(session),
        event_bus=get_event_bus(),
    )


def get_cleanup_old_trash_handler(session: AsyncSession) -> "CleanupOldTrashHandler":
    """Get CleanupOldTrash handler with the configured retention period."""
    from schoolvault.application.commands.handlers.cleanup_old_trash_handler import (
        CleanupOldTrashHandler,
    )
    from schoolvault.infrastructure.persistence.repositories import (
        AccountRepository,
        StudentRepository,
    )

    return CleanupOldTrashHandler(
        account_repo=AccountRepository(session=session),
        student_repo=StudentRepository(session=session),
        event_bus=get_event_bus(),
        default_days=settings.trash_retention_days,
    )


def get_reactivate_record_handler(
    session: AsyncSession,
) -> "ReactivateRecordHandler":
    from schoolvault.application.commands.handlers.reactivate_record_handler import (
        ReactivateRecordHandler,
    )

    return ReactivateRecordHandler(
        records=get_trash_records(session),
        authz=get_authorization_service(session),
        event_bus=get_event_bus(),
    )


def get_list_records_handler(session: AsyncSession) -> "ListRecordsHandler":
    from schoolvault.application.queries.handlers.list_records_handler import (
        ListRecordsHandler,
    )

    return ListRecordsHandler(
        records=get_trash_records(session),
        authz=get_authorization_service(session),
    )


# ============================================================================
# Membership / Student Handlers
# ============================================================================


def get_grant_membership_handler(session: AsyncSession) -> "GrantMembershipHandler":
    from schoolvault.application.commands.handlers.grant_membership_handler import (
        GrantMembershipHandler,
    )
    from schoolvault.infrastructure.persistence.repositories import (
        AccountRepository,
        MembershipRepository,
    )

    return GrantMembershipHandler(
        account_repo=AccountRepository(session=session),
        membership_repo=MembershipRepository(session=session),
        authz=get_authorization_service(session),
        event_bus=get_event_bus(),
    )


def get_revoke_membership_handler(
    session: AsyncSession,
) -> "RevokeMembershipHandler":
    from schoolvault.application.commands.handlers.revoke_membership_handler import (
        RevokeMembershipHandler,
    )
    from schoolvault.infrastructure.persistence.repositories import (
        MembershipRepository,
    )

    return RevokeMembershipHandler(
        membership_repo=MembershipRepository(session=session),
        authz=get_authorization_service(session),
        event_bus=get_event_bus(),
    )


def get_register_student_handler(session: AsyncSession) -> "RegisterStudentHandler":
    from schoolvault.application.commands.handlers.register_student_handler import (
        RegisterStudentHandler,
    )
    from schoolvault.infrastructure.persistence.repositories import StudentRepository

    return RegisterStudentHandler(
        student_repo=StudentRepository(session=session),
        authz=get_authorization_service(session),
    )
