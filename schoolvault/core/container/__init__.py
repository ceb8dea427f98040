"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from schoolvault.core.container import get_logger, get_move_to_trash_handler

- infrastructure: Database and logging singletons
- authorization: Casbin tenant policy singleton
- events: Event bus and subscriptions
- handlers: Session-scoped services and handlers
"""

from schoolvault.core.container.authorization import get_tenant_policy
from schoolvault.core.container.events import get_event_bus
from schoolvault.core.container.handlers import (
    get_authorization_service,
    get_cleanup_old_trash_handler,
    get_grant_membership_handler,
    get_list_records_handler,
    get_move_to_trash_handler,
    get_reactivate_record_handler,
    get_register_student_handler,
    get_restore_from_trash_handler,
    get_revoke_membership_handler,
    get_trash_records,
)
from schoolvault.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

__all__ = [
    "get_authorization_service",
    "get_cleanup_old_trash_handler",
    "get_database",
    "get_db_session",
    "get_event_bus",
    "get_grant_membership_handler",
    "get_list_records_handler",
    "get_logger",
    "get_move_to_trash_handler",
    "get_reactivate_record_handler",
    "get_register_student_handler",
    "get_restore_from_trash_handler",
    "get_revoke_membership_handler",
    "get_tenant_policy",
    "get_trash_records",
]
