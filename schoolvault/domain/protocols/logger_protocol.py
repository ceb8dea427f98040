"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured (message + key-value context) logging.

Log Levels:
    - DEBUG: Allow decisions, per-row detail
    - INFO: Lifecycle events, deny decisions
    - WARNING: Failed lifecycle operations
    - ERROR: Malformed requests (caller bugs), handler failures
    - CRITICAL: Store unreachable

Usage:
    from schoolvault.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("record_trashed", entity="student", entity_id=str(student_id))

    job_logger = logger.bind(job="trash_cleanup", retention_days=days)
    job_logger.info("cleanup_started")  # job, retention_days auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Messages are snake_case event names; details go in context fields.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type/error_message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context included in every call.

        The original logger is unchanged.
        """
        ...
