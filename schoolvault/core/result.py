"""Result types for railway-oriented programming.

Every lifecycle and authorization operation returns a Result instead of
raising. Callers branch on the variant explicitly, so a denied or
not-found outcome can never be silently dropped.

Usage:
    result = await handler.handle(MoveToTrash(...))
    match result:
        case Success(value=affected):
            ...
        case Failure(error=error):
            logger.warning("trash_failed", code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: Payload of the operation.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error value describing why the operation failed.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
