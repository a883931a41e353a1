"""Tagged outcomes returned by repository write operations.

Writes never raise for expected failures. Callers ``match`` on the variant:

    match await uow.users.delete_by_id(user_id):
        case Ok():
            ...
        case NotFound():
            ...
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """The operation succeeded."""

    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    """No record with the given key."""

    key: Any


@dataclass(frozen=True, slots=True)
class Conflict:
    """A unique constraint rejected the write."""

    field: str
    value: Any


@dataclass(frozen=True, slots=True)
class StorageFailure:
    """Any other database error."""

    error: Exception
