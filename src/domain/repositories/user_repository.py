"""User repository protocol."""

from typing import Protocol

from domain.entities.user import NewUser, User, UserChanges
from domain.repositories.results import Conflict, NotFound, Ok, StorageFailure

InsertOutcome = Ok[User] | Conflict | StorageFailure
UpdateOutcome = Ok[User] | NotFound | Conflict | StorageFailure
DeleteOutcome = Ok[None] | NotFound | StorageFailure


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def insert(self, new_user: NewUser) -> InsertOutcome:
        """Insert a user; system defaults fill the remaining columns."""
        ...

    async def find_by_id(self, id: int) -> User | None:
        """Get a user by ID."""
        ...

    async def find_all(self) -> list[User]:
        """Get every user ordered by ID."""
        ...

    async def update_by_id(self, id: int, changes: UserChanges) -> UpdateOutcome:
        """Apply the supplied fields of ``changes`` to one user."""
        ...

    async def delete_by_id(self, id: int) -> DeleteOutcome:
        """Permanently delete a user."""
        ...
