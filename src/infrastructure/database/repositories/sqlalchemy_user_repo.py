"""SQLAlchemy implementation of User repository."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.user import NewUser, User, UserChanges
from domain.repositories.results import Conflict, NotFound, Ok, StorageFailure
from domain.repositories.user_repository import (
    DeleteOutcome,
    InsertOutcome,
    UpdateOutcome,
)
from infrastructure.database.models import UserModel


def _is_unique_violation(exc: IntegrityError) -> bool:
    """Tell unique-constraint violations apart from NOT NULL, FK, etc."""
    orig = str(exc.orig).lower() if exc.orig else ""
    return "unique" in orig or "duplicate" in orig


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository.

    Writes flush inside the call so constraint violations surface here and
    come back as outcomes. The caller owns commit and rollback.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, new_user: NewUser) -> InsertOutcome:
        """Insert a new user."""
        model = UserModel(
            email=new_user.email,
            name=new_user.name,
            avatar_url=new_user.avatar_url,
        )
        self._session.add(model)
        try:
            await self._session.flush()
            await self._session.refresh(model)
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                return Conflict(field="email", value=new_user.email)
            return StorageFailure(exc)
        except SQLAlchemyError as exc:
            return StorageFailure(exc)
        return Ok(self._to_entity(model))

    async def find_by_id(self, id: int) -> User | None:
        """Get a user by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def find_all(self) -> list[User]:
        """Get all users ordered by ID."""
        stmt = select(UserModel).order_by(UserModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def update_by_id(self, id: int, changes: UserChanges) -> UpdateOutcome:
        """Apply the supplied fields to an existing user."""
        try:
            model = await self._get_model(id)
            if not model:
                return NotFound(id)

            for attr, value in changes.supplied().items():
                setattr(model, attr, value)

            await self._session.flush()
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                return Conflict(field="email", value=changes.email)
            return StorageFailure(exc)
        except SQLAlchemyError as exc:
            return StorageFailure(exc)
        return Ok(self._to_entity(model))

    async def delete_by_id(self, id: int) -> DeleteOutcome:
        """Delete a user."""
        try:
            model = await self._get_model(id)
            if not model:
                return NotFound(id)

            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            return StorageFailure(exc)
        return Ok(None)

    async def _get_model(self, id: int) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            email=model.email,
            name=model.name,
            avatar_url=model.avatar_url,
            followers=model.followers,
            is_active=model.is_active,
            registered_at=model.registered_at,
        )
