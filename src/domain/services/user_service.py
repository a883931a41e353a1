"""User service layer with validation and outcome mapping."""

from typing import Callable

import structlog

from core.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    StorageError,
    UserNotFoundError,
)
from domain.entities.user import NewUser, User, UserChanges, is_valid_email
from domain.repositories.results import Conflict, NotFound, Ok, StorageFailure
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class UserService:
    """Service layer for User CRUD.

    Holds nothing but the unit-of-work factory, so a single instance can serve
    every request.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_users(self) -> list[User]:
        """Get all users."""
        async with self._uow_factory() as uow:
            return await uow.users.find_all()

    async def get_user(self, user_id: int) -> User:
        """Get a single user or raise ``UserNotFoundError``."""
        async with self._uow_factory() as uow:
            user = await uow.users.find_by_id(user_id)
            if not user:
                raise UserNotFoundError(user_id)
            return user

    async def create_user(self, new_user: NewUser) -> User:
        """Validate and insert a new user."""
        if not is_valid_email(new_user.email):
            raise InvalidEmailError(new_user.email)

        async with self._uow_factory() as uow:
            outcome = await uow.users.insert(new_user)
            match outcome:
                case Ok(user):
                    await uow.commit()
                    logger.info("user_created", user_id=user.id)
                    return user
                case Conflict():
                    await uow.rollback()
                    raise EmailAlreadyExistsError(new_user.email)
                case StorageFailure(error):
                    await uow.rollback()
                    raise self._storage_error("insert", error)

    async def update_user(self, user_id: int, changes: UserChanges) -> User:
        """Apply a partial update; omitted fields keep their values."""
        if changes.email is not None and not is_valid_email(changes.email):
            raise InvalidEmailError(changes.email)

        async with self._uow_factory() as uow:
            outcome = await uow.users.update_by_id(user_id, changes)
            match outcome:
                case Ok(user):
                    await uow.commit()
                    logger.info(
                        "user_updated",
                        user_id=user_id,
                        fields=sorted(changes.supplied()),
                    )
                    return user
                case NotFound():
                    await uow.rollback()
                    raise UserNotFoundError(user_id)
                case Conflict(value=email):
                    await uow.rollback()
                    raise EmailAlreadyExistsError(email)
                case StorageFailure(error):
                    await uow.rollback()
                    raise self._storage_error("update", error, user_id=user_id)

    async def delete_user(self, user_id: int) -> None:
        """Permanently delete a user."""
        async with self._uow_factory() as uow:
            outcome = await uow.users.delete_by_id(user_id)
            match outcome:
                case Ok():
                    await uow.commit()
                    logger.info("user_deleted", user_id=user_id)
                case NotFound():
                    await uow.rollback()
                    raise UserNotFoundError(user_id)
                case StorageFailure(error):
                    await uow.rollback()
                    raise self._storage_error("delete", error, user_id=user_id)

    @staticmethod
    def _storage_error(operation: str, error: Exception, **context: object) -> StorageError:
        """Log the real cause and return the generic error for the caller."""
        logger.error(
            "user_storage_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **context,
        )
        return StorageError()
