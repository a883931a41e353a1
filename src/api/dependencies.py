"""Dependency injection factories for the API."""

import re
from functools import lru_cache
from typing import Annotated, Callable

from fastapi import Depends, Query

from core.exceptions import InvalidUserIdError, UserNotFoundError
from domain.entities.user import MAX_USER_ID
from domain.services.user_service import UserService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Optionally signed base-10 integer, ASCII digits only
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_user_service() -> UserService:
    """Get User service instance."""
    return UserService(get_uow_factory())


def parse_user_id(raw: str | None) -> int:
    """Parse the ``id`` query parameter.

    Non-integers raise ``InvalidUserIdError``. Integers that no row can carry
    (outside the primary key range) raise ``UserNotFoundError`` without a query.
    """
    if raw is None or not _ID_PATTERN.fullmatch(raw):
        raise InvalidUserIdError(raw)
    if len(raw.lstrip("+-").lstrip("0")) > len(str(MAX_USER_ID)):
        # Too many digits for any row; also keeps int() off huge strings
        raise UserNotFoundError(raw)
    user_id = int(raw)
    if not 1 <= user_id <= MAX_USER_ID:
        raise UserNotFoundError(user_id)
    return user_id


def optional_user_id(id: Annotated[str | None, Query()] = None) -> int | None:
    """``?id=`` when present, else None (list everything)."""
    if id is None:
        return None
    return parse_user_id(id)


def required_user_id(id: Annotated[str | None, Query()] = None) -> int:
    """``?id=`` that must be present."""
    return parse_user_id(id)


OptionalUserId = Annotated[int | None, Depends(optional_user_id)]
RequiredUserId = Annotated[int, Depends(required_user_id)]
