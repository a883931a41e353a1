"""Unit tests for UserService."""

import pytest
from sqlalchemy.exc import OperationalError

from core.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    StorageError,
    UserNotFoundError,
)
from domain.entities.user import NewUser, User, UserChanges
from domain.repositories.results import Conflict, NotFound, Ok, StorageFailure
from domain.services.user_service import UserService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> UserService:
    return UserService(lambda: uow)


# --- list / get ---


class TestListUsers:
    @pytest.mark.asyncio
    async def test_returns_all_users(self, service: UserService, uow: FakeUnitOfWork):
        uow.users.find_all.return_value = [
            User(id=1, email="a@b.com"),
            User(id=2, email="c@d.org"),
        ]

        result = await service.list_users()

        assert [user.id for user in result] == [1, 2]

    @pytest.mark.asyncio
    async def test_returns_empty_list(self, service: UserService, uow: FakeUnitOfWork):
        uow.users.find_all.return_value = []

        assert await service.list_users() == []


class TestGetUser:
    @pytest.mark.asyncio
    async def test_returns_user(self, service: UserService, uow: FakeUnitOfWork, user_id: int):
        uow.users.find_by_id.return_value = User(id=user_id, email="a@b.com")

        result = await service.get_user(user_id)

        assert result.id == user_id
        uow.users.find_by_id.assert_called_once_with(user_id)

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: UserService, uow: FakeUnitOfWork, user_id: int):
        uow.users.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await service.get_user(user_id)

        assert exc_info.value.status_code == 404


# --- create ---


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_creates_user(self, service: UserService, uow: FakeUnitOfWork):
        uow.users.insert.return_value = Ok(User(id=1, email="a@b.com"))

        result = await service.create_user(NewUser(email="a@b.com", name="Ada"))

        assert result.id == 1
        assert result.followers == 0
        assert result.is_active is True
        uow.users.insert.assert_called_once_with(NewUser(email="a@b.com", name="Ada"))
        assert uow.committed

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email",
        ["", "plain", "no-at.example.com", "a@b", "a@@b.com", "a b@c.com", "a@b.com\n", "@b.com"],
    )
    async def test_rejects_invalid_email_without_inserting(
        self, service: UserService, uow: FakeUnitOfWork, email: str
    ):
        with pytest.raises(InvalidEmailError) as exc_info:
            await service.create_user(NewUser(email=email))

        assert exc_info.value.status_code == 400
        uow.users.insert.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_duplicate_email_is_client_error(self, service: UserService, uow: FakeUnitOfWork):
        uow.users.insert.return_value = Conflict(field="email", value="a@b.com")

        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            await service.create_user(NewUser(email="a@b.com"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "email already exists"
        assert uow.rolled_back
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_storage_failure_is_generic_server_error(
        self, service: UserService, uow: FakeUnitOfWork
    ):
        uow.users.insert.return_value = StorageFailure(
            OperationalError("INSERT", {}, Exception("disk full"))
        )

        with pytest.raises(StorageError) as exc_info:
            await service.create_user(NewUser(email="a@b.com"))

        assert exc_info.value.status_code == 500
        assert "disk full" not in exc_info.value.message
        assert uow.rolled_back


# --- update ---


class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_updates_supplied_fields(
        self, service: UserService, uow: FakeUnitOfWork, user_id: int
    ):
        updated = User(id=user_id, email="a@b.com", followers=5)
        uow.users.update_by_id.return_value = Ok(updated)
        changes = UserChanges(followers=5)

        result = await service.update_user(user_id, changes)

        assert result.followers == 5
        uow.users.update_by_id.assert_called_once_with(user_id, changes)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_rejects_invalid_email(
        self, service: UserService, uow: FakeUnitOfWork, user_id: int
    ):
        with pytest.raises(InvalidEmailError):
            await service.update_user(user_id, UserChanges(email="nope"))

        uow.users.update_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: UserService, uow: FakeUnitOfWork, user_id: int):
        uow.users.update_by_id.return_value = NotFound(user_id)

        with pytest.raises(UserNotFoundError):
            await service.update_user(user_id, UserChanges(name="x"))

        assert uow.rolled_back

    @pytest.mark.asyncio
    async def test_duplicate_email(self, service: UserService, uow: FakeUnitOfWork, user_id: int):
        uow.users.update_by_id.return_value = Conflict(field="email", value="taken@b.com")

        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            await service.update_user(user_id, UserChanges(email="taken@b.com"))

        assert exc_info.value.details == {"email": "taken@b.com"}

    @pytest.mark.asyncio
    async def test_storage_failure(self, service: UserService, uow: FakeUnitOfWork, user_id: int):
        uow.users.update_by_id.return_value = StorageFailure(RuntimeError("boom"))

        with pytest.raises(StorageError):
            await service.update_user(user_id, UserChanges(is_active=False))


# --- delete ---


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_deletes_user(self, service: UserService, uow: FakeUnitOfWork, user_id: int):
        uow.users.delete_by_id.return_value = Ok(None)

        await service.delete_user(user_id)

        uow.users.delete_by_id.assert_called_once_with(user_id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: UserService, uow: FakeUnitOfWork, user_id: int):
        uow.users.delete_by_id.return_value = NotFound(user_id)

        with pytest.raises(UserNotFoundError):
            await service.delete_user(user_id)

        assert not uow.committed

    @pytest.mark.asyncio
    async def test_storage_failure(self, service: UserService, uow: FakeUnitOfWork, user_id: int):
        uow.users.delete_by_id.return_value = StorageFailure(RuntimeError("locked"))

        with pytest.raises(StorageError):
            await service.delete_user(user_id)
