"""Unit tests for the User entity helpers."""

import pytest

from domain.entities.user import User, UserChanges, is_valid_email


class TestIsValidEmail:
    @pytest.mark.parametrize(
        "email",
        ["a@b.com", "first.last@sub.example.co", "x+tag@y.io", "用户@例子.中国"],
    )
    def test_accepts(self, email: str):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        ["", "a", "a@b", "a@b.", "@b.com", "a@.com", "a b@c.com", "a@b.com ", "a@b@c.com"],
    )
    def test_rejects(self, email: str):
        assert not is_valid_email(email)


class TestUserDefaults:
    def test_system_defaults(self):
        user = User(email="a@b.com")

        assert user.id is None
        assert user.followers == 0
        assert user.is_active is True
        assert user.registered_at is not None


class TestUserChanges:
    def test_supplied_skips_omitted_fields(self):
        changes = UserChanges(followers=0, is_active=False)

        assert changes.supplied() == {"followers": 0, "is_active": False}

    def test_empty_changes(self):
        assert UserChanges().supplied() == {}
