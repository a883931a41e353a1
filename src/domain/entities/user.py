"""User domain entity and its input shapes."""

import re
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any

# local@domain.tld, no whitespace and exactly one "@"
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Upper bound of the integer primary key column
MAX_USER_ID = 2**31 - 1


def is_valid_email(value: str) -> bool:
    """Return True if the whole of ``value`` matches the email pattern."""
    return EMAIL_PATTERN.fullmatch(value) is not None


@dataclass
class User:
    """Domain entity for a stored user record."""

    email: str
    id: int | None = None
    name: str | None = None
    avatar_url: str | None = None
    followers: int = 0
    is_active: bool = True
    registered_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class NewUser:
    """Fields accepted when creating a user."""

    email: str
    name: str | None = None
    avatar_url: str | None = None


@dataclass(frozen=True, slots=True)
class UserChanges:
    """Partial update for a user. ``None`` means "leave unchanged"."""

    email: str | None = None
    name: str | None = None
    avatar_url: str | None = None
    followers: int | None = None
    is_active: bool | None = None

    def supplied(self) -> dict[str, Any]:
        """Only the fields that were actually given."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
