"""Pydantic schemas for the User API.

Wire names keep the existing column spelling (``follwers``, ``isActive``,
``registeredAt``); Python code uses the snake_case field names.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.user import NewUser, User, UserChanges


class UserCreate(BaseModel):
    """Schema for creating a User."""

    email: str = Field(..., max_length=255)
    name: str | None = Field(None, max_length=255)
    avatar_url: str | None = Field(None, max_length=500)

    def to_domain(self) -> NewUser:
        return NewUser(email=self.email, name=self.name, avatar_url=self.avatar_url)


class UserUpdate(BaseModel):
    """Schema for updating a User. Omitted or null fields are left unchanged."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = Field(None, max_length=255)
    name: str | None = Field(None, max_length=255)
    avatar_url: str | None = Field(None, max_length=500)
    followers: int | None = Field(None, alias="follwers", ge=0)
    is_active: bool | None = Field(None, alias="isActive")

    def to_domain(self) -> UserChanges:
        return UserChanges(
            email=self.email,
            name=self.name,
            avatar_url=self.avatar_url,
            followers=self.followers,
            is_active=self.is_active,
        )


class UserResponse(BaseModel):
    """Schema for User response."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "email": "a@b.com",
                "name": "Ada",
                "avatar_url": None,
                "follwers": 0,
                "isActive": True,
                "registeredAt": "2026-01-28T10:00:00",
            }
        },
    )

    id: int
    email: str
    name: str | None = None
    avatar_url: str | None = None
    followers: int = Field(0, alias="follwers")
    is_active: bool = Field(True, alias="isActive")
    registered_at: datetime = Field(..., alias="registeredAt")

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            avatar_url=user.avatar_url,
            followers=user.followers,
            is_active=user.is_active,
            registered_at=user.registered_at,
        )
