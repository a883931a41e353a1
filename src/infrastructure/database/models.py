"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, func, true
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserModel(Base):
    """User record.

    Table and column names match the existing ``User`` table, so the camelCase
    columns are mapped onto snake_case attributes.
    """

    __tablename__ = "User"
    # Never hand out a deleted user's id again on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String(255))
    avatar_url: Mapped[str | None] = mapped_column(String(500))
    followers: Mapped[int] = mapped_column(
        "follwers", Integer, nullable=False, default=0, server_default="0"
    )
    is_active: Mapped[bool] = mapped_column(
        "isActive", Boolean, nullable=False, default=True, server_default=true()
    )
    registered_at: Mapped[datetime] = mapped_column(
        "registeredAt",
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        server_default=func.now(),
    )
