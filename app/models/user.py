# File: app/models/user.py

"""
User model.

The unique constraint on ``email`` is the storage-level source of truth for
email uniqueness; the service's exists-check runs in front of it.
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class User(Base):
    __tablename__ = "users"
    # Keep SQLite from handing out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    # SQLite only allows AUTOINCREMENT on INTEGER, which is 64-bit there anyway
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True
    )
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Naive UTC; set by UserRepository, never by the database
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
