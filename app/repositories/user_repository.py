# File: app/repositories/user_repository.py

"""
Storage gateway for the ``users`` table.

Primitive operations only; business rules live in UserService. Every write
commits immediately. A unique-constraint violation on commit is rolled back
and re-raised as DuplicateEmailError, which covers the window between the
service's exists-check and the write.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateEmailError
from app.models.user import User


def utcnow() -> datetime:
    # Column is timezone-naive, so store naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def insert(self, email: str, name: str) -> User:
        now = utcnow()
        user = User(email=email, name=name, created_at=now, updated_at=now)
        self.db.add(user)
        self._commit(email)
        self.db.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_all(self) -> List[User]:
        return list(self.db.scalars(select(User).order_by(User.id)))

    def exists_by_email(self, email: str) -> bool:
        return bool(self.db.scalar(select(exists().where(User.email == email))))

    def exists_by_id(self, user_id: int) -> bool:
        return bool(self.db.scalar(select(exists().where(User.id == user_id))))

    def delete_by_id(self, user_id: int) -> None:
        user = self.db.get(User, user_id)
        if user is None:
            return
        self.db.delete(user)
        self.db.commit()

    def persist_mutation(self, user: User) -> User:
        """
        Commit in-place changes to ``user`` and bump ``updated_at``.

        updated_at always moves forward, even when the clock has not
        advanced since the previous write.
        """
        now = utcnow()
        previous = user.updated_at
        if previous is not None and now <= previous:
            now = previous + timedelta(microseconds=1)
        user.updated_at = now
        self._commit(user.email)
        self.db.refresh(user)
        return user

    def _commit(self, email: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise DuplicateEmailError(email) from exc
