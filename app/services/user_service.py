# File: app/services/user_service.py

"""
User service.

Holds the business rules for user records:
  - email is unique across all users (self-update is not a conflict)
  - unknown ids raise UserNotFoundError
  - results are returned as UserResponse views, never ORM rows
"""

import logging
from typing import List

from app.core.exceptions import DuplicateEmailError, UserNotFoundError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def create_user(self, email: str, name: str) -> UserResponse:
        logger.info("Create user requested: email=%s", email)

        if self.repository.exists_by_email(email):
            logger.warning("Duplicate email: %s", email)
            raise DuplicateEmailError(email)

        user = self.repository.insert(email, name)
        logger.info("User created: id=%s, email=%s", user.id, user.email)
        return UserResponse.from_user(user)

    def get_all_users(self) -> List[UserResponse]:
        logger.info("List users requested")
        users = self.repository.get_all()
        logger.info("Users found: %d", len(users))
        return [UserResponse.from_user(user) for user in users]

    def get_user_by_id(self, user_id: int) -> UserResponse:
        logger.info("Get user requested: id=%s", user_id)
        return UserResponse.from_user(self._find_or_raise(user_id))

    def update_user(self, user_id: int, email: str, name: str) -> UserResponse:
        logger.info("Update user requested: id=%s", user_id)

        user = self._find_or_raise(user_id)

        if user.email != email and self.repository.exists_by_email(email):
            logger.warning("Duplicate email: %s", email)
            raise DuplicateEmailError(email)

        user.email = email
        user.name = name
        user = self.repository.persist_mutation(user)

        logger.info("User updated: id=%s", user.id)
        return UserResponse.from_user(user)

    def delete_user(self, user_id: int) -> None:
        logger.info("Delete user requested: id=%s", user_id)

        if not self.repository.exists_by_id(user_id):
            logger.warning("User not found: id=%s", user_id)
            raise UserNotFoundError(user_id)

        self.repository.delete_by_id(user_id)
        logger.info("User deleted: id=%s", user_id)

    def _find_or_raise(self, user_id: int) -> User:
        user = self.repository.get_by_id(user_id)
        if user is None:
            logger.warning("User not found: id=%s", user_id)
            raise UserNotFoundError(user_id)
        return user
