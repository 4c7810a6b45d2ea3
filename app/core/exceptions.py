# File: app/core/exceptions.py

"""
Domain errors raised by the user service and repository.

Routes translate these into HTTP responses:
  - DuplicateEmailError -> 400
  - UserNotFoundError   -> 404
"""


class UserServiceError(Exception):
    """Base class for user-management failures."""


class DuplicateEmailError(UserServiceError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already exists: {email}")


class UserNotFoundError(UserServiceError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User not found: id={user_id}")
