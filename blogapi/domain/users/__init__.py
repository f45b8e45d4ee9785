from .entities import User
from .exceptions import AuthenticationError, UserNotFoundError
from .repositories import PasswordHasher, UserRepository

__all__ = [
    "AuthenticationError",
    "PasswordHasher",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
