"""Repository exports."""

from .user import UserNotFoundError, UserRepository

__all__ = [
    "UserNotFoundError",
    "UserRepository",
]
