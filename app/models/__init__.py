"""Database models package."""

from .user import User

__all__ = ["User"]
