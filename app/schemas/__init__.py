"""Pydantic schemas used by the FastAPI application."""

from .user import MessageResponse, UserListResponse, UserPayload, UserRead

__all__ = [
    "MessageResponse",
    "UserListResponse",
    "UserPayload",
    "UserRead",
]
