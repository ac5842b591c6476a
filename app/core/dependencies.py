"""Dependency injection helpers for FastAPI routes."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.repositories.user import UserRepository


def get_user_repository() -> UserRepository:
    """Get a UserRepository for the current request.

    Returns:
        UserRepository instance.
    """
    return UserRepository()


# Type aliases for dependency injection
SessionDep = Annotated[Session, Depends(get_db)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
