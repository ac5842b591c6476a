"""CRUD endpoints for user accounts."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.core.dependencies import SessionDep, UserRepositoryDep
from app.core.security import PasswordHashingError, create_password_hash, verify_password
from app.models.user import User
from app.repositories.user import UserNotFoundError
from app.schemas.user import MessageResponse, UserListResponse, UserPayload, UserRead
from app.services.user_validation import UserValidationError, validate_user_input

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_QUERY_INT = 2**63 - 1
INTERNAL_ERROR_DETAIL = "Internal Server Error"
NOT_FOUND_DETAIL = "User not found"


def _positive_int(raw: str | None, default: int) -> int:
    """Parse a query value, falling back to ``default`` unless it is a positive int.

    Values that do not fit a signed 64-bit integer count as unparseable.
    """
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if 0 < value <= MAX_QUERY_INT else default


def _parse_user_id(raw: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(raw)
    except ValueError:
        return None


def _internal_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_DETAIL,
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)


@router.get("", response_model=UserListResponse)
def list_users(
    db: SessionDep,
    repository: UserRepositoryDep,
    page: str | None = Query(None, description="1-based page number"),
    limit: str | None = Query(None, description="Maximum users per page"),
) -> UserListResponse:
    """Return one page of users together with the total user count."""
    page_number = _positive_int(page, DEFAULT_PAGE)
    page_size = _positive_int(limit, DEFAULT_LIMIT)
    offset = min((page_number - 1) * page_size, MAX_QUERY_INT)

    try:
        total_users = repository.count(db)
        users = repository.list_paginated(db, limit=page_size, offset=offset)
        items = [UserRead.model_validate(user) for user in users]
    except SQLAlchemyError as exc:
        logger.exception("Error listing users (page=%d, limit=%d)", page_number, page_size)
        raise _internal_error() from exc
    except ValidationError as exc:
        logger.exception("Error decoding stored users")
        raise _internal_error() from exc

    return UserListResponse(
        users=items, page=page_number, limit=page_size, total_users=total_users
    )


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, db: SessionDep, repository: UserRepositoryDep) -> UserRead:
    """Retrieve a single user by identifier."""
    identifier = _parse_user_id(user_id)
    if identifier is None:
        raise _not_found()

    try:
        user = repository.get(db, identifier)
        if user is None:
            raise _not_found()
        return UserRead.model_validate(user)
    except SQLAlchemyError as exc:
        logger.exception("Error querying user %s", user_id)
        raise _internal_error() from exc
    except ValidationError as exc:
        logger.exception("Error decoding user %s", user_id)
        raise _internal_error() from exc


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserPayload, db: SessionDep, repository: UserRepositoryDep
) -> UserRead:
    """Validate and store a new user with a hashed password."""
    try:
        validate_user_input(payload, db, is_update=False, repository=repository)
    except UserValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    except SQLAlchemyError as exc:
        logger.exception("Error checking email availability")
        raise _internal_error() from exc

    try:
        hashed_password = create_password_hash(payload.password)
    except PasswordHashingError as exc:
        logger.exception("Error hashing password")
        raise _internal_error() from exc

    if not verify_password(payload.password, hashed_password):
        logger.error("Freshly hashed password failed verification")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error hashing password",
        )

    now = datetime.now(timezone.utc)
    user = User(
        id=uuid.uuid4(),
        name=payload.name,
        email=payload.email,
        password=hashed_password,
        created_at=now,
        updated_at=now,
        is_active=True,
    )

    try:
        repository.create(db, user)
        created = UserRead.model_validate(user)
    except SQLAlchemyError as exc:
        logger.exception("Error inserting user")
        raise _internal_error() from exc

    logger.info("Created user %s", created.id)
    return created


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    payload: UserPayload,
    db: SessionDep,
    repository: UserRepositoryDep,
) -> UserRead:
    """Change the name and/or email of the user named by the path."""
    try:
        validate_user_input(payload, db, is_update=True, repository=repository)
    except UserValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)

    identifier = _parse_user_id(user_id)
    if identifier is None:
        raise _not_found()

    data = payload.model_dump(include={"name", "email"}, exclude_unset=True)
    data["updated_at"] = datetime.now(timezone.utc)

    try:
        user = repository.update(db, identifier, data=data)
        return UserRead.model_validate(user)
    except UserNotFoundError:
        raise _not_found()
    except SQLAlchemyError as exc:
        logger.exception("Error updating user %s", user_id)
        raise _internal_error() from exc


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str, db: SessionDep, repository: UserRepositoryDep
) -> MessageResponse:
    """Permanently delete a user and confirm what was removed."""
    identifier = _parse_user_id(user_id)
    if identifier is None:
        raise _not_found()

    try:
        name, email = repository.delete_by_id(db, identifier)
    except UserNotFoundError:
        raise _not_found()
    except SQLAlchemyError as exc:
        logger.exception("Error deleting user %s", user_id)
        raise _internal_error() from exc

    return MessageResponse(
        message=f"User {name} with ID {user_id} and email {email} deleted successfully"
    )
