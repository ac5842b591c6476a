"""Repository utilities for user persistence."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from sqlalchemy import delete, exists, select
from sqlalchemy.orm import Session

from app.db.session import transaction
from app.models.user import User
from app.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"name", "email", "updated_at"})


class UserNotFoundError(LookupError):
    """Raised when a write targets a user that does not exist."""

    def __init__(self, user_id: uuid.UUID | str):
        self.user_id = user_id
        super().__init__(f"User '{user_id}' not found")


class UserRepository(BaseRepository[User]):
    """Data-access helper for user accounts."""

    def __init__(self) -> None:
        super().__init__(model=User)

    def email_exists(self, session: Session, email: str) -> bool:
        """Non-locking existence check on the email column."""

        statement = select(exists().where(self.model.email == email))
        return bool(session.execute(statement).scalar())

    def create(self, session: Session, user: User) -> User:
        """Insert a new user inside its own transaction."""

        with transaction(session):
            self.add(session, user)
        return user

    def update(
        self, session: Session, user_id: uuid.UUID, *, data: dict[str, Any]
    ) -> User:
        """Apply name/email/updated_at changes to an existing user.

        Raises:
            UserNotFoundError: No row carries ``user_id``; nothing is written.
            ValueError: ``data`` names a field that cannot be changed.
        """
        illegal = set(data) - UPDATABLE_FIELDS
        if illegal:
            raise ValueError(f"Fields cannot be updated: {', '.join(sorted(illegal))}")

        with transaction(session):
            user = session.get(self.model, user_id, with_for_update=True)
            if user is None:
                raise UserNotFoundError(user_id)
            for field, value in data.items():
                setattr(user, field, value)
            session.flush()
        return user

    def delete_by_id(self, session: Session, user_id: uuid.UUID) -> tuple[str, str]:
        """Delete a user and return the name and email it had.

        The read and the delete share one transaction so the returned values
        are the ones that were removed.

        Raises:
            UserNotFoundError: No row carries ``user_id``; the transaction is
                rolled back.
        """
        with transaction(session):
            statement = (
                select(self.model.name, self.model.email)
                .where(self.model.id == user_id)
                .with_for_update()
            )
            row = session.execute(statement).one_or_none()
            if row is None:
                raise UserNotFoundError(user_id)

            session.execute(delete(self.model).where(self.model.id == user_id))

        logger.info("Deleted user %s (%s)", user_id, row.email)
        return row.name, row.email
