"""Utility script for inserting a user account from the command line."""

from __future__ import annotations

import argparse
import getpass
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.security import create_password_hash
from app.db import build_engine, build_session_factory, init_db
from app.models.user import User
from app.repositories.user import UserRepository
from app.schemas.user import UserPayload
from app.services.user_validation import UserValidationError, validate_user_input


def create_user(session: Session, *, name: str, email: str, password: str) -> User:
    """Validate and persist a user the same way the HTTP endpoint does.

    Raises:
        UserValidationError: The input breaks one of the validation rules.
    """

    repository = UserRepository()
    payload = UserPayload(name=name, email=email, password=password)
    validate_user_input(payload, session, is_update=False, repository=repository)

    now = datetime.now(timezone.utc)
    user = User(
        id=uuid.uuid4(),
        name=name,
        email=email,
        password=create_password_hash(password),
        created_at=now,
        updated_at=now,
        is_active=True,
    )
    return repository.create(session, user)


def _resolve_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a user account")
    parser.add_argument("--name", help="Display name for the user")
    parser.add_argument("--email", help="Email address for the user")
    parser.add_argument(
        "--password",
        help="Password for the user (omit to securely prompt)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _resolve_cli_args(argv)

    name = (args.name or input("Name: ")).strip()
    email = (args.email or input("Email: ")).strip()
    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")

    engine = build_engine(get_settings())
    init_db(engine)
    session_factory = build_session_factory(engine)

    try:
        with session_factory() as session:
            try:
                user = create_user(session, name=name, email=email, password=password)
            except UserValidationError as exc:
                raise SystemExit(exc.message) from exc
            except IntegrityError as exc:
                raise SystemExit("Failed to create user due to database constraint") from exc
            user_id = user.id
    finally:
        engine.dispose()

    print(f"User created with id={user_id}")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
