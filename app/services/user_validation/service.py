"""Rules applied to user records before they are persisted."""

from __future__ import annotations

import logging
import string

from sqlalchemy.orm import Session

from app.repositories.user import UserRepository
from app.schemas.user import UserPayload
from app.services.user_validation.models import (
    EMAIL_PATTERN,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_SPECIAL_CHARACTERS,
    DuplicateEmailError,
    InvalidFormatError,
    InvalidLengthError,
    MissingFieldError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("name", "email", "password")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_password_strength(password: str) -> None:
    """Require 8-100 characters drawn from all four character classes.

    Raises:
        WeakPasswordError: The length or a character class requirement fails.
    """
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        raise WeakPasswordError(
            f"password must be between {PASSWORD_MIN_LENGTH} and "
            f"{PASSWORD_MAX_LENGTH} characters"
        )

    has_upper = any(char in string.ascii_uppercase for char in password)
    has_lower = any(char in string.ascii_lowercase for char in password)
    has_digit = any(char in string.digits for char in password)
    has_special = any(char in PASSWORD_SPECIAL_CHARACTERS for char in password)

    if not (has_upper and has_lower and has_digit and has_special):
        raise WeakPasswordError(
            "password must include at least one uppercase letter, one lowercase "
            "letter, one number, and one special character"
        )


def validate_user_input(
    user: UserPayload,
    session: Session,
    *,
    is_update: bool = False,
    repository: UserRepository | None = None,
) -> None:
    """Check a candidate user record, stopping at the first broken rule.

    Rules run in this order: required fields, email format, password
    strength, name length and, for new users only, email uniqueness. On
    update only the fields present in the payload are checked.

    Args:
        user: Decoded request body.
        session: Session used for the email existence check.
        is_update: Skip the uniqueness check and the fields the client left out.
        repository: Repository used for the existence check.

    Raises:
        UserValidationError: One of its subclasses names the failed rule.
    """
    if is_update:
        checked = [field for field in _REQUIRED_FIELDS if field in user.model_fields_set]
    else:
        checked = list(_REQUIRED_FIELDS)

    if any(not (getattr(user, field) or "").strip() for field in checked):
        if is_update:
            raise MissingFieldError("name, email, and password must not be empty")
        raise MissingFieldError("name, email, and password are required")

    if "email" in checked and not is_valid_email(user.email):
        raise InvalidFormatError()

    if "password" in checked:
        validate_password_strength(user.password)

    if "name" in checked and not NAME_MIN_LENGTH <= len(user.name) <= NAME_MAX_LENGTH:
        raise InvalidLengthError()

    if not is_update:
        repository = repository or UserRepository()
        if repository.email_exists(session, user.email):
            error = DuplicateEmailError(user.email)
            logger.info("Rejected new user: email %s is already registered", error.email)
            raise error
