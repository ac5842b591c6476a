"""Validation rule constants and exceptions for user input."""

from __future__ import annotations

import re
from enum import Enum

EMAIL_PATTERN = re.compile(r"[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,}", re.IGNORECASE)

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 100
PASSWORD_SPECIAL_CHARACTERS = frozenset("!@#$%^&*()-_=+[]{}|;:'\",.<>?/~`")

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50


class ValidationErrorCode(str, Enum):
    """Machine-readable reason attached to each validation failure."""

    MISSING_FIELD = "missing_field"
    INVALID_FORMAT = "invalid_format"
    WEAK_PASSWORD = "weak_password"
    INVALID_LENGTH = "invalid_length"
    DUPLICATE_EMAIL = "duplicate_email"


# =============================================================================
# Exceptions
# =============================================================================


class UserValidationError(Exception):
    """Base exception for rejected user input.

    The message is safe to return to the client verbatim.
    """

    code: ValidationErrorCode

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingFieldError(UserValidationError):
    """Raised when name, email or password is blank."""

    code = ValidationErrorCode.MISSING_FIELD


class InvalidFormatError(UserValidationError):
    """Raised when the email address is malformed."""

    code = ValidationErrorCode.INVALID_FORMAT

    def __init__(self) -> None:
        super().__init__("invalid email format")


class WeakPasswordError(UserValidationError):
    """Raised when the password misses a length or character-class rule."""

    code = ValidationErrorCode.WEAK_PASSWORD


class InvalidLengthError(UserValidationError):
    """Raised when the display name is too short or too long."""

    code = ValidationErrorCode.INVALID_LENGTH

    def __init__(self) -> None:
        super().__init__(
            f"name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
        )


class DuplicateEmailError(UserValidationError):
    """Raised when a new user reuses an email that is already stored."""

    code = ValidationErrorCode.DUPLICATE_EMAIL

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("email is already registered")
