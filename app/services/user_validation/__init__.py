"""Input validation for user records."""

from app.services.user_validation.models import (
    DuplicateEmailError,
    InvalidFormatError,
    InvalidLengthError,
    MissingFieldError,
    UserValidationError,
    ValidationErrorCode,
    WeakPasswordError,
)
from app.services.user_validation.service import (
    is_valid_email,
    validate_password_strength,
    validate_user_input,
)

__all__ = [
    # Validation entry points
    "validate_user_input",
    "validate_password_strength",
    "is_valid_email",
    # Exceptions
    "UserValidationError",
    "ValidationErrorCode",
    "MissingFieldError",
    "InvalidFormatError",
    "WeakPasswordError",
    "InvalidLengthError",
    "DuplicateEmailError",
]
