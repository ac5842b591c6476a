"""Tests for the user input validation rules."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from app.schemas.user import UserPayload
from app.services.user_validation import (
    DuplicateEmailError,
    InvalidFormatError,
    InvalidLengthError,
    MissingFieldError,
    ValidationErrorCode,
    WeakPasswordError,
    is_valid_email,
    validate_password_strength,
    validate_user_input,
)

VALID = {"name": "Alice Smith", "email": "alice@example.com", "password": "Str0ng!Pass"}


@pytest.fixture
def repository() -> MagicMock:
    repo = MagicMock()
    repo.email_exists.return_value = False
    return repo


def _payload(**overrides: str) -> UserPayload:
    return UserPayload(**{**VALID, **overrides})


def test_valid_user_passes_and_checks_email_once(repository: MagicMock) -> None:
    session = MagicMock()

    validate_user_input(_payload(), session, repository=repository)

    repository.email_exists.assert_called_once_with(session, "alice@example.com")


@pytest.mark.parametrize("field", ["name", "email", "password"])
@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
def test_blank_required_field_is_missing(
    repository: MagicMock, field: str, blank: str
) -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        validate_user_input(_payload(**{field: blank}), MagicMock(), repository=repository)

    assert excinfo.value.message == "name, email, and password are required"
    assert excinfo.value.code is ValidationErrorCode.MISSING_FIELD
    repository.email_exists.assert_not_called()


def test_absent_field_on_create_is_missing(repository: MagicMock) -> None:
    payload = UserPayload(name="Alice Smith", email="alice@example.com")

    with pytest.raises(MissingFieldError):
        validate_user_input(payload, MagicMock(), repository=repository)


@pytest.mark.parametrize(
    "email",
    [
        "alice@example.com",
        "ALICE@EXAMPLE.COM",
        "first.last+tag@sub.example.co",
        "a_b%c-d@my-domain.io",
    ],
)
def test_conventional_emails_are_accepted(email: str) -> None:
    assert is_valid_email(email)


@pytest.mark.parametrize(
    "email",
    [
        "alice",
        "alice@",
        "@example.com",
        "alice@example",
        "alice@example.c",
        "alice@@example.com",
        "alice smith@example.com",
        "alice@example.com\n",
        "alice@exa_mple.com",
    ],
)
def test_malformed_emails_are_rejected(repository: MagicMock, email: str) -> None:
    assert not is_valid_email(email)
    with pytest.raises(InvalidFormatError, match="invalid email format"):
        validate_user_input(_payload(email=email), MagicMock(), repository=repository)


@pytest.mark.parametrize(
    "password",
    [
        "str0ng!pass",  # no uppercase
        "STR0NG!PASS",  # no lowercase
        "Strong!Pass",  # no digit
        "Str0ngPass1",  # no special character
    ],
)
def test_password_missing_a_character_class_is_weak(password: str) -> None:
    with pytest.raises(WeakPasswordError, match="at least one uppercase letter"):
        validate_password_strength(password)


@pytest.mark.parametrize("password", ["S0!a", "S0!abcd", "S0!" + "a" * 98])
def test_password_outside_length_bounds_is_weak(password: str) -> None:
    with pytest.raises(WeakPasswordError, match="between 8 and 100 characters"):
        validate_password_strength(password)


@pytest.mark.parametrize("password", ["S0!abcde", "S0!" + "a" * 97])
def test_password_length_bounds_are_inclusive(password: str) -> None:
    validate_password_strength(password)


@pytest.mark.parametrize("special", list("!@#$%^&*()-_=+[]{}|;:'\",.<>?/~`"))
def test_every_listed_special_character_counts(special: str) -> None:
    validate_password_strength(f"Abcdef1{special}")


def test_non_ascii_letters_do_not_count_as_uppercase() -> None:
    with pytest.raises(WeakPasswordError):
        validate_password_strength("Ébcdef1!")


@pytest.mark.parametrize("length", [3, 50])
def test_name_length_bounds_are_accepted(repository: MagicMock, length: int) -> None:
    validate_user_input(_payload(name="n" * length), MagicMock(), repository=repository)


@pytest.mark.parametrize("length", [2, 51])
def test_name_length_outside_bounds_is_rejected(
    repository: MagicMock, length: int
) -> None:
    with pytest.raises(InvalidLengthError, match="between 3 and 50 characters"):
        validate_user_input(_payload(name="n" * length), MagicMock(), repository=repository)


def test_short_name_example_is_invalid_length(repository: MagicMock) -> None:
    with pytest.raises(InvalidLengthError):
        validate_user_input(_payload(name="Al"), MagicMock(), repository=repository)


def test_duplicate_email_is_rejected_on_create(
    repository: MagicMock, caplog: pytest.LogCaptureFixture
) -> None:
    repository.email_exists.return_value = True

    with caplog.at_level(logging.INFO, logger="app.services.user_validation.service"):
        with pytest.raises(DuplicateEmailError, match="email is already registered") as excinfo:
            validate_user_input(_payload(), MagicMock(), repository=repository)

    assert excinfo.value.email == "alice@example.com"
    assert "alice@example.com is already registered" in caplog.text


def test_rules_short_circuit_in_order(repository: MagicMock) -> None:
    repository.email_exists.return_value = True

    # Bad email, weak password, short name and duplicate: email format wins.
    with pytest.raises(InvalidFormatError):
        validate_user_input(
            _payload(email="nope", password="weak", name="Al"),
            MagicMock(),
            repository=repository,
        )

    # Weak password beats short name and duplicate.
    with pytest.raises(WeakPasswordError):
        validate_user_input(
            _payload(password="weak", name="Al"), MagicMock(), repository=repository
        )

    # Short name beats duplicate.
    with pytest.raises(InvalidLengthError):
        validate_user_input(_payload(name="Al"), MagicMock(), repository=repository)

    repository.email_exists.assert_not_called()


def test_update_skips_duplicate_check(repository: MagicMock) -> None:
    repository.email_exists.return_value = True

    validate_user_input(_payload(), MagicMock(), is_update=True, repository=repository)

    repository.email_exists.assert_not_called()


def test_update_only_checks_supplied_fields(repository: MagicMock) -> None:
    validate_user_input(
        UserPayload(name="Bob Builder"), MagicMock(), is_update=True, repository=repository
    )
    validate_user_input(
        UserPayload(email="bob@x.com"), MagicMock(), is_update=True, repository=repository
    )


def test_update_still_applies_rules_to_supplied_fields(repository: MagicMock) -> None:
    with pytest.raises(InvalidFormatError):
        validate_user_input(
            UserPayload(email="bob"), MagicMock(), is_update=True, repository=repository
        )
    with pytest.raises(WeakPasswordError):
        validate_user_input(
            UserPayload(name="Bob Builder", password="weak"),
            MagicMock(),
            is_update=True,
            repository=repository,
        )
    with pytest.raises(MissingFieldError, match="must not be empty"):
        validate_user_input(
            UserPayload(name="  "), MagicMock(), is_update=True, repository=repository
        )
