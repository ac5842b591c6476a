"""Security helpers for password hashing and verification."""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets

_PASSWORD_SCHEME = "pbkdf2_sha256"
_PASSWORD_ITERATIONS = 120_000
_SALT_BYTES = 16


class PasswordHashingError(Exception):
    """Raised when a password cannot be turned into a stored credential."""


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def create_password_hash(password: str) -> str:
    """Hash a password using PBKDF2-HMAC (SHA-256)."""

    if not password:
        raise PasswordHashingError("Password must not be empty")

    try:
        salt = secrets.token_bytes(_SALT_BYTES)
        derived_key = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, _PASSWORD_ITERATIONS
        )
    except (MemoryError, UnicodeEncodeError, ValueError) as exc:
        raise PasswordHashingError("Password hashing failed") from exc

    return (
        f"{_PASSWORD_SCHEME}${_PASSWORD_ITERATIONS}$"
        f"{_b64encode(salt)}${_b64encode(derived_key)}"
    )


def verify_password(password: str, stored_hash: str) -> bool:
    """Validate a password against the stored PBKDF2 hash."""

    try:
        scheme, iteration_str, salt_b64, hash_b64 = stored_hash.split("$")
        if scheme != _PASSWORD_SCHEME:
            return False
        iterations = int(iteration_str)
        salt = _b64decode(salt_b64)
        expected = _b64decode(hash_b64)
        derived = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, iterations
        )
    except (AttributeError, ValueError, TypeError, UnicodeEncodeError):
        return False

    return hmac.compare_digest(derived, expected)
