from . import health, users  # noqa: F401

__all__ = ["health", "users"]
