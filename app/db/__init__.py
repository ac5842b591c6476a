"""Database helpers and base objects."""

from .base import Base, metadata
from .bootstrap import init_db
from .session import build_engine, build_session_factory, get_db, transaction

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "get_db",
    "init_db",
    "metadata",
    "transaction",
]
