"""Idempotent schema bootstrap executed when the application starts."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.db.base import metadata

# Register the mapped tables on the shared metadata.
import app.models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """Create the users table and its supporting extension if they are missing."""

    is_postgres = engine.dialect.name == "postgresql"

    with engine.begin() as connection:
        if is_postgres:
            connection.execute(text("CREATE EXTENSION IF NOT EXISTS pgcrypto"))

        metadata.create_all(bind=connection, checkfirst=True)

        if is_postgres:
            connection.execute(
                text("ALTER TABLE users ALTER COLUMN id SET DEFAULT gen_random_uuid()")
            )

    logger.info("Database schema ready on %s", engine.dialect.name)
