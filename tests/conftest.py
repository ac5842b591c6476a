"""Shared fixtures backed by an in-memory SQLite database."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings
from app.db import build_engine, build_session_factory, init_db
from app.main import create_app


@pytest.fixture()
def settings() -> Settings:
    return Settings(DATABASE_URL="sqlite+pysqlite:///:memory:", _env_file=None)


@pytest.fixture()
def api_app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture()
def client(api_app: FastAPI) -> Iterator[TestClient]:
    with TestClient(api_app) as test_client:
        yield test_client


@pytest.fixture()
def session_local(settings: Settings) -> Iterator[sessionmaker[Session]]:
    engine = build_engine(settings)
    init_db(engine)
    yield build_session_factory(engine)
    engine.dispose()
