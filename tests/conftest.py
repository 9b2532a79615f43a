"""Pytest fixtures for API tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool


def _set_default_env() -> None:
    os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
    os.environ.setdefault("LOG_LEVEL", "WARNING")


_set_default_env()


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine with the users schema created."""
    from user_api.db.tables import metadata

    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def broken_engine(tmp_path: Path) -> Iterator[Engine]:
    """Engine pointing at a database file that can never be opened."""
    engine = create_engine(f"sqlite+pysqlite:///{tmp_path / 'missing' / 'users.db'}")
    yield engine
    engine.dispose()


@pytest.fixture()
def client(engine: Engine) -> TestClient:
    """Create a FastAPI test client bound to the in-memory store."""
    from user_api.main import create_app

    return TestClient(create_app(engine=engine))


@pytest.fixture()
def broken_client(broken_engine: Engine) -> TestClient:
    """Test client whose store is unreachable."""
    from user_api.main import create_app

    return TestClient(create_app(engine=broken_engine))
