from __future__ import annotations

import os
from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ["ORM_USE_MYSQL"] = "false"
    os.environ["ENVIRONMENT"] = "test"
    os.environ["TOPIC_MATCH_MODE"] = "exact"
    os.environ.setdefault("JWT_SECRET", "test-secret")


def reset_database() -> None:
    from app.database import Base, engine
    import app.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture()
def db() -> Iterator[Any]:
    from app.database import SessionLocal

    reset_database()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client() -> Iterator[TestClient]:
    from app.main import create_app

    reset_database()
    app = create_app()
    with TestClient(app) as c:
        yield c
