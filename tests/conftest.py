"""
Shared fixtures: in-memory SQLite database, sessions and an API client.

DATABASE_URL is pointed at SQLite before the app is imported so that no
PostgreSQL server or driver connection is needed to run the suite.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.core.database import create_database_tables, drop_database_tables
from app.main import app
from app.models.student import Student


@pytest.fixture
def engine():
    """Fresh in-memory database with the schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_database_tables(engine)
    yield engine
    drop_database_tables(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


@pytest.fixture
def db(session_factory) -> Session:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def ani(db) -> Student:
    """One stored student."""
    student = Student(name="Ani Lestari", class_label="XII IPA 1", age=17)
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
