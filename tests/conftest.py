"""
Pytest fixtures for collabhub tests.

The API runs against a throwaway SQLite file: requests go through an
aiosqlite engine (NullPool, so no connection outlives a request's event
loop) and tests seed or inspect rows through a plain synchronous engine on
the same file.

Run with: pytest -v
"""

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from collabhub.main import app
from collabhub.models import Base, Project, User
from collabhub.models.database import get_db


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_session_override(url: str):
    """Build a get_db replacement bound to ``url``."""
    engine = create_async_engine(url, poolclass=NullPool)
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return override_get_db


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "collabhub_test.db"


@pytest.fixture
def sync_engine(db_path: Path) -> Iterator[Engine]:
    engine = create_engine(f"sqlite:///{db_path}")
    event.listen(engine, "connect", _enable_foreign_keys)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(sync_engine: Engine) -> Iterator[Session]:
    """Synchronous session for seeding and inspecting rows."""
    with Session(sync_engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def client(db_path: Path, sync_engine: Engine) -> Iterator[TestClient]:
    """FastAPI test client wired to the test database (lifespan not started)."""
    app.dependency_overrides[get_db] = make_session_override(f"sqlite+aiosqlite:///{db_path}")
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


# =============================================================================
# Seeding helpers
# =============================================================================


@pytest.fixture
def make_user(db: Session):
    """Insert a user directly; ``offset`` spaces out creation times."""
    counter = {"n": 0}
    base_time = datetime(2024, 1, 1, tzinfo=UTC)

    def _make_user(**fields) -> User:
        counter["n"] += 1
        n = counter["n"]
        created_at = base_time + timedelta(minutes=fields.pop("offset", n))
        user = User(
            firebase_uid=fields.pop("firebase_uid", f"uid-{n}"),
            name=fields.pop("name", f"User {n}"),
            email=fields.pop("email", f"user{n}@example.com"),
            created_at=created_at,
            updated_at=created_at,
            **fields,
        )
        db.add(user)
        db.commit()
        return user

    return _make_user


@pytest.fixture
def make_project(db: Session):
    def _make_project(creator: User, title: str = "Project", **fields) -> Project:
        project = Project(creator_id=creator.id, title=title, **fields)
        db.add(project)
        db.commit()
        return project

    return _make_project


@pytest.fixture
def point_api_at():
    """Re-point the API's sessions at another database URL for one test."""

    def _point(url: str) -> None:
        app.dependency_overrides[get_db] = make_session_override(url)

    return _point
