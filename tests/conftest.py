"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from frontier_actions.actions.container import container
from frontier_actions.adapters.db.base import Base, get_db
from frontier_actions.core.config import Settings
from tests.models import UserModel


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def session(session_factory) -> Session:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def opened_sessions(session_factory) -> list[dict]:
    """Bind the default container to the test database; records each session it hands out"""
    opened = []

    def provide():
        db = session_factory()
        record = {"session": db, "closed": False}
        opened.append(record)
        try:
            yield db
        finally:
            db.close()
            record["closed"] = True

    container.bind(Session, provide)
    yield opened
    container.bind(Session, get_db)


@pytest.fixture
def users(session) -> list[UserModel]:
    """Three users, two of them active."""
    rows = [
        UserModel(name="John", email="john@x.com", is_active=True),
        UserModel(name="Jane", email="jane@x.com", is_active=True),
        UserModel(name="Jim", email="jim@x.com", is_active=False),
    ]
    session.add_all(rows)
    session.commit()
    return rows


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(base_path=str(tmp_path), modules_enabled=True)
