"""Pytest configuration and shared fixtures for hearing lifecycle tests.

Provides common fixtures for:
- An in-memory SQLite database and a session per test
- A clock frozen on a known business day
- A seeded case to attach hearings to
- A FastAPI test client wired to the same session and clock
"""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models
from app.core.clock import FixedClock
from app.core.dependencies import get_clock, get_db
from app.db.base import Base
from app.main import app
from app.schemas.case import CaseCreate
from app.services.case_service import CaseService

# Monday 16 March 2026, 15:00 UTC
NOW = datetime.datetime(2026, 3, 16, 15, 0)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for pure components")
    config.addinivalue_line(
        "markers", "integration: Tests that go through the database or the HTTP API"
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def case(db) -> models.Case:
    return CaseService(db).create_case(CaseCreate(case_name="Dupont v. Martin", description="Lease dispute"))


@pytest.fixture
def client(db, clock):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()
