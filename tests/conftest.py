"""Pytest configuration and fixtures."""

import os

# Settings are read at import time; point them at SQLite before the app loads
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from northwind_orders import models  # noqa: E402,F401
from northwind_orders.database import Base, create_db_engine, get_db  # noqa: E402
from northwind_orders.main import app  # noqa: E402
from northwind_orders.repositories import OrderRepository, ReferenceResolver  # noqa: E402

# Test database (in-memory SQLite, foreign keys on)
test_engine = create_db_engine("sqlite://")

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def repository(db_session: Session) -> OrderRepository:
    return OrderRepository(db_session)


@pytest.fixture
def resolver(db_session: Session) -> ReferenceResolver:
    return ReferenceResolver(db_session)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
