"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch
the real database, and a fresh undo history per test so no
recorded actions leak from one test into the next.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from affiliate_ops.main import app
from affiliate_ops.models.base import Base, get_db
from affiliate_ops.api.deps import get_action_log
from affiliate_ops.services.action_log import ActionLog
from tests.helpers import make_platform, make_identity


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def action_log():
    return ActionLog(max_history=100)


@pytest.fixture
def client(db_session, action_log):
    """
    Provide a test client with the test database and a
    private undo history.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_action_log] = lambda: action_log
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def platform(db_session):
    return make_platform(db_session)


@pytest.fixture
def identity(db_session):
    return make_identity(db_session)
