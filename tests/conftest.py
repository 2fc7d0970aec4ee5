"""Pytest configuration and fixtures."""

import os

# Settings are read on first import of the app, so the test environment has to
# be in place before anything from src is imported.
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src.database import Base, get_db  # noqa: E402
from src.main import app  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the signed-up user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sign_up(client):
    """Return a helper that registers a user and returns bearer auth headers."""

    def _sign_up(email: str, password: str = "testpass123", name: str = "Test User", role=None):
        payload = {"email": email, "password": password, "name": name}
        if role is not None:
            payload["role"] = role
        response = client.post("/auth/sign-up", json=payload)
        assert response.status_code == 201
        token = response.cookies["token"]
        # Keep requests explicit about which user they act as
        client.cookies.clear()
        return AuthHeaders(
            {"Authorization": f"Bearer {token}"},
            user_id=response.json()["user"]["id"],
            email=email,
        )

    return _sign_up


@pytest.fixture
def auth_headers(sign_up):
    """Create a regular user and return auth headers with user info."""
    return sign_up("test@example.com")


@pytest.fixture
def admin_headers(sign_up):
    """Create an admin user and return auth headers with user info."""
    return sign_up("admin@example.com", name="Admin User", role="admin")
