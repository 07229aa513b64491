"""
Shared fixtures: an in-memory SQLite database wired into the app, plus
helpers for creating users and auth headers.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.models.user import User
from app.db.models.user_auth import UserAuth
from app.core.auth_dependency import get_db
from app.core.rate_limit import rate_limit_store
from app.core.security import hash_password, create_access_token


# Setup in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override get_db dependency for testing."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function", autouse=True)
def setup_db():
    """Create and drop tables for each test."""
    Base.metadata.create_all(bind=test_engine)
    app.dependency_overrides[get_db] = override_get_db
    rate_limit_store.clear()
    yield
    app.dependency_overrides.pop(get_db, None)
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session():
    """Provide a database session for tests."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def make_user(db_session):
    """Factory creating a user with credentials directly in the database."""
    def _make_user(email: str = "test@example.com", password: str = "testpass123", first_name: str = "Test") -> User:
        user = User(email=email, first_name=first_name, last_name="User")
        db_session.add(user)
        db_session.flush()
        db_session.add(UserAuth(user_id=user.id, email=email, hashed_password=hash_password(password)))
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def test_user(make_user):
    """Create a test user."""
    return make_user()


@pytest.fixture
def other_user(make_user):
    """A second user, for ownership checks."""
    return make_user(email="other@example.com", first_name="Other")


def auth_headers_for(user: User) -> dict:
    token = create_access_token({"sub": str(user.id), "email": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(test_user):
    """Bearer header for test_user."""
    return auth_headers_for(test_user)


@pytest.fixture
def other_headers(other_user):
    """Bearer header for other_user."""
    return auth_headers_for(other_user)
