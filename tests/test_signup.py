"""
Tests for user signup endpoint.
"""
from app.core import config
from app.core.security import decode_access_token
from app.db.models.user import User
from app.db.models.user_auth import UserAuth


def signup_payload(**overrides):
    payload = {
        "email": "test_signup@example.com",
        "password": "testpass123",
        "firstName": "Test",
        "lastName": "User",
    }
    payload.update(overrides)
    return payload


def test_signup_success(client, db_session):
    """Test successful user registration."""
    response = client.post("/api/auth/signup", json=signup_payload())

    assert response.status_code == 201
    data = response.json()
    assert data["tokenType"] == "bearer"
    assert data["user"]["email"] == "test_signup@example.com"
    assert data["user"]["name"] == "Test User"

    user = db_session.query(User).filter(User.email == "test_signup@example.com").first()
    assert user is not None
    assert user.first_name == "Test"

    credential = db_session.query(UserAuth).filter(UserAuth.user_id == user.id).first()
    assert credential is not None
    assert credential.hashed_password != "testpass123"

    claims = decode_access_token(data["accessToken"])
    assert claims["sub"] == str(user.id)
    assert claims["email"] == user.email


def test_signup_sets_http_only_cookie(client):
    response = client.post("/api/auth/signup", json=signup_payload())

    assert response.status_code == 201
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{config.SESSION_COOKIE_NAME}=")
    assert "httponly" in set_cookie.lower()


def test_signup_normalizes_email_case(client, db_session):
    response = client.post("/api/auth/signup", json=signup_payload(email="Mixed.Case@Example.com"))

    assert response.status_code == 201
    assert response.json()["user"]["email"] == "mixed.case@example.com"


def test_signup_duplicate_email(client, test_user):
    """Test signup with duplicate email returns 409."""
    response = client.post("/api/auth/signup", json=signup_payload(email=test_user.email))

    assert response.status_code == 409
    assert "Email already registered" in response.json()["detail"]


def test_signup_duplicate_email_different_case(client, test_user):
    response = client.post("/api/auth/signup", json=signup_payload(email=test_user.email.upper()))

    assert response.status_code == 409


def test_signup_missing_fields(client):
    """Test signup with missing required fields."""
    response = client.post("/api/auth/signup", json={"email": "test@example.com", "password": "testpass123"})

    assert response.status_code == 400
    assert "firstName" in response.json()["detail"]


def test_signup_short_password(client, db_session):
    """Test signup with password too short."""
    response = client.post("/api/auth/signup", json=signup_payload(password="12345"))

    assert response.status_code == 400
    assert "at least 6 characters" in response.json()["detail"]
    assert db_session.query(User).count() == 0


def test_signup_password_too_long(client):
    """Test signup with password exceeding 72-byte limit."""
    response = client.post("/api/auth/signup", json=signup_payload(password="a" * 73))

    assert response.status_code == 400
    assert "72 bytes or fewer" in response.json()["detail"]


def test_signup_password_exactly_72_bytes(client):
    response = client.post("/api/auth/signup", json=signup_payload(password="a" * 72))

    assert response.status_code == 201


def test_signup_password_unicode_over_72_bytes(client):
    # 19 four-byte characters = 76 bytes
    response = client.post("/api/auth/signup", json=signup_payload(password="\U0001F680" * 19))

    assert response.status_code == 400
    assert "72 bytes or fewer" in response.json()["detail"]


def test_signup_invalid_email(client):
    response = client.post("/api/auth/signup", json=signup_payload(email="not-an-email"))

    assert response.status_code == 400
    assert "email" in response.json()["detail"]


def test_signup_blank_first_name(client):
    response = client.post("/api/auth/signup", json=signup_payload(firstName="   "))

    assert response.status_code == 400
    assert "First name is required" in response.json()["detail"]


def test_signup_rate_limited(client):
    for i in range(config.AUTH_RATE_LIMIT):
        client.post("/api/auth/signup", json=signup_payload(email=f"user{i}@example.com"))

    response = client.post("/api/auth/signup", json=signup_payload(email="one-too-many@example.com"))

    assert response.status_code == 429


def test_signup_unique_violation_returns_conflict(client, db_session):
    """An email taken between the pre-check and the insert is still a 409."""
    # A users row without credentials slips past the UserAuth pre-check
    db_session.add(User(email="race@example.com", first_name="Other"))
    db_session.commit()

    response = client.post("/api/auth/signup", json=signup_payload(email="race@example.com"))

    assert response.status_code == 409
    assert response.json()["detail"] == "Email already registered"
    assert db_session.query(UserAuth).filter(UserAuth.email == "race@example.com").count() == 0
