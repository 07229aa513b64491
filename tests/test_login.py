"""
Tests for login, logout and the current-user endpoint.
"""
from datetime import timedelta

from fastapi.testclient import TestClient

from app.main import app
from app.core import config
from app.core.security import create_access_token, decode_access_token


def test_login_success(client, test_user):
    """Test successful login with correct credentials."""
    response = client.post(
        "/api/auth/login",
        json={"email": test_user.email, "password": "testpass123"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["tokenType"] == "bearer"
    assert data["user"]["id"] == test_user.id

    claims = decode_access_token(data["accessToken"])
    assert claims["sub"] == str(test_user.id)
    assert claims["email"] == test_user.email


def test_login_is_case_insensitive_on_email(client, test_user):
    response = client.post(
        "/api/auth/login",
        json={"email": test_user.email.upper(), "password": "testpass123"}
    )

    assert response.status_code == 200


def test_login_wrong_password_matches_unknown_email(client, test_user):
    """Wrong password and unknown email fail identically."""
    wrong_password = client.post(
        "/api/auth/login",
        json={"email": test_user.email, "password": "wrong_password_123"}
    )
    unknown_email = client.post(
        "/api/auth/login",
        json={"email": "nonexistent@example.com", "password": "testpass123"}
    )

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid email or password"}


def test_login_missing_password(client):
    response = client.post("/api/auth/login", json={"email": "test@example.com"})

    assert response.status_code == 400
    assert "password" in response.json()["detail"]


def test_session_cookie_authenticates(client, test_user):
    login = client.post(
        "/api/auth/login",
        json={"email": test_user.email, "password": "testpass123"}
    )
    token = login.json()["accessToken"]

    fresh = TestClient(app, cookies={config.SESSION_COOKIE_NAME: token})
    response = fresh.get("/api/auth/user")

    assert response.status_code == 200
    assert response.json()["email"] == test_user.email


def test_current_user_with_bearer(client, test_user, auth_headers):
    response = client.get("/api/auth/user", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == test_user.id
    assert data["name"] == "Test User"
    assert "hashedPassword" not in data


def test_current_user_requires_session(client):
    response = client.get("/api/auth/user")

    assert response.status_code == 401


def test_current_user_rejects_tampered_token(client, auth_headers):
    headers = {"Authorization": auth_headers["Authorization"] + "x"}
    response = client.get("/api/auth/user", headers=headers)

    assert response.status_code == 401


def test_current_user_rejects_expired_token(client, test_user):
    token = create_access_token({"sub": str(test_user.id)}, expires_delta=timedelta(minutes=-5))
    response = client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_current_user_rejects_token_for_missing_user(client):
    token = create_access_token({"sub": "9999"})
    response = client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_logout_clears_cookie(client):
    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{config.SESSION_COOKIE_NAME}=")
    assert "max-age=0" in set_cookie.lower()
