"""
Tests for secret redaction in log output.
"""
import asyncio
import logging

from starlette.requests import Request

from app.core.logging_config import sanitize_log_data
from app.main import unhandled_exception_handler

REDACTED = "***REDACTED***"


def test_sanitize_redacts_secret_fields():
    data = {
        "email": "test@example.com",
        "password": "hunter22",
        "access_token": "eyJhbGciOi",
        "OPENAI_API_KEY": "sk-live",
        "Cookie": "jobtrack_session=abc",
        "path": "/api/auth/login",
    }

    sanitized = sanitize_log_data(data)

    assert sanitized["password"] == REDACTED
    assert sanitized["access_token"] == REDACTED
    assert sanitized["OPENAI_API_KEY"] == REDACTED
    assert sanitized["Cookie"] == REDACTED
    assert sanitized["email"] == "test@example.com"
    assert sanitized["path"] == "/api/auth/login"


def test_sanitize_does_not_mutate_input():
    data = {"password": "hunter22"}

    sanitize_log_data(data)

    assert data == {"password": "hunter22"}


def test_sanitize_redacts_nested_headers():
    data = {"headers": {"authorization": "Bearer abc", "user-agent": "pytest"}}

    sanitized = sanitize_log_data(data)

    assert sanitized["headers"]["authorization"] == REDACTED
    assert sanitized["headers"]["user-agent"] == "pytest"
    assert data["headers"]["authorization"] == "Bearer abc"


def test_failed_login_log_hides_password(client, test_user, caplog):
    with caplog.at_level(logging.WARNING, logger="app.api.routes.auth"):
        response = client.post(
            "/api/auth/login",
            json={"email": test_user.email, "password": "not-the-password-9"},
        )

    assert response.status_code == 401
    assert "Login failed" in caplog.text
    assert "not-the-password-9" not in caplog.text
    assert REDACTED in caplog.text


def test_unhandled_error_log_hides_credentials(caplog):
    request = Request({
        "type": "http",
        "method": "GET",
        "path": "/api/applications",
        "query_string": b"search=acme",
        "headers": [
            (b"authorization", b"Bearer secret-token-value"),
            (b"cookie", b"jobtrack_session=secret-cookie-value"),
        ],
        "client": ("203.0.113.7", 50000),
    })

    with caplog.at_level(logging.ERROR, logger="app.main"):
        response = asyncio.run(unhandled_exception_handler(request, RuntimeError("boom")))

    assert response.status_code == 500
    assert "/api/applications" in caplog.text
    assert "secret-token-value" not in caplog.text
    assert "secret-cookie-value" not in caplog.text
