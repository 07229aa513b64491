"""
Pydantic schemas for authentication endpoints.
"""
from typing import Optional
from datetime import datetime
from pydantic import EmailStr, Field, field_validator

from app.schemas.base import CamelModel

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72


class SignupRequest(CamelModel):
    """Request schema for user signup."""
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's password (min 6 characters, max 72 bytes)")
    first_name: str = Field(..., min_length=1, max_length=100, description="User's first name")
    last_name: Optional[str] = Field(default=None, max_length=100, description="User's last name")

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Validate password length (bcrypt only uses the first 72 bytes)."""
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError("Password must be 72 bytes or fewer")
        return v

    @field_validator("first_name")
    @classmethod
    def require_first_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("First name is required")
        return v

    @field_validator("last_name")
    @classmethod
    def strip_last_name(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v else v

    class Config:
        json_schema_extra = {
            "example": {
                "email": "jane.doe@example.com",
                "password": "SecurePass123",
                "firstName": "Jane",
                "lastName": "Doe"
            }
        }


class LoginRequest(CamelModel):
    """Request schema for user login."""
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "jane.doe@example.com",
                "password": "SecurePass123"
            }
        }


class UserResponse(CamelModel):
    """Public user record."""
    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: str = ""
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None


class AuthResponse(CamelModel):
    """Returned by signup and login. The same token is also set as a cookie."""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
