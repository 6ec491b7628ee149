"""Participant and authentication Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from courier.core.security import MAX_PASSWORD_BYTES


class Credentials(BaseModel):
    """Username/password pair submitted to register or log in."""

    username: str = Field(..., min_length=1, max_length=64, description="Case-sensitive username")
    password: str = Field(..., min_length=1, description="Plaintext password")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class RegisterRequest(Credentials):
    """Schema for participant registration."""


class LoginRequest(Credentials):
    """Schema for login submissions."""


class LoginResponse(BaseModel):
    """Response returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(..., description="Token type (typically 'bearer')")
    unread_count: int = Field(..., ge=0, description="Unread messages waiting for the participant")
    summary: str = Field(..., description="Human-readable unread summary")


class LogoutResponse(BaseModel):
    """Confirmation returned after logout."""

    status: str
    detail: str


class ParticipantResponse(BaseModel):
    """Participant record as exposed to API callers.

    The password hash is never part of this schema.
    """

    id: str
    username: str
    last_login: datetime | None
    created_at: datetime
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
