# src/courier/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .common import ErrorResponse
from .message import MessagePayload, MessageResponse
from .participant import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    ParticipantResponse,
    RegisterRequest,
)

__all__ = [
    "ErrorResponse",
    "MessagePayload", "MessageResponse",
    "LoginRequest", "LoginResponse", "LogoutResponse",
    "ParticipantResponse", "RegisterRequest",
]
