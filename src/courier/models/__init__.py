# src/courier/models/__init__.py
"""SQLAlchemy models for the Courier application."""

from .auth_session import AuthSession
from .message import Message
from .participant import Participant

__all__ = [
    "AuthSession",
    "Message",
    "Participant",
]
