# src/courier/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .messages import router as messages_router
from .participants import router as participants_router
from .system import router as system_router

__all__ = [
    "auth_router",
    "messages_router",
    "participants_router",
    "system_router",
]
