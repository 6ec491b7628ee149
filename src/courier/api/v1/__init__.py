# src/courier/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    messages_router,
    participants_router,
    system_router,
)

__all__ = [
    "auth_router",
    "messages_router",
    "participants_router",
    "system_router",
]
