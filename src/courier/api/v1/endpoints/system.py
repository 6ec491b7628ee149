"""System and transparency endpoints for the Courier API."""

from __future__ import annotations

from fastapi import APIRouter
from sqlalchemy import Select, func, select

from courier.api.v1.dependencies import SessionDep
from courier.core.settings import settings
from courier.models import AuthSession, Message, Participant

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return a sanitized snapshot of public runtime configuration.

    Excludes secrets and connection strings.
    """
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
            "jwt_algorithm": settings.jwt_algorithm,
            "access_token_expire_minutes": settings.access_token_expire_minutes,
        },
    }


@router.get("/stats")
async def get_stats(db: SessionDep) -> dict[str, int]:
    """Return aggregate counts without exposing any record contents."""

    def _count(stmt: Select[tuple[int]]) -> int:
        return int(db.execute(stmt).scalar() or 0)

    return {
        "participants": _count(select(func.count()).select_from(Participant)),
        "messages": _count(select(func.count()).select_from(Message)),
        "unread_messages": _count(
            select(func.count()).select_from(Message).where(Message.read.is_(False))
        ),
        "active_sessions": _count(
            select(func.count()).select_from(AuthSession).where(AuthSession.revoked_at.is_(None))
        ),
    }
