# src/courier/models/auth_session.py
"""Server-side record of issued login sessions."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from courier.db.ids import new_id
from courier.db.session import Base
from courier.db.time import UTCDateTime, utcnow


class AuthSession(Base):
    """A login session bound to one bearer token through its ``jti`` claim.

    The session is active while ``revoked_at`` is NULL.
    """

    __tablename__ = "auth_session"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    participant_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("participant.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    revoked_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    @property
    def active(self) -> bool:
        """Return True while the session has not been logged out."""
        return self.revoked_at is None
