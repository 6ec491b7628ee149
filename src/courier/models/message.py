# src/courier/models/message.py
"""Models describing messages exchanged between participants."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from courier.db.ids import new_id
from courier.db.session import Base
from courier.db.time import UTCDateTime, utcnow


class Message(Base):
    """Plain-text message addressed from one participant to another.

    ``sender_id`` is fixed at creation; only the sender may edit or delete
    the message. ``read`` flips to True the first time the recipient fetches
    their unread messages and is never reset.
    """

    __tablename__ = "message"
    __table_args__ = {"sqlite_autoincrement": True}

    # Database-assigned; never reused, so it orders messages by insertion.
    order_index: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True, default=new_id)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)

    sender_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("participant.id"), nullable=False, index=True
    )
    recipient_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("participant.id"), nullable=False, index=True
    )

    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    def __repr__(self) -> str:
        return f"Message(id={self.id!r}, sender_id={self.sender_id!r}, read={self.read!r})"
