# src/courier/models/participant.py
"""SQLAlchemy model for registered participants."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from courier.db.ids import new_id
from courier.db.session import Base
from courier.db.time import UTCDateTime, utcnow


class Participant(Base):
    """A registered account able to send and receive messages.

    ``order_index`` is assigned by the database and gives insertion order;
    ``id`` is the public lookup key.
    """

    __tablename__ = "participant"
    __table_args__ = {"sqlite_autoincrement": True}

    order_index: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True, default=new_id)

    # Usernames are case-sensitive.
    username: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)

    last_login: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    def __repr__(self) -> str:
        return f"Participant(id={self.id!r}, username={self.username!r})"
