"""Data access helpers for working with messages."""
from __future__ import annotations

from collections.abc import Iterator

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from courier.models.message import Message
from courier.services.errors import MessageNotFound

__all__ = ["MessageRepository"]


class MessageRepository:
    """Ordered map of message id to message record."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get(self, message_id: str) -> Message | None:
        """Return a message by identifier."""
        stmt = select(Message).where(Message.id == message_id)
        return self.session.execute(stmt).scalars().first()

    def insert(self, message: Message) -> Message:
        """Insert a new message and return the persisted ORM instance."""
        self.session.add(message)
        self.session.flush()
        return message

    def update(self, message_id: str, message: Message) -> Message:
        """Write back a modified message stored under ``message_id``."""
        if message.id != message_id or self.get(message_id) is None:
            raise MessageNotFound(message_id)
        self.session.add(message)
        self.session.flush()
        return message

    def remove(self, message_id: str) -> Message:
        """Delete the message and return the removed record.

        Raises:
            MessageNotFound: If no message is stored under ``message_id``.
        """
        message = self.get(message_id)
        if message is None:
            raise MessageNotFound(message_id)
        self.session.delete(message)
        self.session.flush()
        return message

    def list_all(self) -> Iterator[Message]:
        """Yield every message in insertion order."""
        stmt = select(Message).order_by(Message.order_index)
        yield from self.session.execute(stmt).scalars()

    def find_unread_for(self, participant_id: str) -> list[Message]:
        """Return unread messages addressed to ``participant_id``."""
        stmt = (
            select(Message)
            .where(
                Message.recipient_id == participant_id,
                Message.read.is_(False),
            )
            .order_by(Message.order_index)
        )
        return list(self.session.execute(stmt).scalars())

    def count_unread_for(self, participant_id: str) -> int:
        stmt = select(func.count()).select_from(Message).where(
            Message.recipient_id == participant_id,
            Message.read.is_(False),
        )
        return int(self.session.execute(stmt).scalar() or 0)

    def find_containing(self, phrase: str) -> list[Message]:
        """Return messages whose body contains ``phrase``, ignoring case.

        Matching uses ``str.casefold`` rather than SQL ``lower()``, which
        only folds ASCII on SQLite. The phrase is a plain substring, so
        ``%`` and ``_`` carry no special meaning.
        """
        needle = phrase.casefold()
        return [message for message in self.list_all() if needle in message.body.casefold()]
