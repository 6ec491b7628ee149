"""Messaging operations and their access-control rules."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from courier.core.security import hash_password
from courier.db.ids import new_id
from courier.db.time import utcnow
from courier.models import Message, Participant
from courier.repositories.message_repo import MessageRepository
from courier.repositories.participant_repo import ParticipantRepository
from courier.services.errors import (
    Forbidden,
    MessageNotFound,
    NoMatches,
    NotAuthenticated,
    NoUnread,
    RecipientNotFound,
    UsernameTaken,
)

logger = logging.getLogger(__name__)


class MessagingService:
    """Service implementing registration and message operations.

    Callers pass the resolved identity (a participant id, or ``None`` for an
    anonymous caller) into each operation that needs one. Reads of the
    message list and search are deliberately open to anonymous callers;
    mutations are restricted to the sender.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.participants = ParticipantRepository(db)
        self.messages = MessageRepository(db)

    async def register(self, username: str, password: str) -> Participant:
        """Create a participant with a freshly hashed password.

        Raises:
            UsernameTaken: If the username is already registered.
        """
        if self.participants.find_by_username(username) is not None:
            raise UsernameTaken(username)

        password_hash = await run_in_threadpool(hash_password, password)
        participant = Participant(
            id=new_id(),
            username=username,
            password_hash=password_hash,
            last_login=None,
            created_at=utcnow(),
            updated_at=None,
        )
        self.participants.insert(participant)
        logger.info("Registered participant %s", participant.id)
        return participant

    def send(
        self,
        identity: str | None,
        *,
        title: str,
        body: str,
        recipient_id: str,
    ) -> Message:
        """Create a message from ``identity`` to ``recipient_id``."""
        if identity is None:
            raise NotAuthenticated()
        if not self.participants.exists(recipient_id):
            raise RecipientNotFound(recipient_id)

        message = Message(
            id=new_id(),
            title=title,
            body=body,
            sender_id=identity,
            recipient_id=recipient_id,
            read=False,
            created_at=utcnow(),
            updated_at=None,
        )
        self.messages.insert(message)
        logger.info("Message %s sent by %s to %s", message.id, identity, recipient_id)
        return message

    def _owned_message(self, identity: str | None, message_id: str, action: str) -> Message:
        message = self.messages.get(message_id)
        if message is None:
            if action == "update":
                raise MessageNotFound(
                    message_id,
                    f"Couldn't update a message with id={message_id}. Message not found",
                )
            raise MessageNotFound(
                message_id,
                f"Couldn't delete a message with id={message_id}. Message not found.",
            )
        if identity is None or message.sender_id != identity:
            logger.warning("Refused %s of message %s by %s", action, message_id, identity)
            raise Forbidden(f"You don't have permission to {action} this message")
        return message

    def edit_message(
        self,
        identity: str | None,
        message_id: str,
        *,
        title: str,
        body: str,
        recipient_id: str,
    ) -> Message:
        """Overwrite the mutable fields of a message owned by ``identity``.

        ``read`` is left untouched.
        """
        message = self._owned_message(identity, message_id, "update")
        if not self.participants.exists(recipient_id):
            raise RecipientNotFound(recipient_id)

        message.title = title
        message.body = body
        message.recipient_id = recipient_id
        message.updated_at = utcnow()
        self.messages.update(message_id, message)
        logger.info("Message %s updated by %s", message_id, identity)
        return message

    def delete_message(self, identity: str | None, message_id: str) -> Message:
        """Remove a message owned by ``identity`` and return the prior record."""
        self._owned_message(identity, message_id, "delete")
        removed = self.messages.remove(message_id)
        logger.info("Message %s deleted by %s", message_id, identity)
        return removed

    def list_all(self) -> list[Message]:
        return list(self.messages.list_all())

    def my_unread(self, identity: str | None) -> list[Message]:
        """Return unread messages addressed to ``identity`` and mark them read.

        A message returned here is never returned by a later call.
        """
        if identity is None:
            raise NotAuthenticated()

        unread = self.messages.find_unread_for(identity)
        if not unread:
            raise NoUnread()

        for message in unread:
            if not message.read:
                message.read = True
        self.db.flush()
        logger.info("Delivered %d unread messages to %s", len(unread), identity)
        return unread

    def search(self, phrase: str) -> list[Message]:
        """Return messages whose body contains ``phrase``, case-insensitively."""
        matches = self.messages.find_containing(phrase)
        if not matches:
            raise NoMatches(phrase)
        return matches

    def get_by_id(self, message_id: str) -> Message:
        message = self.messages.get(message_id)
        if message is None:
            raise MessageNotFound(message_id)
        return message

    def list_participants(self) -> list[Participant]:
        """Return raw participant records, password hashes included.

        The HTTP layer serializes these through a schema that omits the hash.
        """
        return list(self.participants.list_all())
