"""Data access helpers for working with participants."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from courier.models.participant import Participant
from courier.services.errors import DuplicateUsername, ParticipantNotFound

__all__ = ["ParticipantRepository"]

logger = logging.getLogger(__name__)


class ParticipantRepository:
    """Ordered map of participant id to participant record."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get(self, participant_id: str) -> Participant | None:
        """Return a participant by identifier."""
        stmt = select(Participant).where(Participant.id == participant_id)
        return self.session.execute(stmt).scalars().first()

    def exists(self, participant_id: str) -> bool:
        return self.get(participant_id) is not None

    def find_by_username(self, username: str) -> Participant | None:
        """Return the participant with exactly this (case-sensitive) username."""
        stmt = select(Participant).where(Participant.username == username)
        return self.session.execute(stmt).scalars().first()

    def insert(self, participant: Participant) -> Participant:
        """Persist a new participant.

        The pre-check covers the common case; a concurrent insert that slips
        past it is caught by the unique index on flush. Any other integrity
        failure propagates unchanged. Rolling back is left to the caller.

        Raises:
            DuplicateUsername: If another participant already uses the username.
        """
        if self.find_by_username(participant.username) is not None:
            raise DuplicateUsername(participant.username)

        self.session.add(participant)
        try:
            self.session.flush()
        except IntegrityError as err:
            if "username" not in str(err.orig):
                raise
            logger.warning("Unique constraint rejected username %r", participant.username)
            raise DuplicateUsername(participant.username) from err
        return participant

    def update(
        self,
        participant_id: str,
        mutator: Callable[[Participant], None],
    ) -> Participant:
        """Apply ``mutator`` to the stored participant and flush the change."""
        participant = self.get(participant_id)
        if participant is None:
            raise ParticipantNotFound(participant_id)
        mutator(participant)
        self.session.flush()
        return participant

    def list_all(self) -> Iterator[Participant]:
        """Yield every participant in insertion order.

        Each call issues a fresh query, so the enumeration can be restarted.
        """
        stmt = select(Participant).order_by(Participant.order_index)
        yield from self.session.execute(stmt).scalars()
