"""Login sessions: credential checks, token issue and identity resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta

from jose import JWTError, jwt
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from courier.core.security import verify_password
from courier.core.settings import settings
from courier.db.time import utcnow
from courier.models import AuthSession, Participant
from courier.repositories.message_repo import MessageRepository
from courier.repositories.participant_repo import ParticipantRepository
from courier.services.errors import InvalidPassword, InvalidUsername, NoActiveSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""

    access_token: str
    participant: Participant
    unread_count: int

    @property
    def summary(self) -> str:
        if self.unread_count == 0:
            return "You have no new messages"
        return f"You have {self.unread_count} new messages"


def create_access_token(participant_id: str, session_id: str) -> str:
    """Create a JWT bound to one server-side session."""
    issued_at = utcnow()
    claims: dict[str, object] = {
        "sub": participant_id,
        "jti": session_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.access_token_expire_minutes),
    }
    encoded_jwt: str = jwt.encode(
        claims,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


class SessionManager:
    """Drives the LoggedOut/LoggedIn transitions for bearer tokens.

    Each token names one ``AuthSession`` row; the caller identity is resolved
    from the token on every request instead of being held in process state.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.participants = ParticipantRepository(db)
        self.messages = MessageRepository(db)

    async def login(self, username: str, password: str) -> LoginResult:
        """Authenticate and open a new session.

        Raises:
            InvalidUsername: No participant has this username.
            InvalidPassword: The password does not match the stored hash.
        """
        participant = self.participants.find_by_username(username)
        if participant is None:
            logger.info("Login rejected: unknown username")
            raise InvalidUsername()

        matches = await run_in_threadpool(verify_password, password, participant.password_hash)
        if not matches:
            logger.warning("Login rejected: bad password for participant %s", participant.id)
            raise InvalidPassword()

        now = utcnow()

        def _stamp(record: Participant) -> None:
            record.last_login = now

        self.participants.update(participant.id, _stamp)

        auth_session = AuthSession(participant_id=participant.id, created_at=now)
        self.db.add(auth_session)
        self.db.flush()

        unread = self.messages.count_unread_for(participant.id)
        logger.info("Participant %s logged in (session %s)", participant.id, auth_session.id)
        return LoginResult(
            access_token=create_access_token(participant.id, auth_session.id),
            participant=participant,
            unread_count=unread,
        )

    def _resolve_session(self, token: str | None) -> AuthSession | None:
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                settings.secret_key,
                algorithms=[settings.jwt_algorithm],
            )
        except JWTError:
            return None

        session_id = payload.get("jti")
        subject = payload.get("sub")
        if not session_id or not subject:
            return None

        auth_session = self.db.get(AuthSession, session_id)
        if auth_session is None or not auth_session.active:
            return None
        if auth_session.participant_id != subject:
            return None
        return auth_session

    def current_identity(self, token: str | None) -> str | None:
        """Return the participant id the token is logged in as, if any."""
        auth_session = self._resolve_session(token)
        if auth_session is None:
            return None
        if not self.participants.exists(auth_session.participant_id):
            return None
        return auth_session.participant_id

    def logout(self, token: str | None) -> None:
        """Close the session named by ``token``.

        Raises:
            NoActiveSession: The token is missing, invalid or already logged out.
        """
        auth_session = self._resolve_session(token)
        if auth_session is None:
            raise NoActiveSession()
        auth_session.revoked_at = utcnow()
        self.db.flush()
        logger.info(
            "Participant %s logged out (session %s)",
            auth_session.participant_id,
            auth_session.id,
        )
