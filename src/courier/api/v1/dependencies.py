"""Shared API dependencies for authentication and service wiring."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from courier.db.session import get_db
from courier.services.messaging import MessagingService
from courier.services.session_manager import SessionManager

# Bearer scheme for JWT authentication. Missing credentials are not rejected
# here so that the service reports NotAuthenticated/Forbidden itself.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str | None:
    """Return the raw bearer token, or None when no Authorization header was sent."""
    if credentials is None:
        return None
    return credentials.credentials


def get_session_manager(db: SessionDep) -> SessionManager:
    return SessionManager(db)


def get_messaging_service(db: SessionDep) -> MessagingService:
    return MessagingService(db)


TokenDep = Annotated[str | None, Depends(get_bearer_token)]
SessionManagerDep = Annotated[SessionManager, Depends(get_session_manager)]
MessagingServiceDep = Annotated[MessagingService, Depends(get_messaging_service)]


def get_current_identity(token: TokenDep, manager: SessionManagerDep) -> str | None:
    """Resolve the caller's participant id from their bearer token.

    Returns:
        The participant id for an active session, otherwise None.
    """
    return manager.current_identity(token)


# Type alias for current identity dependency
IdentityDep = Annotated[str | None, Depends(get_current_identity)]
