"""Domain errors raised by the Courier services.

Every error is a recoverable, caller-visible outcome. The HTTP layer maps
them to responses using ``status_code`` and ``detail``.
"""

from __future__ import annotations

from fastapi import status


class CourierError(Exception):
    """Base class for all domain failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    detail: str = "Request failed"

    def __init__(self, detail: str | None = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)

    @property
    def code(self) -> str:
        """Return the machine-readable error kind."""
        return type(self).__name__


class NotAuthenticated(CourierError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "No logged-in user"


class Forbidden(CourierError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "You don't have permission to modify this message"


class NotFound(CourierError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Not found"


class MessageNotFound(NotFound):
    def __init__(self, message_id: str, detail: str | None = None) -> None:
        self.message_id = message_id
        super().__init__(detail or f"A message with id={message_id} not found")


class ParticipantNotFound(NotFound):
    def __init__(self, participant_id: str) -> None:
        self.participant_id = participant_id
        super().__init__(f"A participant with id={participant_id} not found")


class RecipientNotFound(NotFound):
    def __init__(self, recipient_id: str) -> None:
        self.recipient_id = recipient_id
        super().__init__(f"No participant exists with ID {recipient_id}")


class InvalidUsername(CourierError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid username"


class InvalidPassword(CourierError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid password"


class UsernameTaken(CourierError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username {username} already taken")


class DuplicateUsername(UsernameTaken):
    """Raised by the participant store when an insert would repeat a username."""


class NoActiveSession(CourierError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "No logged-in user to logout"


class NoUnread(CourierError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "You have no new messages."


class NoMatches(CourierError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, phrase: str) -> None:
        self.phrase = phrase
        super().__init__(f"No messages found containing: {phrase}")
