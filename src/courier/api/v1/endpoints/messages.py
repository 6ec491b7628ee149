# src/courier/api/v1/endpoints/messages.py
"""Message endpoints for the Courier API."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from courier.api.v1.dependencies import IdentityDep, MessagingServiceDep, SessionDep
from courier.models import Message
from courier.schemas.common import ErrorResponse
from courier.schemas.message import MessagePayload, MessageResponse

router = APIRouter(prefix="/messages", tags=["messages"])

_AUTH_ERRORS = {status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_OWNER_ERRORS = {
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


@router.get("/", response_model=list[MessageResponse])
async def list_messages(service: MessagingServiceDep) -> list[Message]:
    """List every stored message in insertion order."""
    return service.list_all()


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={**_AUTH_ERRORS, **_NOT_FOUND},
)
async def send_message(
    payload: MessagePayload,
    identity: IdentityDep,
    db: SessionDep,
    service: MessagingServiceDep,
) -> Message:
    """Send a message to an existing participant."""
    message = service.send(
        identity,
        title=payload.title,
        body=payload.body,
        recipient_id=payload.recipient_id,
    )
    db.commit()
    return message


@router.get(
    "/unread",
    response_model=list[MessageResponse],
    responses={**_AUTH_ERRORS, **_NOT_FOUND},
)
async def get_my_unread(
    identity: IdentityDep,
    db: SessionDep,
    service: MessagingServiceDep,
) -> list[Message]:
    """Return the caller's unread messages and mark them read."""
    messages = service.my_unread(identity)
    db.commit()
    return messages


@router.get("/search", response_model=list[MessageResponse], responses=_NOT_FOUND)
async def search_messages(
    service: MessagingServiceDep,
    phrase: str = Query(..., min_length=1, description="Case-insensitive substring of the body"),
) -> list[Message]:
    """Find messages whose body contains the phrase."""
    return service.search(phrase)


@router.get("/{message_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def get_message(message_id: str, service: MessagingServiceDep) -> Message:
    """Fetch one message by id."""
    return service.get_by_id(message_id)


@router.put("/{message_id}", response_model=MessageResponse, responses=_OWNER_ERRORS)
async def update_message(
    message_id: str,
    payload: MessagePayload,
    identity: IdentityDep,
    db: SessionDep,
    service: MessagingServiceDep,
) -> Message:
    """Replace title, body and recipient of a message the caller sent."""
    message = service.edit_message(
        identity,
        message_id,
        title=payload.title,
        body=payload.body,
        recipient_id=payload.recipient_id,
    )
    db.commit()
    return message


@router.delete("/{message_id}", response_model=MessageResponse, responses=_OWNER_ERRORS)
async def delete_message(
    message_id: str,
    identity: IdentityDep,
    db: SessionDep,
    service: MessagingServiceDep,
) -> MessageResponse:
    """Delete a message the caller sent and return it."""
    removed = service.delete_message(identity, message_id)
    # Serialize before commit expires the deleted instance.
    response = MessageResponse.model_validate(removed)
    db.commit()
    return response
