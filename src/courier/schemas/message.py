"""Message-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessagePayload(BaseModel):
    """Schema for creating or replacing a message."""

    title: str = Field(..., min_length=1, max_length=200, description="Message subject")
    body: str = Field(..., min_length=1, description="Plain-text message body")
    recipient_id: str = Field(..., min_length=1, description="Participant id of the recipient")


class MessageResponse(BaseModel):
    """Schema for message information returned by the API."""

    id: str
    title: str
    body: str
    sender_id: str
    recipient_id: str
    read: bool
    created_at: datetime
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
