# src/courier/api/v1/endpoints/participants.py
"""Participant directory endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from courier.api.v1.dependencies import MessagingServiceDep
from courier.models import Participant
from courier.schemas.participant import ParticipantResponse

router = APIRouter(prefix="/participants", tags=["participants"])


@router.get("/", response_model=list[ParticipantResponse])
async def list_participants(service: MessagingServiceDep) -> list[Participant]:
    """List registered participants without their password hashes."""
    return service.list_participants()
