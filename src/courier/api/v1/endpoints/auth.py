# src/courier/api/v1/endpoints/auth.py
"""Authentication endpoints for the Courier API."""

from __future__ import annotations

from fastapi import APIRouter, status

from courier.api.v1.dependencies import (
    MessagingServiceDep,
    SessionDep,
    SessionManagerDep,
    TokenDep,
)
from courier.models import Participant
from courier.schemas.common import ErrorResponse
from courier.schemas.participant import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    ParticipantResponse,
    RegisterRequest,
)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    summary="Register a new participant",
    status_code=status.HTTP_201_CREATED,
    response_model=ParticipantResponse,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
async def register_participant(
    payload: RegisterRequest,
    db: SessionDep,
    service: MessagingServiceDep,
) -> Participant:
    """Register a username/password pair."""
    participant = await service.register(payload.username, payload.password)
    db.commit()
    return participant


@router.post(
    "/login",
    summary="Log in with username and password",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}},
)
async def login_participant(
    payload: LoginRequest,
    db: SessionDep,
    manager: SessionManagerDep,
) -> LoginResponse:
    """Open a session and report how many unread messages are waiting."""
    result = await manager.login(payload.username, payload.password)
    db.commit()
    return LoginResponse(
        access_token=result.access_token,
        token_type="bearer",
        unread_count=result.unread_count,
        summary=result.summary,
    )


@router.post(
    "/logout",
    summary="Close the current session",
    response_model=LogoutResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}},
)
async def logout_participant(
    token: TokenDep,
    db: SessionDep,
    manager: SessionManagerDep,
) -> LogoutResponse:
    """Revoke the session behind the presented bearer token."""
    manager.logout(token)
    db.commit()
    return LogoutResponse(status="logged_out", detail="User successfully logged out")
