# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest

os.environ.setdefault("PYTEST_RUNNING", "true")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from courier.core.security import hash_password
from courier.db.ids import new_id
from courier.db.session import Base
from courier.db.session import get_db as app_get_session
from courier.db.time import utcnow
from courier.main import app as fastapi_app
from courier.models import Message, Participant
from courier.repositories.message_repo import MessageRepository
from courier.repositories.participant_repo import ParticipantRepository
from courier.services.messaging import MessagingService
from courier.services.session_manager import SessionManager

TEST_DB_URL = "sqlite://"

ALICE_PASSWORD = "pw1"
BOB_PASSWORD = "pw2"
CAROL_PASSWORD = "pw3"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()

    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def messaging_service(db_session: Session) -> MessagingService:
    return MessagingService(db_session)


@pytest.fixture()
def session_manager(db_session: Session) -> SessionManager:
    return SessionManager(db_session)


@pytest.fixture()
def participant_repo(db_session: Session) -> ParticipantRepository:
    return ParticipantRepository(db_session)


@pytest.fixture()
def message_repo(db_session: Session) -> MessageRepository:
    return MessageRepository(db_session)


def make_participant(repo: ParticipantRepository, username: str, password: str) -> Participant:
    """Persist a participant without going through the async service."""
    participant = Participant(
        id=new_id(),
        username=username,
        password_hash=hash_password(password, rounds=4),
        created_at=utcnow(),
    )
    return repo.insert(participant)


def make_message(
    repo: MessageRepository,
    sender: Participant,
    recipient: Participant,
    *,
    title: str = "hi",
    body: str = "hello",
    read: bool = False,
) -> Message:
    """Persist a message directly through the store."""
    message = Message(
        id=new_id(),
        title=title,
        body=body,
        sender_id=sender.id,
        recipient_id=recipient.id,
        read=read,
        created_at=utcnow(),
    )
    return repo.insert(message)


@pytest.fixture()
def alice(participant_repo: ParticipantRepository) -> Participant:
    return make_participant(participant_repo, "alice", ALICE_PASSWORD)


@pytest.fixture()
def bob(participant_repo: ParticipantRepository) -> Participant:
    return make_participant(participant_repo, "bob", BOB_PASSWORD)


@pytest.fixture()
def carol(participant_repo: ParticipantRepository) -> Participant:
    return make_participant(participant_repo, "carol", CAROL_PASSWORD)


def login_headers(client: TestClient, username: str, password: str) -> dict[str, str]:
    """Log in over HTTP and return an Authorization header."""
    response = client.post(
        "/api/v1/auth/login",
        json={"username": username, "password": password},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def alice_headers(client: TestClient, alice: Participant) -> dict[str, str]:
    """Return authorization headers for alice."""
    return login_headers(client, "alice", ALICE_PASSWORD)


@pytest.fixture()
def bob_headers(client: TestClient, bob: Participant) -> dict[str, str]:
    """Return authorization headers for bob."""
    return login_headers(client, "bob", BOB_PASSWORD)
