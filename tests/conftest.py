"""Test configuration and fixtures."""

import datetime
from uuid import uuid4

import pytest

from eventflow.config import Settings
from eventflow.domain.model import Event, Invite
from eventflow.domain.value import (
    EventId,
    IdentitySession,
    InviteId,
    InviteStatus,
    InviteToken,
    UserId,
)
from eventflow.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryEventRepository,
    InMemoryInviteRepository,
)


def make_event(name: str = "Launch Party", **overrides) -> Event:
    """Build an event for tests."""
    data = {
        "id": EventId(uuid4()),
        "name": name,
        "date": datetime.date(2025, 3, 1),
        "venue_name": "The Warehouse",
    }
    data.update(overrides)
    return Event(**data)


def make_invite(
    event: Event,
    token: str = "abc123",
    role: str = "ticketing",
    status: InviteStatus = InviteStatus.PENDING,
    **overrides,
) -> Invite:
    """Build an invite for tests."""
    data = {
        "id": InviteId(uuid4()),
        "event_id": event.id,
        "email": "guest@example.com",
        "role": role,
        "invite_token": InviteToken(root=token),
        "status": status,
    }
    data.update(overrides)
    return Invite(**data)


def make_session(email: str | None = "guest@example.com") -> IdentitySession:
    """Build a signed-in identity for tests."""
    return IdentitySession(user_id=UserId(uuid4()), email=email)


@pytest.fixture
def settings() -> Settings:
    """Settings with fixed URLs and a known JWT secret."""
    settings = Settings()
    settings.app.base_url = "https://eventflow.test"
    settings.auth.jwt_secret = "test-secret"
    return settings


@pytest.fixture
def database() -> InMemoryDatabase:
    """Fresh in-memory database."""
    return InMemoryDatabase()


@pytest.fixture
def event_repository(database: InMemoryDatabase) -> InMemoryEventRepository:
    return InMemoryEventRepository(database)


@pytest.fixture
def invite_repository(database: InMemoryDatabase) -> InMemoryInviteRepository:
    return InMemoryInviteRepository(database)
