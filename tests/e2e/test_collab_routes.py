"""End-to-end tests for the collaboration invite routes."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from eventflow.adapter.gmail import GmailClient, SendFailedError
from eventflow.config import Settings
from eventflow.domain.value import InviteStatus, InviteToken
from eventflow.interface.api.app import create_app
from eventflow.persistence.repository.inmemory import InMemoryDatabase
from eventflow.util.jwt import create_token
from tests.conftest import make_event, make_invite
from tests.di import build_test_container

PENDING_COOKIE = "collab_pending_invite"


class Env:
    """Running app with direct access to its in-memory store."""

    def __init__(self, client: TestClient, container) -> None:
        self.client = client
        self.settings = Settings()
        self.database: InMemoryDatabase = client.portal.call(
            container.get, InMemoryDatabase
        )
        self.gmail = client.portal.call(container.get, GmailClient)

    def seed(self, **invite_kwargs):
        event = make_event()
        self.database.events[event.id] = event
        invite = make_invite(event, **invite_kwargs)
        self.database.invites.append(invite)
        return event, invite

    def stored(self, token: str):
        return next(
            i for i in self.database.invites if i.invite_token == InviteToken(root=token)
        )

    def sign_in(self, email: str = "guest@example.com") -> str:
        user_id = str(uuid4())
        self.client.cookies.set(
            self.settings.auth.session_cookie,
            create_token(user_id, email, self.settings.auth),
        )
        return user_id

    def frontend(self, path: str) -> str:
        return f"{self.settings.app.base_url.rstrip('/')}{path}"


@pytest.fixture
def env():
    """App on a fully mocked container."""
    container = build_test_container()
    with TestClient(create_app(container)) as client:
        yield Env(client, container)


class TestOpenInvite:
    """GET /collab/accept/{token}"""

    def test_preview_sets_pending_cookie(self, env):
        # Arrange
        env.seed()

        # Act
        response = env.client.get("/collab/accept/abc123")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["step"] == "preview"
        assert data["event_name"] == "Launch Party"
        assert data["event_date"] == "Saturday, 1 March 2025"
        assert data["role_label"] == "Ticketing"
        assert env.client.cookies.get(PENDING_COOKIE) == "abc123"
        assert env.stored("abc123").status == InviteStatus.PENDING

    def test_signed_in_accepts_immediately(self, env):
        # Arrange
        event, _ = env.seed()
        user_id = env.sign_in()

        # Act
        response = env.client.get("/collab/accept/abc123")

        # Assert
        data = response.json()
        assert data["step"] == "accepted_redirect"
        assert data["redirect_to"] == env.settings.app.dashboard_route(event.id)
        assert not data["redirect_to"].startswith(env.settings.app.base_url)
        assert data["redirect_delay"] == env.settings.collab.redirect_delay
        stored = env.stored("abc123")
        assert stored.status == InviteStatus.ACCEPTED
        assert str(stored.user_id) == user_id

    def test_signed_in_accept_clears_marker_from_preview(self, env):
        # Arrange
        env.seed()
        env.client.get("/collab/accept/abc123")
        assert env.client.cookies.get(PENDING_COOKIE) == "abc123"
        env.sign_in()

        # Act
        response = env.client.get("/collab/accept/abc123")

        # Assert
        assert response.json()["step"] == "accepted_redirect"
        assert env.client.cookies.get(PENDING_COOKIE) is None

        later = env.client.get("/collab/session", follow_redirects=False)
        assert later.headers["location"] == env.frontend(
            env.settings.app.listing_path
        )
        assert env.database.status_writes == 1

    def test_accepted_invite_is_done(self, env):
        env.seed(status=InviteStatus.ACCEPTED)

        response = env.client.get("/collab/accept/abc123")

        assert response.json()["step"] == "done"
        assert PENDING_COOKIE not in env.client.cookies

    def test_unknown_token_is_invalid(self, env):
        response = env.client.get("/collab/accept/does-not-exist")

        assert response.status_code == 200
        assert response.json()["step"] == "invalid"


class TestAcceptAfterSignIn:
    """Accept from the preview, sign in, then complete."""

    def test_full_flow(self, env):
        # Arrange
        event, _ = env.seed()
        env.client.get("/collab/accept/abc123")

        # Act - accept sends the invitee to sign in
        response = env.client.post(
            "/collab/accept/abc123/accept", follow_redirects=False
        )

        # Assert
        assert response.status_code == 303
        assert response.headers["location"] == env.frontend(
            env.settings.app.sign_in_path
        )
        assert env.client.cookies.get(PENDING_COOKIE) == "abc123"

        # Act - identity provider returns with a session
        user_id = env.sign_in()
        response = env.client.get("/collab/session", follow_redirects=False)

        # Assert
        assert response.status_code == 303
        assert response.headers["location"] == env.frontend(
            env.settings.app.dashboard_route(event.id)
        )
        assert PENDING_COOKIE not in env.client.cookies
        stored = env.stored("abc123")
        assert stored.status == InviteStatus.ACCEPTED
        assert str(stored.user_id) == user_id
        assert env.database.status_writes == 1

        # A repeated callback has nothing left to complete
        response = env.client.get("/collab/session", follow_redirects=False)
        assert response.headers["location"] == env.frontend(
            env.settings.app.listing_path
        )
        assert env.database.status_writes == 1

    def test_session_callback_without_session_keeps_marker(self, env):
        env.seed()
        env.client.get("/collab/accept/abc123")

        response = env.client.get("/collab/session", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == env.frontend(
            env.settings.app.sign_in_path
        )
        assert env.client.cookies.get(PENDING_COOKIE) == "abc123"

    def test_declined_before_completion_goes_to_listing(self, env):
        env.seed()
        env.client.get("/collab/accept/abc123")
        env.client.post("/collab/accept/abc123/decline")
        env.client.cookies.set(PENDING_COOKIE, "abc123")

        env.sign_in()
        response = env.client.get("/collab/session", follow_redirects=False)

        assert response.headers["location"] == env.frontend(
            env.settings.app.listing_path
        )
        assert env.stored("abc123").status == InviteStatus.DECLINED


class TestDeclineInvite:
    """POST /collab/accept/{token}/decline"""

    def test_decline_clears_marker(self, env):
        # Arrange
        env.seed()
        env.client.get("/collab/accept/abc123")

        # Act
        response = env.client.post("/collab/accept/abc123/decline")

        # Assert
        assert response.status_code == 200
        assert response.json()["step"] == "declined"
        assert PENDING_COOKIE not in env.client.cookies
        assert env.stored("abc123").status == InviteStatus.DECLINED

    def test_decline_accepted_invite_is_done(self, env):
        env.seed(status=InviteStatus.ACCEPTED)

        response = env.client.post("/collab/accept/abc123/decline")

        assert response.json()["step"] == "done"
        assert env.stored("abc123").status == InviteStatus.ACCEPTED


class TestInviteManagement:
    """Creating, listing and sending invites."""

    def test_create_requires_session(self, env):
        event, _ = env.seed()

        response = env.client.post(
            "/collab/invites",
            json={"event_id": str(event.id), "email": "a@b.com", "role": "admin"},
        )

        assert response.status_code == 401

    def test_create_invite_and_email(self, env):
        # Arrange
        event, _ = env.seed()
        env.sign_in("owner@example.com")

        # Act
        response = env.client.post(
            "/collab/invites",
            json={"event_id": str(event.id), "email": "new@b.com", "role": "admin"},
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["email_sent"] is True
        assert env.gmail.sent[-1]["to"] == "new@b.com"
        assert data["invite_url"] in env.gmail.sent[-1]["html"]

    @pytest.mark.parametrize(
        "payload,status_code",
        [
            ({"email": "a@b.com", "role": "owner"}, 400),
            ({"email": "guest@example.com", "role": "admin"}, 409),
        ],
    )
    def test_create_invite_errors(self, env, payload, status_code):
        event, _ = env.seed()
        env.sign_in()

        response = env.client.post(
            "/collab/invites", json={"event_id": str(event.id), **payload}
        )

        assert response.status_code == status_code

    def test_create_invite_unknown_event(self, env):
        env.sign_in()

        response = env.client.post(
            "/collab/invites",
            json={"event_id": str(uuid4()), "email": "a@b.com", "role": "admin"},
        )

        assert response.status_code == 404

    def test_list_pending_invites(self, env):
        env.seed()
        env.sign_in("Guest@Example.com")

        response = env.client.get("/collab/invites/pending")

        assert response.status_code == 200
        invites = response.json()["invites"]
        assert [i["event_name"] for i in invites] == ["Launch Party"]

    def test_list_pending_requires_session(self, env):
        response = env.client.get("/collab/invites/pending")

        assert response.status_code == 401

    def test_send_invite(self, env):
        _, invite = env.seed()
        env.sign_in()

        response = env.client.post(f"/collab/invites/{invite.id}/send")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert env.gmail.sent[-1]["to"] == "guest@example.com"

    def test_send_requires_session(self, env):
        _, invite = env.seed()

        response = env.client.post(f"/collab/invites/{invite.id}/send")

        assert response.status_code == 401
        assert env.gmail.sent == []

    def test_send_unknown_invite(self, env):
        env.sign_in()
        response = env.client.post(f"/collab/invites/{uuid4()}/send")

        assert response.status_code == 404

    def test_send_relay_failure(self, env):
        _, invite = env.seed()
        env.sign_in()
        env.gmail.fail_with = SendFailedError("Gmail send failed: 500")

        response = env.client.post(f"/collab/invites/{invite.id}/send")

        assert response.status_code == 502


class TestHealth:
    def test_health(self, env):
        response = env.client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
