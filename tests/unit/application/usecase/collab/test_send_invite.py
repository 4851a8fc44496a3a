"""Unit tests for the send invite use case and email content."""

from uuid import uuid4

import pytest

from eventflow.adapter.gmail import GmailClient, SendFailedError
from eventflow.application.usecase.collab import (
    SendInviteRequest,
    SendInviteUseCase,
    render_invite_email,
)
from eventflow.config import Settings
from eventflow.domain.error import InviteNotFoundError
from eventflow.domain.repository import EventRepository, InviteRepository
from eventflow.domain.service import InviteService
from tests.conftest import make_event, make_invite
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _seed(unit_env, **invite_kwargs):
    event = await (await unit_env.get(EventRepository)).save(make_event())
    invite = make_invite(event, **invite_kwargs)
    await (await unit_env.get(InviteRepository)).save(invite)
    return event, invite


class TestRenderInviteEmail:
    """Tests for render_invite_email."""

    def test_known_role(self):
        # Arrange
        event = make_event()
        invite = make_invite(event, role="check_in").model_copy(
            update={"event": event.summary()}
        )

        # Act
        email = render_invite_email(invite, "https://eventflow.test/collab/accept/abc123")

        # Assert
        assert email.subject == "Collaboration invite — Launch Party"
        assert "You've been invited to collaborate" in email.html
        assert "Launch Party · Saturday, 1 March 2025" in email.html
        assert "Check in" in email.html
        assert "Check-in — scan tickets and manage guest check-in" in email.html
        assert email.html.count("https://eventflow.test/collab/accept/abc123") == 3

    def test_unknown_role_has_empty_summary(self):
        event = make_event()
        invite = make_invite(event, role="door_staff").model_copy(
            update={"event": event.summary()}
        )

        email = render_invite_email(invite, "https://eventflow.test/collab/accept/x")

        assert "Door staff" in email.html
        assert " — " not in email.html

    def test_escapes_event_name(self):
        event = make_event(name="<Rock & Roll>")
        invite = make_invite(event).model_copy(update={"event": event.summary()})

        email = render_invite_email(invite, "https://eventflow.test/collab/accept/x")

        assert "&lt;Rock &amp; Roll&gt;" in email.html
        assert "<Rock" not in email.html
        assert email.subject == "Collaboration invite — <Rock & Roll>"


class TestSendInvite:
    """Tests for SendInviteUseCase."""

    @pytest.mark.asyncio
    async def test_send_invite_success(self, unit_env):
        """Sending mails the invitee an email pointing at the accept-URL."""
        # Arrange
        _, invite = await _seed(unit_env, role="check_in")
        use_case = await unit_env.get(SendInviteUseCase)
        gmail = await unit_env.get(GmailClient)
        settings = await unit_env.get(Settings)

        # Act
        result = await use_case.execute(SendInviteRequest(invite_id=str(invite.id)))

        # Assert
        assert result.ok is True
        assert len(gmail.sent) == 1
        message = gmail.sent[0]
        assert message["to"] == "guest@example.com"
        assert message["subject"] == "Collaboration invite — Launch Party"
        assert "Check-in — scan tickets and manage guest check-in" in message["html"]
        assert settings.app.accept_url("abc123") in message["html"]
        assert settings.app.accept_url("abc123").endswith("/collab/accept/abc123")

    @pytest.mark.asyncio
    async def test_send_does_not_change_invite(self, unit_env):
        _, invite = await _seed(unit_env)
        use_case = await unit_env.get(SendInviteUseCase)
        invite_service = await unit_env.get(InviteService)

        await use_case.execute(SendInviteRequest(invite_id=str(invite.id)))

        stored = await invite_service.get_invite_by_id(invite.id)
        assert stored.status == invite.status
        assert stored.invite_token == invite.invite_token

    @pytest.mark.asyncio
    async def test_unknown_invite_raises(self, unit_env):
        use_case = await unit_env.get(SendInviteUseCase)
        gmail = await unit_env.get(GmailClient)

        with pytest.raises(InviteNotFoundError):
            await use_case.execute(SendInviteRequest(invite_id=str(uuid4())))
        with pytest.raises(InviteNotFoundError):
            await use_case.execute(SendInviteRequest(invite_id="not-a-uuid"))

        assert gmail.sent == []

    @pytest.mark.asyncio
    async def test_relay_failure_propagates(self, unit_env):
        """Mail relay failures are surfaced to the caller unretried."""
        # Arrange
        _, invite = await _seed(unit_env)
        use_case = await unit_env.get(SendInviteUseCase)
        gmail = await unit_env.get(GmailClient)
        gmail.fail_with = SendFailedError("Gmail send failed: 500")

        # Act & Assert
        with pytest.raises(SendFailedError):
            await use_case.execute(SendInviteRequest(invite_id=str(invite.id)))
