"""Unit tests for InviteService."""

from uuid import uuid4

import pytest

from eventflow.domain.error import (
    DuplicateInviteError,
    InvalidTransitionError,
    InviteNotFoundError,
)
from eventflow.domain.repository import EventRepository, InviteRepository
from eventflow.domain.service import InviteService
from eventflow.domain.value import (
    CollaboratorRole,
    InviteId,
    InviteStatus,
    InviteToken,
    UserId,
)
from tests.conftest import make_event, make_invite
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _seed(unit_env, **invite_kwargs):
    event = await (await unit_env.get(EventRepository)).save(make_event())
    invite = make_invite(event, **invite_kwargs)
    await (await unit_env.get(InviteRepository)).save(invite)
    return event, invite


class TestCreateInvite:
    """Tests for create_invite method."""

    @pytest.mark.asyncio
    async def test_create_invite_success(self, unit_env):
        """Creating an invite should save it as pending with a normalised email."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        event = await (await unit_env.get(EventRepository)).save(make_event())

        # Act
        result = await invite_service.create_invite(
            event.id,
            "  Friend@Example.com ",
            CollaboratorRole.CHECK_IN,
            InviteToken(root="tok-1"),
        )

        # Assert
        assert result.email == "friend@example.com"
        assert result.role == "check_in"
        assert result.status == InviteStatus.PENDING
        assert result.accepted_at is None
        assert result.user_id is None

        saved = await invite_service.get_invite_by_id(result.id)
        assert saved.event is not None
        assert saved.event.name == "Launch Party"

    @pytest.mark.asyncio
    async def test_create_invite_duplicate_raises_error(self, unit_env):
        """A second pending invite for the same email and event is refused."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        event = await (await unit_env.get(EventRepository)).save(make_event())
        await invite_service.create_invite(
            event.id, "friend@example.com", CollaboratorRole.ADMIN, InviteToken(root="a")
        )

        # Act & Assert
        with pytest.raises(DuplicateInviteError):
            await invite_service.create_invite(
                event.id,
                "FRIEND@example.com",
                CollaboratorRole.VIEW_ONLY,
                InviteToken(root="b"),
            )


class TestGetInvite:
    """Tests for invite lookups."""

    @pytest.mark.asyncio
    async def test_get_by_token_joins_event(self, unit_env):
        """Token lookup should carry the event's name, date and venue."""
        # Arrange
        event, invite = await _seed(unit_env)
        invite_service = await unit_env.get(InviteService)

        # Act
        result = await invite_service.get_invite_by_token(invite.invite_token)

        # Assert
        assert result is not None
        assert result.event.name == event.name
        assert result.event.date == event.date
        assert result.event.venue_name == event.venue_name

    @pytest.mark.asyncio
    async def test_get_by_token_missing_returns_none(self, unit_env):
        """Unknown tokens resolve to None."""
        invite_service = await unit_env.get(InviteService)

        assert await invite_service.get_invite_by_token(InviteToken(root="nope")) is None

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self, unit_env):
        """Unknown IDs raise InviteNotFoundError."""
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(InviteNotFoundError):
            await invite_service.get_invite_by_id(InviteId(uuid4()))


class TestAcceptInvite:
    """Tests for accept_invite method."""

    @pytest.mark.asyncio
    async def test_accept_sets_identity_and_time(self, unit_env):
        """Accepting a pending invite records who accepted and when."""
        # Arrange
        _, invite = await _seed(unit_env)
        invite_service = await unit_env.get(InviteService)
        user_id = UserId(uuid4())

        # Act
        result = await invite_service.accept_invite(invite.invite_token, user_id)

        # Assert
        assert result.status == InviteStatus.ACCEPTED
        assert result.user_id == user_id
        assert result.accepted_at is not None

    @pytest.mark.asyncio
    async def test_accept_twice_keeps_first_acceptance(self, unit_env):
        """Re-accepting never changes accepted_at or user_id."""
        # Arrange
        _, invite = await _seed(unit_env)
        invite_service = await unit_env.get(InviteService)
        first = await invite_service.accept_invite(invite.invite_token, UserId(uuid4()))

        # Act
        second = await invite_service.accept_invite(invite.invite_token, UserId(uuid4()))

        # Assert
        assert second.user_id == first.user_id
        assert second.accepted_at == first.accepted_at

    @pytest.mark.asyncio
    async def test_accept_declined_invite_is_refused(self, unit_env):
        """A declined invite cannot be accepted afterwards."""
        # Arrange
        _, invite = await _seed(unit_env, status=InviteStatus.DECLINED)
        invite_service = await unit_env.get(InviteService)

        # Act & Assert
        with pytest.raises(InvalidTransitionError):
            await invite_service.accept_invite(invite.invite_token, UserId(uuid4()))

        stored = await invite_service.get_invite_by_token(invite.invite_token)
        assert stored.status == InviteStatus.DECLINED
        assert stored.user_id is None

    @pytest.mark.asyncio
    async def test_accept_unknown_token_raises(self, unit_env):
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(InviteNotFoundError):
            await invite_service.accept_invite(InviteToken(root="nope"), UserId(uuid4()))


class TestDeclineInvite:
    """Tests for decline_invite method."""

    @pytest.mark.asyncio
    async def test_decline_pending_invite(self, unit_env):
        """Declining needs no identity and leaves acceptance fields empty."""
        # Arrange
        _, invite = await _seed(unit_env)
        invite_service = await unit_env.get(InviteService)

        # Act
        result = await invite_service.decline_invite(invite.invite_token)

        # Assert
        assert result.status == InviteStatus.DECLINED
        assert result.user_id is None
        assert result.accepted_at is None

    @pytest.mark.asyncio
    async def test_decline_twice_is_harmless(self, unit_env):
        _, invite = await _seed(unit_env)
        invite_service = await unit_env.get(InviteService)
        await invite_service.decline_invite(invite.invite_token)

        result = await invite_service.decline_invite(invite.invite_token)

        assert result.status == InviteStatus.DECLINED

    @pytest.mark.asyncio
    async def test_decline_accepted_invite_is_refused(self, unit_env):
        """An accepted invite stays accepted."""
        # Arrange
        _, invite = await _seed(unit_env)
        invite_service = await unit_env.get(InviteService)
        await invite_service.accept_invite(invite.invite_token, UserId(uuid4()))

        # Act & Assert
        with pytest.raises(InvalidTransitionError):
            await invite_service.decline_invite(invite.invite_token)

        stored = await invite_service.get_invite_by_token(invite.invite_token)
        assert stored.status == InviteStatus.ACCEPTED


class TestListPendingForInvitee:
    """Tests for list_pending_for_invitee method."""

    @pytest.mark.asyncio
    async def test_matches_by_email_case_insensitively(self, unit_env):
        # Arrange
        _, invite = await _seed(unit_env)
        invite_service = await unit_env.get(InviteService)

        # Act
        result = await invite_service.list_pending_for_invitee(
            UserId(uuid4()), "Guest@Example.com"
        )

        # Assert
        assert [i.id for i in result] == [invite.id]

    @pytest.mark.asyncio
    async def test_excludes_resolved_invites(self, unit_env):
        # Arrange
        _, invite = await _seed(unit_env)
        invite_service = await unit_env.get(InviteService)
        await invite_service.decline_invite(invite.invite_token)

        # Act
        result = await invite_service.list_pending_for_invitee(
            UserId(uuid4()), "guest@example.com"
        )

        # Assert
        assert result == []
