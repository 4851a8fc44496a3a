"""Unit tests for completing a pending invite after sign-in."""

import pytest
import pytest_asyncio

from eventflow.adapter.browser import InMemoryPendingInviteHandoff, RecordingNavigator
from eventflow.application.usecase.collab import PendingInviteCompleter
from eventflow.domain.service import InviteService
from eventflow.domain.value import InviteStatus, InviteToken
from tests.conftest import make_event, make_invite, make_session

TOKEN = InviteToken(root="abc123")


@pytest_asyncio.fixture
async def event(event_repository):
    return await event_repository.save(make_event())


@pytest.fixture
def handoff():
    return InMemoryPendingInviteHandoff()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def completer(invite_repository, handoff, navigator, settings):
    return PendingInviteCompleter(
        InviteService(invite_repository), handoff, navigator, settings
    )


class TestPendingInviteCompleter:
    """Tests for PendingInviteCompleter.on_session_change."""

    @pytest.mark.asyncio
    async def test_without_session_does_nothing(self, completer, handoff, navigator):
        handoff.set(TOKEN)

        assert await completer.on_session_change(None) is None
        assert handoff.token == TOKEN
        assert navigator.locations == []

    @pytest.mark.asyncio
    async def test_without_marker_does_nothing(self, completer, navigator, database):
        assert await completer.on_session_change(make_session()) is None
        assert navigator.locations == []
        assert database.status_writes == 0

    @pytest.mark.asyncio
    async def test_accepts_and_navigates_to_dashboard(
        self, completer, invite_repository, event, handoff, navigator, settings
    ):
        # Arrange
        await invite_repository.save(make_invite(event))
        handoff.set(TOKEN)
        session = make_session()

        # Act
        completion = await completer.on_session_change(session)

        # Assert
        dashboard = settings.app.dashboard_route(event.id)
        assert completion.token == TOKEN
        assert completion.accepted is True
        assert completion.location == dashboard
        assert navigator.locations == [dashboard]
        assert handoff.token is None

        stored = await invite_repository.find_by_token(TOKEN)
        assert stored.status == InviteStatus.ACCEPTED
        assert stored.user_id == session.user_id

    @pytest.mark.asyncio
    async def test_already_accepted_still_goes_to_dashboard(
        self, completer, invite_repository, event, handoff, database, settings
    ):
        await invite_repository.save(make_invite(event, status=InviteStatus.ACCEPTED))
        handoff.set(TOKEN)

        completion = await completer.on_session_change(make_session())

        assert completion.accepted is True
        assert completion.location == settings.app.dashboard_route(event.id)
        assert database.status_writes == 0

    @pytest.mark.asyncio
    async def test_declined_invite_goes_to_listing(
        self, completer, invite_repository, event, handoff, navigator, settings
    ):
        # Arrange
        await invite_repository.save(make_invite(event, status=InviteStatus.DECLINED))
        handoff.set(TOKEN)

        # Act
        completion = await completer.on_session_change(make_session())

        # Assert
        assert completion.accepted is False
        assert navigator.locations == [settings.app.listing_path]
        assert handoff.token is None

    @pytest.mark.asyncio
    async def test_unknown_token_goes_to_listing(
        self, completer, handoff, navigator, settings
    ):
        handoff.set(InviteToken(root="missing"))

        completion = await completer.on_session_change(make_session())

        assert completion.accepted is False
        assert navigator.location == settings.app.listing_path
        assert handoff.token is None
