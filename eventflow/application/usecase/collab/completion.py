"""Completion of a pending invite after sign-in."""

import logfire
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from eventflow.adapter.browser import Navigator, PendingInviteHandoff
from eventflow.config import Settings
from eventflow.domain.error import InvalidTransitionError, InviteNotFoundError
from eventflow.domain.service import InviteService
from eventflow.domain.value import IdentitySession, InviteToken


class PendingInviteCompletion(BaseModel):
    """Outcome of completing the handed-off invite.

    ``location`` is a client route, like ``AcceptanceView.redirect_to``.
    """

    token: InviteToken
    accepted: bool
    location: str


class PendingInviteCompleter:
    """Session-change listener that finishes an accept started before sign-in.

    Acts only when a session is present and the handoff holds a token. The
    handoff is consumed before the write, so repeated notifications issue
    at most one acceptance.
    """

    def __init__(
        self,
        invite_service: InviteService,
        handoff: PendingInviteHandoff,
        navigator: Navigator,
        settings: Settings,
    ) -> None:
        self.invite_service = invite_service
        self.handoff = handoff
        self.navigator = navigator
        self.settings = settings

    async def on_session_change(
        self, session: IdentitySession | None
    ) -> PendingInviteCompletion | None:
        """Accept the handed-off invite for the new session.

        Never raises: refused or failed completions navigate to the event
        listing.

        Args:
            session: Session carried by the notification

        Returns:
            The completion, or None if there was nothing to do
        """
        if session is None:
            return None

        token = self.handoff.consume()
        if token is None:
            return None

        with logfire.span(
            "pending_invite.complete",
            token=token.redacted(),
            user_id=str(session.user_id),
        ):
            accepted = await self._accept(token, session)
            location = self.settings.app.listing_path
            if accepted:
                location = await self._dashboard_for(token) or location

            self.navigator.navigate(location)
            logfire.info(
                "Pending invite completed",
                token=token.redacted(),
                accepted=accepted,
                location=location,
            )
            return PendingInviteCompletion(
                token=token, accepted=accepted, location=location
            )

    async def _accept(self, token: InviteToken, session: IdentitySession) -> bool:
        try:
            await self.invite_service.accept_invite(token, session.user_id)
        except (InviteNotFoundError, InvalidTransitionError) as e:
            logfire.warn(
                "Pending invite not accepted", token=token.redacted(), error=str(e)
            )
            return False
        except SQLAlchemyError as e:
            logfire.error(
                "Pending invite acceptance failed",
                token=token.redacted(),
                error=str(e),
            )
            return False
        return True

    async def _dashboard_for(self, token: InviteToken) -> str | None:
        try:
            invite = await self.invite_service.get_invite_by_token(token)
        except SQLAlchemyError as e:
            logfire.error(
                "Pending invite re-resolution failed",
                token=token.redacted(),
                error=str(e),
            )
            return None
        if invite is None:
            return None
        return self.settings.app.dashboard_route(invite.event_id)
