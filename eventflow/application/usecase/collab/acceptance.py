"""Invite acceptance flow.

One flow per client context and token. The initial load resolves the
token and branches on the invite's status and the current session. While
mounted, the flow also listens for sign-in so an accept started before
sign-in completes afterwards.

Store or network failures while resolving the token render as ``invalid``.
"""

import asyncio
from collections.abc import Awaitable, Callable

import logfire
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from eventflow.adapter.browser import (
    IdentityProvider,
    Navigator,
    PendingInviteHandoff,
    Subscription,
)
from eventflow.application.usecase.collab.completion import PendingInviteCompleter
from eventflow.config import Settings
from eventflow.domain.error import InvalidTransitionError, InviteNotFoundError
from eventflow.domain.model import Invite
from eventflow.domain.service import InviteService
from eventflow.domain.value import (
    AcceptanceStep,
    IdentitySession,
    InviteStatus,
    InviteToken,
    role_display,
)

Sleep = Callable[[float], Awaitable[None]]

_HEADLINES: dict[AcceptanceStep, tuple[str, str]] = {
    AcceptanceStep.LOADING: ("Loading…", ""),
    AcceptanceStep.INVALID: (
        "Invalid Link",
        "This invitation link is not valid or has expired.",
    ),
    AcceptanceStep.DONE: ("You're already in!", "You already have access to {event}."),
    AcceptanceStep.PREVIEW: (
        "Collaboration Invite",
        "You'll be redirected to sign in if needed",
    ),
    AcceptanceStep.ACCEPTED_REDIRECT: (
        "Invite accepted",
        "Taking you to the {event} dashboard…",
    ),
    AcceptanceStep.DECLINED: (
        "Invitation Declined",
        "You've declined this collaboration invite.",
    ),
}


class AcceptanceView(BaseModel):
    """What the acceptance page shows for one step.

    ``redirect_to`` is a client route such as ``/dashboard/<event_id>``,
    relative to the frontend; the page navigates there itself after
    ``redirect_delay`` seconds. Only HTTP redirects carry absolute URLs.
    """

    step: AcceptanceStep
    title: str
    message: str
    event_id: str | None = None
    event_name: str | None = None
    event_date: str | None = None
    venue_name: str | None = None
    role: str | None = None
    role_label: str | None = None
    role_description: str | None = None
    role_color: str | None = None
    redirect_to: str | None = None
    redirect_delay: float | None = None


def render_acceptance(
    step: AcceptanceStep,
    invite: Invite | None,
    *,
    redirect_to: str | None = None,
    redirect_delay: float | None = None,
) -> AcceptanceView:
    """Build the view for a step and the resolved invite.

    Unknown roles render with their raw value and neutral styling.
    """
    title, message = _HEADLINES[step]
    event = invite.event if invite else None
    event_name = event.name if event else None
    view = AcceptanceView(
        step=step,
        title=title,
        message=message.format(event=event_name or "this event"),
        redirect_to=redirect_to,
        redirect_delay=redirect_delay,
    )
    if invite is None or step == AcceptanceStep.INVALID:
        return view

    display = role_display(invite.role)
    return view.model_copy(
        update={
            "event_id": str(invite.event_id),
            "event_name": event_name,
            "event_date": event.long_date() if event else None,
            "venue_name": event.venue_name if event else None,
            "role": invite.role,
            "role_label": display.label,
            "role_description": display.description,
            "role_color": display.color,
        }
    )


class InviteAcceptanceFlow:
    """State machine for opening an accept-URL.

    Usage:
        async with InviteAcceptanceFlow(...) as flow:
            view = flow.view()
            ...

    ``mount`` subscribes to session changes and runs the initial load;
    ``unmount`` releases the subscription and cancels a pending dashboard
    redirect.
    """

    def __init__(
        self,
        token: InviteToken,
        invite_service: InviteService,
        identity: IdentityProvider,
        handoff: PendingInviteHandoff,
        navigator: Navigator,
        settings: Settings,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        """Initialize the flow.

        Args:
            token: Token from the accept-URL
            invite_service: Invite domain service
            identity: Identity provider for this client context
            handoff: Pending-invite handoff for this client context
            navigator: Navigation for this client context
            settings: Application settings
            sleep: Awaitable delay before the dashboard redirect
        """
        self.token = token
        self.invite_service = invite_service
        self.identity = identity
        self.handoff = handoff
        self.navigator = navigator
        self.settings = settings
        self.completer = PendingInviteCompleter(
            invite_service, handoff, navigator, settings
        )

        self.step = AcceptanceStep.LOADING
        self.invite: Invite | None = None
        self.redirect_to: str | None = None
        self.redirect_task: asyncio.Task[None] | None = None

        self._sleep = sleep
        self._loaded = False
        self._subscription: Subscription | None = None

    async def __aenter__(self) -> "InviteAcceptanceFlow":
        await self.mount()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.unmount()

    @property
    def mounted(self) -> bool:
        return self._subscription is not None and self._subscription.active

    async def mount(self) -> AcceptanceView:
        """Start listening for sign-in and run the initial load."""
        if self._subscription is None:
            self._subscription = self.identity.subscribe(self._on_session_change)
        return await self.load()

    async def unmount(self) -> None:
        """Stop listening and drop any pending redirect."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

        task, self.redirect_task = self.redirect_task, None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

    async def load(self) -> AcceptanceView:
        """Resolve the token and take the matching branch. Runs once."""
        if self._loaded:
            return self.view()
        self._loaded = True

        with logfire.span("invite_acceptance.load", token=self.token.redacted()):
            try:
                invite = await self.invite_service.get_invite_by_token(self.token)
            except SQLAlchemyError as e:
                logfire.error(
                    "Invite lookup failed", token=self.token.redacted(), error=str(e)
                )
                invite = None

            if invite is None:
                self.step = AcceptanceStep.INVALID
                return self.view()

            self.invite = invite
            if invite.status == InviteStatus.ACCEPTED:
                self.step = AcceptanceStep.DONE
                self.handoff.discard(self.token)
                return self.view()
            if invite.status == InviteStatus.DECLINED:
                self.step = AcceptanceStep.DECLINED
                self.handoff.discard(self.token)
                return self.view()

            session = await self.identity.get_current_session()
            if session is None:
                self.handoff.set(self.token)
                self.step = AcceptanceStep.PREVIEW
                logfire.info("Invite preview shown", token=self.token.redacted())
                return self.view()

            await self._accept_now(session)
            if self.step != AcceptanceStep.INVALID:
                # A marker from an earlier preview is now stale
                self.handoff.discard(self.token)
            return self.view()

    async def decline(self) -> AcceptanceView:
        """Decline the invite. Needs no session."""
        with logfire.span("invite_acceptance.decline", token=self.token.redacted()):
            self.handoff.clear()
            try:
                self.invite = await self.invite_service.decline_invite(self.token)
                self.step = AcceptanceStep.DECLINED
            except InviteNotFoundError:
                self.step = AcceptanceStep.INVALID
            except InvalidTransitionError:
                # Accepted elsewhere first
                self.step = AcceptanceStep.DONE
                await self._refresh()
            except SQLAlchemyError as e:
                logfire.error(
                    "Invite decline failed", token=self.token.redacted(), error=str(e)
                )
                self.step = AcceptanceStep.INVALID
            return self.view()

    def accept(self) -> str:
        """Send the invitee to sign in. Completion happens on sign-in."""
        self.handoff.set(self.token)
        location = self.settings.app.sign_in_path
        self.navigator.navigate(location)
        logfire.info("Invite accept requires sign-in", token=self.token.redacted())
        return location

    def view(self) -> AcceptanceView:
        """Current view."""
        delay = None
        if self.step == AcceptanceStep.ACCEPTED_REDIRECT:
            delay = self.settings.collab.redirect_delay
        return render_acceptance(
            self.step,
            self.invite,
            redirect_to=self.redirect_to,
            redirect_delay=delay,
        )

    async def _accept_now(self, session: IdentitySession) -> None:
        try:
            self.invite = await self.invite_service.accept_invite(
                self.token, session.user_id
            )
        except InvalidTransitionError:
            # Declined elsewhere first
            self.step = AcceptanceStep.DECLINED
            await self._refresh()
            return
        except (InviteNotFoundError, SQLAlchemyError) as e:
            logfire.error(
                "Invite acceptance failed", token=self.token.redacted(), error=str(e)
            )
            self.step = AcceptanceStep.INVALID
            return

        self.step = AcceptanceStep.ACCEPTED_REDIRECT
        self.redirect_to = self.settings.app.dashboard_route(self.invite.event_id)
        self.redirect_task = asyncio.create_task(self._redirect_later(self.redirect_to))

    async def _redirect_later(self, location: str) -> None:
        await self._sleep(self.settings.collab.redirect_delay)
        self.navigator.navigate(location)

    async def _refresh(self) -> None:
        try:
            self.invite = (
                await self.invite_service.get_invite_by_token(self.token)
                or self.invite
            )
        except SQLAlchemyError as e:
            logfire.error(
                "Invite refresh failed", token=self.token.redacted(), error=str(e)
            )

    async def _on_session_change(self, session: IdentitySession | None) -> None:
        completion = await self.completer.on_session_change(session)
        if completion is None or completion.token != self.token:
            return
        if completion.accepted:
            self.step = AcceptanceStep.ACCEPTED_REDIRECT
            self.redirect_to = completion.location
            await self._refresh()
