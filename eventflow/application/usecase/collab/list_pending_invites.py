"""List pending invites use case."""

import datetime

import logfire
from pydantic import BaseModel

from eventflow.application.usecase.base import BaseUseCase
from eventflow.config import Settings
from eventflow.domain.service import InviteService
from eventflow.domain.value import IdentitySession, role_display


class PendingInviteItem(BaseModel):
    """Pending invite card shown on the event list."""

    invite_id: str
    event_id: str
    event_name: str | None
    event_date: datetime.date | None
    role: str
    role_label: str
    role_color: str
    accept_url: str


class ListPendingInvitesRequest(BaseModel):
    """Request carrying the signed-in identity."""

    session: IdentitySession


class ListPendingInvitesResponse(BaseModel):
    """Pending invites for the signed-in user."""

    invites: list[PendingInviteItem]


class ListPendingInvitesUseCase(BaseUseCase):
    """Pending invites addressed to a user by ID or email, one card each."""

    def __init__(self, invite_service: InviteService, settings: Settings) -> None:
        self.invite_service = invite_service
        self.settings = settings

    async def execute(
        self, request: ListPendingInvitesRequest
    ) -> ListPendingInvitesResponse:
        with logfire.span(
            "list_pending_invites.execute", user_id=str(request.session.user_id)
        ):
            invites = await self.invite_service.list_pending_for_invitee(
                request.session.user_id, request.session.email
            )

            items: list[PendingInviteItem] = []
            seen = set()
            for invite in invites:
                if invite.id in seen:
                    continue
                seen.add(invite.id)
                display = role_display(invite.role)
                items.append(
                    PendingInviteItem(
                        invite_id=str(invite.id),
                        event_id=str(invite.event_id),
                        event_name=invite.event.name if invite.event else None,
                        event_date=invite.event.date if invite.event else None,
                        role=invite.role,
                        role_label=display.label,
                        role_color=display.color,
                        accept_url=self.settings.app.accept_url(
                            invite.invite_token.root
                        ),
                    )
                )

            return ListPendingInvitesResponse(invites=items)
