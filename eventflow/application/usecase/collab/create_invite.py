"""Create collaboration invite use case."""

import secrets
from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from eventflow.adapter.error import ProviderError
from eventflow.application.usecase.base import BaseUseCase
from eventflow.application.usecase.collab.send_invite import (
    SendInviteRequest,
    SendInviteUseCase,
)
from eventflow.config import Settings
from eventflow.domain.error import ValidationError
from eventflow.domain.service import EventService, InviteService
from eventflow.domain.value import CollaboratorRole, EventId, InviteStatus, InviteToken


class CreateInviteRequest(BaseModel):
    """Request to invite a collaborator onto an event."""

    event_id: str
    email: str
    role: str


class CreateInviteResponse(BaseModel):
    """Created invite."""

    invite_id: str
    invite_url: str
    invite_token: str
    email: str
    role: str
    status: InviteStatus
    created_at: datetime
    email_sent: bool


class CreateInviteUseCase(BaseUseCase):
    """Create a pending invite and mail it.

    Delivery is best effort: a mail failure is logged and reported in the
    response but never undoes the invite.
    """

    def __init__(
        self,
        invite_service: InviteService,
        event_service: EventService,
        send_invite: SendInviteUseCase,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            event_service: Event domain service
            send_invite: Invite email use case
            settings: Application settings
        """
        self.invite_service = invite_service
        self.event_service = event_service
        self.send_invite = send_invite
        self.settings = settings

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Create the invite.

        Raises:
            ValidationError: If the role, email or event ID is malformed
            NotFoundError: If the event does not exist
            DuplicateInviteError: If a pending invite already exists
        """
        with logfire.span(
            "create_invite.execute", event_id=request.event_id, role=request.role
        ):
            try:
                role = CollaboratorRole(request.role)
            except ValueError:
                raise ValidationError(f"Unknown role: {request.role}")

            if "@" not in request.email:
                raise ValidationError(f"Invalid email: {request.email}")

            try:
                event_id = EventId(UUID(request.event_id))
            except ValueError:
                raise ValidationError(f"Invalid event ID: {request.event_id}")

            await self.event_service.get_event_by_id(event_id)

            invite = await self.invite_service.create_invite(
                event_id=event_id,
                email=request.email,
                role=role,
                invite_token=InviteToken(root=secrets.token_urlsafe(32)),
            )

            email_sent = True
            try:
                await self.send_invite.execute(SendInviteRequest(invite_id=str(invite.id)))
            except ProviderError as e:
                email_sent = False
                logfire.error(
                    "Invite email failed",
                    invite_id=str(invite.id),
                    provider=e.provider,
                    error=str(e),
                )

            return CreateInviteResponse(
                invite_id=str(invite.id),
                invite_url=self.settings.app.accept_url(invite.invite_token.root),
                invite_token=invite.invite_token.root,
                email=invite.email,
                role=invite.role,
                status=invite.status,
                created_at=invite.created_at,
                email_sent=email_sent,
            )
