"""Send invite email use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from eventflow.application.usecase.base import BaseUseCase
from eventflow.application.usecase.collab.invite_email import render_invite_email
from eventflow.config import Settings
from eventflow.domain.error import InviteNotFoundError
from eventflow.domain.service import InviteService, MailClient
from eventflow.domain.value import InviteId


class SendInviteRequest(BaseModel):
    """Request to (re)send an invite email."""

    invite_id: str


class SendInviteResponse(BaseModel):
    """Send invite response."""

    ok: bool = True


class SendInviteUseCase(BaseUseCase):
    """Render and submit the invite email for one invite.

    Never mutates the invite. Mail relay failures propagate to the caller
    unretried.
    """

    def __init__(
        self,
        invite_service: InviteService,
        mail_client: MailClient,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            mail_client: Mail relay client
            settings: Application settings
        """
        self.invite_service = invite_service
        self.mail_client = mail_client
        self.settings = settings

    async def execute(self, request: SendInviteRequest) -> SendInviteResponse:
        """Send the invite email.

        Args:
            request: Request with the invite ID

        Returns:
            Success response

        Raises:
            InviteNotFoundError: If no invite has this ID
            ProviderError: If the mail relay fails
        """
        with logfire.span("send_invite.execute", invite_id=request.invite_id):
            try:
                invite_id = InviteId(UUID(request.invite_id))
            except ValueError:
                raise InviteNotFoundError(request.invite_id)

            invite = await self.invite_service.get_invite_by_id(invite_id)
            email = render_invite_email(
                invite, self.settings.app.accept_url(invite.invite_token.root)
            )

            await self.mail_client.send(invite.email, email.subject, email.html)
            logfire.info(
                "Invite email sent",
                invite_id=str(invite.id),
                token=invite.invite_token.redacted(),
            )
            return SendInviteResponse(ok=True)
