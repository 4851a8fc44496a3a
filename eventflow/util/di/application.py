"""Application layer DI providers."""

from dishka import Scope, provide

from eventflow.application.usecase.collab import (
    CreateInviteUseCase,
    ListPendingInvitesUseCase,
    SendInviteUseCase,
)
from eventflow.config import Settings
from eventflow.domain.service import EventService, InviteService, MailClient
from eventflow.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    The acceptance flow is built per request in the routes, since it is
    bound to one token and one client context.
    """

    # Collaboration invite use cases
    @provide(scope=Scope.REQUEST)
    def get_send_invite_use_case(
        self,
        invite_service: InviteService,
        mail_client: MailClient,
        settings: Settings,
    ) -> SendInviteUseCase:
        """Provide send invite use case."""
        return SendInviteUseCase(
            invite_service=invite_service, mail_client=mail_client, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_create_invite_use_case(
        self,
        invite_service: InviteService,
        event_service: EventService,
        send_invite: SendInviteUseCase,
        settings: Settings,
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(
            invite_service=invite_service,
            event_service=event_service,
            send_invite=send_invite,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_pending_invites_use_case(
        self, invite_service: InviteService, settings: Settings
    ) -> ListPendingInvitesUseCase:
        """Provide list pending invites use case."""
        return ListPendingInvitesUseCase(
            invite_service=invite_service, settings=settings
        )
