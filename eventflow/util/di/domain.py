"""Domain service providers (not mockable)."""

from dishka import Scope, provide

from eventflow.config import AuthSettings
from eventflow.domain.repository import EventRepository, InviteRepository
from eventflow.domain.service import EventService, InviteService, JWTService
from eventflow.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, built per request on that request's repositories.

    JWTService holds no request state and is shared for the container's
    lifetime.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_invite_service(self, invite_repository: InviteRepository) -> InviteService:
        return InviteService(invite_repository=invite_repository)

    @provide
    def get_event_service(self, event_repository: EventRepository) -> EventService:
        return EventService(event_repository=event_repository)
