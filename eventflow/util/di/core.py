"""Configuration providers (not mockable)."""

from dishka import Scope, provide

from eventflow.config import AuthSettings, MailSettings, Settings
from eventflow.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections components depend on directly.

    Settings are read once per container from the environment and .env.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_mail_settings(self, settings: Settings) -> MailSettings:
        return settings.mail
