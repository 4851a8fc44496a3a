"""Mail infrastructure providers."""

import logfire
from dishka import Scope, provide

from eventflow.adapter.gmail import GmailClient, RealGmailClient
from eventflow.config import MailSettings
from eventflow.domain.service import MailClient
from eventflow.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider using the Gmail API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_gmail_client(self, mail: MailSettings) -> GmailClient:
        """Provide Gmail client.

        Missing credentials are not fatal here: sends then fail with
        ``MailNotConfiguredError`` and invites are still created.
        """
        client = RealGmailClient(
            client_id=mail.client_id,
            client_secret=mail.client_secret,
            refresh_token=mail.refresh_token,
            sender=mail.sender,
            sender_name=mail.sender_name,
            token_url=mail.token_url,
            send_url=mail.send_url,
            timeout=mail.timeout,
        )
        if not client.configured:
            logfire.warn("Gmail credentials not configured, invite emails will fail")
        return client

    @provide(scope=Scope.APP)
    def get_mail_client(self, gmail_client: GmailClient) -> MailClient:
        """Provide the generic mail client."""
        return gmail_client
