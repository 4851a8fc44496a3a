"""Gmail API mail client.

Authenticates with a long-lived OAuth refresh token and submits raw MIME
messages. Nothing is retried: a failed exchange or send surfaces to the
caller, who may retry the whole operation.
"""

import httpx
import logfire

from eventflow.adapter.error import ProviderError
from eventflow.adapter.gmail.message import build_raw_message, encode_raw_message
from eventflow.domain.service.mail_client import MailClient


class GmailError(ProviderError):
    """Gmail relay error."""

    provider = "gmail"


class TokenExchangeFailedError(GmailError):
    """The token endpoint did not return an access token."""

    pass


class SendFailedError(GmailError):
    """The send endpoint rejected the message or was unreachable."""

    pass


class MailNotConfiguredError(GmailError):
    """OAuth credentials for the sender mailbox are missing."""

    pass


class GmailClient(MailClient):
    """Base class for Gmail clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGmailClient(GmailClient):
    """Gmail API client using the OAuth2 refresh-token grant."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        sender: str,
        sender_name: str,
        token_url: str,
        send_url: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Gmail client.

        Args:
            client_id: OAuth client ID
            client_secret: OAuth client secret
            refresh_token: Long-lived refresh token for the sender mailbox
            sender: Sender address
            sender_name: Sender display name
            token_url: OAuth token endpoint
            send_url: Gmail messages.send endpoint
            timeout: Per-request timeout in seconds
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.refresh_token = refresh_token
        self.sender = sender
        self.sender_name = sender_name
        self.token_url = token_url
        self.send_url = send_url
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        """Whether OAuth credentials for the sender mailbox are set."""
        return bool(self.client_id and self.client_secret and self.refresh_token)

    async def send(self, to: str, subject: str, html: str) -> None:
        """Exchange credentials and submit one message.

        Args:
            to: Recipient address
            subject: Subject line
            html: HTML body

        Raises:
            MailNotConfiguredError: If OAuth credentials are missing
            TokenExchangeFailedError: If no access token could be obtained
            SendFailedError: If the message was not accepted
        """
        if not self.configured:
            logfire.error("Gmail credentials not configured", to=to)
            raise MailNotConfiguredError("Gmail OAuth credentials are not configured")

        access_token = await self._exchange_refresh_token()
        raw = encode_raw_message(
            build_raw_message(self.sender, self.sender_name, to, subject, html)
        )

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.send_url,
                    json={"raw": raw},
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Gmail send HTTP error", error=str(e))
            raise SendFailedError(f"HTTP error during send: {e}")

        if response.status_code >= 300:
            logfire.error(
                "Gmail send failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise SendFailedError(f"Send failed: {response.status_code}")

        logfire.info("Gmail message submitted", to=to)

    async def _exchange_refresh_token(self) -> str:
        """Exchange the refresh token for a short-lived access token.

        Returns:
            Access token

        Raises:
            TokenExchangeFailedError: If the provider returns no access token
        """
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "refresh_token": self.refresh_token,
            "grant_type": "refresh_token",
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=self.timeout,
                )
                result = response.json()
        except httpx.HTTPError as e:
            logfire.error("Gmail token exchange HTTP error", error=str(e))
            raise TokenExchangeFailedError(f"HTTP error during token exchange: {e}")
        except ValueError:
            logfire.error(
                "Gmail token exchange returned non-JSON",
                status_code=response.status_code,
            )
            raise TokenExchangeFailedError("Token exchange returned invalid JSON")

        access_token = result.get("access_token") if isinstance(result, dict) else None
        if not access_token:
            logfire.error(
                "Gmail token exchange failed",
                status_code=response.status_code,
                error=result.get("error") if isinstance(result, dict) else None,
            )
            raise TokenExchangeFailedError("Gmail token failed")

        return access_token


class MockGmailClient(GmailClient):
    """Mock Gmail client for testing.

    Records messages instead of sending them. Set ``fail_with`` to make the
    next sends raise.
    """

    def __init__(self) -> None:
        """Initialize mock client without real OAuth configuration."""
        self.sent: list[dict[str, str]] = []
        self.fail_with: GmailError | None = None

    async def send(self, to: str, subject: str, html: str) -> None:
        """Record the message, or raise ``fail_with`` when set."""
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append({"to": to, "subject": subject, "html": html})
