"""Mail delivery interface."""


class MailClient:
    """Generic transactional mail client interface."""

    async def send(self, to: str, subject: str, html: str) -> None:
        """Submit one HTML email for delivery.

        Args:
            to: Recipient address
            subject: Subject line (any unicode)
            html: HTML body

        Raises:
            ProviderError: If the message could not be submitted
        """
        raise NotImplementedError
