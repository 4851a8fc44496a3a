"""Identity session service."""

from uuid import UUID

import logfire
from pydantic import ValidationError

from eventflow.config import AuthSettings
from eventflow.domain.value import IdentitySession, UserId
from eventflow.util.jwt import JWTError, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Reads the identity session out of the session cookie's JWT.

    Any token we cannot trust, for whatever reason, means "signed out":
    the acceptance flow then shows the preview instead of failing.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str | None) -> str:
        """Mint a session token (local tooling and tests)."""
        return create_token(user_id, email, self.auth_settings)

    def get_session(self, token: str | None) -> IdentitySession | None:
        """Resolve the session carried by a cookie value.

        Args:
            token: Raw cookie value, if the cookie was sent

        Returns:
            The session, or None when unauthenticated
        """
        if not token:
            return None

        try:
            payload = verify_token(token, self.auth_settings)
            session = IdentitySession(
                user_id=UserId(UUID(payload.sub)), email=payload.email
            )
        except (JWTError, ValueError, ValidationError) as e:
            logfire.debug("Session token rejected", error=str(e))
            return None

        logfire.debug("Session resolved", user_id=str(session.user_id))
        return session
