"""Identity session tokens.

The identity provider signs a JWT per session and leaves it in the
session cookie. We verify it; ``create_token`` exists for local tooling
and tests that need to mint a session.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from eventflow.config import AuthSettings

# Tolerated clock skew with the identity provider
LEEWAY = timedelta(seconds=30)


class TokenPayload(BaseModel):
    """Claims we read from a session token."""

    sub: str
    email: str | None = None
    exp: datetime


class JWTError(Exception):
    """Session token could not be verified."""


def create_token(
    user_id: str,
    email: str | None,
    settings: AuthSettings,
    expires_in: timedelta = timedelta(days=30),
) -> str:
    """Sign a session token for ``user_id``."""
    now = datetime.now(timezone.utc)
    claims = {"sub": user_id, "email": email, "iat": now, "exp": now + expires_in}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify signature and expiry and return the claims.

    Raises:
        JWTError: If the token is expired, malformed or badly signed
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=LEEWAY,
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Session token has expired")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid session token: {e}")
    return TokenPayload(**claims)
