"""Pending-invite handoff across a sign-in redirect.

A single slot holding at most one invite token. Written when an
unauthenticated invitee reaches the preview, consumed the moment a
sign-in is observed.
"""

from typing import Protocol

from fastapi import Response

from eventflow.domain.value import InviteToken


class PendingInviteHandoff(Protocol):
    """Single-slot store for the invite token awaiting sign-in."""

    def set(self, token: InviteToken) -> None:
        """Store a token, replacing any previous one."""
        ...

    def consume(self) -> InviteToken | None:
        """Return the stored token and empty the slot.

        Returns:
            The token, or None if the slot was empty
        """
        ...

    def clear(self) -> None:
        """Empty the slot without reading it."""
        ...

    def discard(self, token: InviteToken) -> None:
        """Empty the slot if it holds this token."""
        ...


class InMemoryPendingInviteHandoff:
    """Handoff held in process memory for one client context."""

    def __init__(self, token: InviteToken | None = None) -> None:
        self._token = token

    def set(self, token: InviteToken) -> None:
        self._token = token

    def consume(self) -> InviteToken | None:
        token, self._token = self._token, None
        return token

    def clear(self) -> None:
        self._token = None

    def discard(self, token: InviteToken) -> None:
        if self._token == token:
            self._token = None

    @property
    def token(self) -> InviteToken | None:
        """Current token without consuming it."""
        return self._token


class CookiePendingInviteHandoff:
    """Handoff carried in a session cookie between HTTP requests.

    Reads the incoming cookie value once, tracks changes in memory, and
    writes them to the outgoing response with ``apply``.
    """

    def __init__(self, cookie_name: str, value: str | None) -> None:
        """Initialize from the request cookie.

        Args:
            cookie_name: Cookie holding the token
            value: Cookie value from the request, if any
        """
        self.cookie_name = cookie_name
        self._token = _parse_token(value)
        self._dirty = False

    def set(self, token: InviteToken) -> None:
        self._token = token
        self._dirty = True

    def consume(self) -> InviteToken | None:
        token, self._token = self._token, None
        self._dirty = True
        return token

    def clear(self) -> None:
        self._token = None
        self._dirty = True

    def discard(self, token: InviteToken) -> None:
        if self._token == token:
            self.clear()

    def apply(self, response: Response) -> None:
        """Write pending changes to the response.

        The cookie has no max-age so it ends with the browser session.
        """
        if not self._dirty:
            return
        if self._token is None:
            response.delete_cookie(self.cookie_name)
        else:
            response.set_cookie(
                self.cookie_name,
                str(self._token),
                httponly=True,
                samesite="lax",
            )


def _parse_token(value: str | None) -> InviteToken | None:
    if not value:
        return None
    try:
        return InviteToken(value)
    except ValueError:
        return None
