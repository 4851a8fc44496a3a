"""Identity session surface.

The acceptance flow never authenticates anyone. It asks for the current
session and listens for sign-in transitions.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

import logfire

from eventflow.domain.value import IdentitySession

SessionListener = Callable[[IdentitySession | None], Awaitable[None]]


class Subscription:
    """Handle returned by ``subscribe``. Unsubscribing twice is harmless."""

    def __init__(self, release: Callable[[], None]) -> None:
        self._release: Callable[[], None] | None = release

    def unsubscribe(self) -> None:
        if self._release is not None:
            self._release()
            self._release = None

    @property
    def active(self) -> bool:
        return self._release is not None


class IdentityProvider(Protocol):
    """Consumed identity provider operations."""

    async def get_current_session(self) -> IdentitySession | None:
        """Current signed-in identity, or None."""
        ...

    def subscribe(self, listener: SessionListener) -> Subscription:
        """Register a listener for session changes.

        Args:
            listener: Awaited with the new session on every change

        Returns:
            Handle releasing the listener
        """
        ...


class LocalIdentityProvider:
    """In-process identity provider for one client context.

    Routes seed it from the session cookie; tests drive ``sign_in`` and
    ``sign_out`` to emit notifications.
    """

    def __init__(self, session: IdentitySession | None = None) -> None:
        self._session = session
        self._listeners: list[SessionListener] = []

    async def get_current_session(self) -> IdentitySession | None:
        return self._session

    def subscribe(self, listener: SessionListener) -> Subscription:
        self._listeners.append(listener)

        def release() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return Subscription(release)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    async def sign_in(self, session: IdentitySession) -> None:
        """Set the session and notify listeners."""
        self._session = session
        logfire.info("Identity session changed", user_id=str(session.user_id))
        await self._notify()

    async def sign_out(self) -> None:
        """Drop the session and notify listeners."""
        self._session = None
        await self._notify()

    async def _notify(self) -> None:
        for listener in list(self._listeners):
            await listener(self._session)
