"""Navigation surface for the acceptance flow."""

from typing import Protocol


class Navigator(Protocol):
    """Moves the client context to another route."""

    def navigate(self, location: str) -> None:
        """Navigate to a path or absolute URL."""
        ...


class RecordingNavigator:
    """Navigator that records requested locations.

    Used by the HTTP routes, which turn the last location into a redirect
    response, and by tests.
    """

    def __init__(self) -> None:
        self.locations: list[str] = []

    def navigate(self, location: str) -> None:
        self.locations.append(location)

    @property
    def location(self) -> str | None:
        """Most recent navigation target, if any."""
        return self.locations[-1] if self.locations else None
