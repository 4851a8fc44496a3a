"""Shared in-memory store for the in-memory repositories."""

from eventflow.domain.model import Event, Invite
from eventflow.domain.value import EventId


class InMemoryDatabase:
    """Rows shared by in-memory repositories.

    One instance per container, so data survives across requests the way
    it would in Postgres. Invites are stored without their joined event.
    """

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}
        self.invites: list[Invite] = []
        # Successful conditional status writes
        self.status_writes = 0
