"""Event domain service."""

import logfire

from eventflow.domain.error import NotFoundError
from eventflow.domain.model import Event
from eventflow.domain.repository import EventRepository
from eventflow.domain.value import EventId

from .base import Service


class EventService(Service):
    """Read access to events for the invite lifecycle."""

    def __init__(self, event_repository: EventRepository) -> None:
        self.event_repository = event_repository

    async def get_event_by_id(self, event_id: EventId) -> Event:
        """Get event by ID.

        Raises:
            NotFoundError: If the event does not exist
        """
        with logfire.span("event_service.get_event_by_id", event_id=str(event_id)):
            event = await self.event_repository.find_by_id(event_id)
            if not event:
                logfire.warn("Event not found", event_id=str(event_id))
                raise NotFoundError("Event", str(event_id))
            return event
