"""In-memory event repository for testing."""

from typing import Optional

from eventflow.domain.model import Event
from eventflow.domain.repository import EventRepository
from eventflow.domain.value import EventId

from .database import InMemoryDatabase


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        return self._db.events.get(event_id)

    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        self._db.events[event.id] = event
        return event
