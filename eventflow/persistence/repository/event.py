"""PostgreSQL implementation of Event repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from eventflow.domain.model import Event
from eventflow.domain.repository import EventRepository
from eventflow.domain.value import EventId
from eventflow.persistence.mappers import event_to_dict, row_to_event
from eventflow.persistence.tables import events_table


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        stmt = select(events_table).where(events_table.c.id == event_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_event(dict(row)) if row else None

    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        event_dict = event_to_dict(event)

        if await self.find_by_id(event.id):
            stmt = (
                update(events_table)
                .where(events_table.c.id == event.id)
                .values(**event_dict)
            )
        else:
            stmt = insert(events_table).values(**event_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return event
