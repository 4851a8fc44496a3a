"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import and_, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from eventflow.domain.model import Invite
from eventflow.domain.repository import InviteRepository
from eventflow.domain.value import (
    EventId,
    InviteId,
    InviteStatus,
    InviteToken,
    UserId,
)
from eventflow.persistence.mappers import invite_to_dict, row_to_invite
from eventflow.persistence.tables import event_collaborators_table, events_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository.

    Invites live in ``event_collaborators``; lookups left-join ``events``
    for the display fields.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_with_event(self) -> Any:
        return select(
            event_collaborators_table,
            events_table.c.name.label("event_name"),
            events_table.c.date.label("event_date"),
            events_table.c.venue_name.label("event_venue_name"),
        ).select_from(
            event_collaborators_table.outerjoin(
                events_table,
                events_table.c.id == event_collaborators_table.c.event_id,
            )
        )

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID.

        Args:
            invite_id: Invite ID to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = self._select_with_event().where(
            event_collaborators_table.c.id == invite_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_token(self, token: InviteToken) -> Optional[Invite]:
        """Find an invite by its token.

        Args:
            token: Invite token to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = self._select_with_event().where(
            event_collaborators_table.c.invite_token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_pending_by_event_and_email(
        self, event_id: EventId, email: str
    ) -> Optional[Invite]:
        """Find the pending invite for an email on an event."""
        stmt = self._select_with_event().where(
            and_(
                event_collaborators_table.c.event_id == event_id,
                event_collaborators_table.c.email == email.lower(),
                event_collaborators_table.c.status == InviteStatus.PENDING.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_pending_for_invitee(
        self, user_id: UserId, email: str | None
    ) -> list[Invite]:
        """Find pending invites addressed to a user by ID or email."""
        match = event_collaborators_table.c.user_id == user_id
        if email:
            match = or_(match, event_collaborators_table.c.email == email.lower())

        stmt = (
            self._select_with_event()
            .where(
                and_(
                    match,
                    event_collaborators_table.c.status == InviteStatus.PENDING.value,
                )
            )
            .order_by(event_collaborators_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invite(dict(row)) for row in rows]

    async def save(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Args:
            invite: Invite to save

        Returns:
            Saved invite
        """
        stmt = insert(event_collaborators_table).values(**invite_to_dict(invite))
        await self.session.execute(stmt)
        await self.session.flush()
        return invite

    async def update_status(
        self,
        token: InviteToken,
        status: InviteStatus,
        *,
        expected: InviteStatus,
        accepted_at: datetime | None = None,
        user_id: UserId | None = None,
    ) -> bool:
        """Conditionally update status, guarded by the current status.

        Returns:
            True if the row was updated
        """
        values: dict[str, Any] = {"status": status.value}
        if accepted_at is not None:
            values["accepted_at"] = accepted_at
        if user_id is not None:
            values["user_id"] = user_id

        stmt = (
            update(event_collaborators_table)
            .where(
                and_(
                    event_collaborators_table.c.invite_token == token.root,
                    event_collaborators_table.c.status == expected.value,
                )
            )
            .values(**values)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
