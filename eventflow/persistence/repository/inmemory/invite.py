"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from eventflow.domain.model.invite import Invite
from eventflow.domain.repository.invite import InviteRepository
from eventflow.domain.value import (
    EventId,
    InviteId,
    InviteStatus,
    InviteToken,
    UserId,
)

from .database import InMemoryDatabase


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing.

    Joins event display fields from the shared database on every read,
    like the Postgres repository does.
    """

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    def _with_event(self, invite: Invite) -> Invite:
        event = self._db.events.get(invite.event_id)
        return invite.model_copy(update={"event": event.summary() if event else None})

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        for invite in self._db.invites:
            if invite.id == invite_id:
                return self._with_event(invite)
        return None

    async def find_by_token(self, token: InviteToken) -> Optional[Invite]:
        """Find an invite by its token."""
        for invite in self._db.invites:
            if invite.invite_token == token:
                return self._with_event(invite)
        return None

    async def find_pending_by_event_and_email(
        self, event_id: EventId, email: str
    ) -> Optional[Invite]:
        """Find the pending invite for an email on an event."""
        for invite in self._db.invites:
            if (
                invite.event_id == event_id
                and invite.email.lower() == email.lower()
                and invite.status == InviteStatus.PENDING
            ):
                return self._with_event(invite)
        return None

    async def find_pending_for_invitee(
        self, user_id: UserId, email: str | None
    ) -> list[Invite]:
        """Find pending invites addressed to a user by ID or email."""
        matches = [
            invite
            for invite in self._db.invites
            if invite.status == InviteStatus.PENDING
            and (
                invite.user_id == user_id
                or (email is not None and invite.email.lower() == email.lower())
            )
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return [self._with_event(invite) for invite in matches]

    async def save(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Raises:
            IntegrityError: If the token is already in use
        """
        if any(i.invite_token == invite.invite_token for i in self._db.invites):
            raise IntegrityError("Duplicate invite token", None, Exception())

        self._db.invites.append(invite.model_copy(update={"event": None}))
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
        """Conditionally update status, guarded by the current status."""
        for i, invite in enumerate(self._db.invites):
            if invite.invite_token != token or invite.status != expected:
                continue

            update: dict[str, object] = {"status": status}
            if accepted_at is not None:
                update["accepted_at"] = accepted_at
            if user_id is not None:
                update["user_id"] = user_id
            self._db.invites[i] = invite.model_copy(update=update)
            self._db.status_writes += 1
            return True
        return False
