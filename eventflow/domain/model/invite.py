"""Invite entity.

An invite offers one email address a role on one event's staff roster.
The invite token in the accept-URL is the only way to resolve it.
"""

from datetime import datetime, timezone

from pydantic import Field

from eventflow.domain.model.common import DomainModel
from eventflow.domain.model.event import EventSummary
from eventflow.domain.value import (
    EventId,
    InviteId,
    InviteStatus,
    InviteToken,
    UserId,
)


class Invite(DomainModel):
    """Collaboration invite (one row per invited collaborator).

    Business rules:
    - event_id, email, role and invite_token never change after creation
    - status starts PENDING and moves at most once, to ACCEPTED or DECLINED
    - accepted_at and user_id are set together, exactly once, on acceptance
    - role is kept as the raw stored string so unknown values still load
    """

    id: InviteId
    event_id: EventId
    email: str
    role: str
    invite_token: InviteToken
    status: InviteStatus = InviteStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    accepted_at: datetime | None = None
    user_id: UserId | None = None

    # Joined from the events table on lookup, never written back
    event: EventSummary | None = None
