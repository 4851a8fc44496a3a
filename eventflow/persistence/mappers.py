"""Mappers between database rows and domain models.

Rows come from ``result.mappings()``; invite lookups may carry the joined
event columns as ``event_name``, ``event_date`` and ``event_venue_name``.
"""

from typing import Any, Dict
from uuid import UUID

from eventflow.domain.model import Event, EventSummary, Invite
from eventflow.domain.value import (
    EventId,
    InviteId,
    InviteStatus,
    InviteToken,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model.

    Args:
        row: Database row as dict

    Returns:
        Event domain model
    """
    return Event(
        id=EventId(_uuid(row["id"])),
        name=row["name"],
        date=row.get("date"),
        venue_name=row.get("venue_name"),
    )


def event_to_dict(event: Event) -> Dict[str, Any]:
    """Convert Event domain model to database dict."""
    return event.model_dump()


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict, optionally with joined event columns

    Returns:
        Invite domain model
    """
    event = None
    if row.get("event_name") is not None:
        event = EventSummary(
            name=row["event_name"],
            date=row.get("event_date"),
            venue_name=row.get("event_venue_name"),
        )

    return Invite(
        id=InviteId(_uuid(row["id"])),
        event_id=EventId(_uuid(row["event_id"])),
        email=row["email"],
        role=row["role"],
        invite_token=InviteToken(root=row["invite_token"]),
        status=InviteStatus(row["status"]),
        created_at=row["created_at"],
        accepted_at=row.get("accepted_at"),
        user_id=UserId(_uuid(row["user_id"])) if row.get("user_id") else None,
        event=event,
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    The joined event is dropped; it lives in its own table.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion
    """
    data = invite.model_dump(exclude={"event"})
    data["invite_token"] = invite.invite_token.root
    data["status"] = invite.status.value
    return data
