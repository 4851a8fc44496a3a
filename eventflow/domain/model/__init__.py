"""Domain model entities for EventFlow."""

from eventflow.domain.model.event import Event, EventSummary
from eventflow.domain.model.invite import Invite

__all__ = [
    "Event",
    "EventSummary",
    "Invite",
]
