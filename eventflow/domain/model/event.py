"""Event entity.

Events are owned elsewhere in the application. The invite lifecycle only
reads them for display.
"""

import datetime

from eventflow.domain.model.common import DomainModel
from eventflow.domain.value import EventId


class EventSummary(DomainModel):
    """Event fields joined onto an invite lookup."""

    name: str
    date: datetime.date | None = None
    venue_name: str | None = None

    def long_date(self) -> str:
        """Long-form date, e.g. ``Saturday, 1 March 2025``. Empty when unset."""
        if self.date is None:
            return ""
        return f"{self.date:%A}, {self.date.day} {self.date:%B} {self.date.year}"


class Event(DomainModel):
    """Event an invite grants access to."""

    id: EventId
    name: str
    date: datetime.date | None = None
    venue_name: str | None = None

    def summary(self) -> EventSummary:
        """Display fields of this event."""
        return EventSummary(name=self.name, date=self.date, venue_name=self.venue_name)
