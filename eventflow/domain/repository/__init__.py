"""Repository interfaces for EventFlow domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from eventflow.domain.repository.event import EventRepository
from eventflow.domain.repository.invite import InviteRepository

__all__ = [
    "EventRepository",
    "InviteRepository",
]
