"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .event import InMemoryEventRepository
from .invite import InMemoryInviteRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryEventRepository",
    "InMemoryInviteRepository",
]
