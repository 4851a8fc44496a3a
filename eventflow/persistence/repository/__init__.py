"""PostgreSQL repository implementations."""

from eventflow.persistence.repository.event import PostgresEventRepository
from eventflow.persistence.repository.invite import PostgresInviteRepository

__all__ = [
    "PostgresEventRepository",
    "PostgresInviteRepository",
]
