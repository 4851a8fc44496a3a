"""Mock persistence providers for testing."""

from dishka import Scope, provide

from eventflow.domain.repository import EventRepository, InviteRepository
from eventflow.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryEventRepository,
    InMemoryInviteRepository,
)
from eventflow.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The database is APP-scoped so rows survive across requests within one
    container; each test builds its own container for isolation.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory database."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, database: InMemoryDatabase) -> EventRepository:
        """Provide in-memory event repository."""
        return InMemoryEventRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, database: InMemoryDatabase) -> InviteRepository:
        """Provide in-memory invite repository."""
        return InMemoryInviteRepository(database)
