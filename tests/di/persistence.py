"""Mock persistence providers for testing."""

from dishka import Scope, provide

from nyumba.domain.repository import (
    AccountRepository,
    MentorshipRepository,
    MentorshipRequestRepository,
    MessageRepository,
    RateLimitRepository,
    TransactionManager,
)
from nyumba.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryMentorshipRepository,
    InMemoryMentorshipRequestRepository,
    InMemoryMessageRepository,
    InMemoryRateLimitRepository,
    InMemoryStore,
    InMemoryTransactionManager,
)
from nyumba.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so data written in one request is visible in
    the next; each test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, store: InMemoryStore) -> TransactionManager:
        """Provide snapshot/restore transaction manager."""
        return InMemoryTransactionManager(store)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, store: InMemoryStore) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_mentorship_request_repository(
        self, store: InMemoryStore
    ) -> MentorshipRequestRepository:
        """Provide in-memory mentorship request repository."""
        return InMemoryMentorshipRequestRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_mentorship_repository(self, store: InMemoryStore) -> MentorshipRepository:
        """Provide in-memory mentorship repository."""
        return InMemoryMentorshipRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, store: InMemoryStore) -> MessageRepository:
        """Provide in-memory message repository."""
        return InMemoryMessageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_rate_limit_repository(self, store: InMemoryStore) -> RateLimitRepository:
        """Provide in-memory rate limit repository."""
        return InMemoryRateLimitRepository(store)
