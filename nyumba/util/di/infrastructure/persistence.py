"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from nyumba.config import Settings
from nyumba.domain.repository import (
    AccountRepository,
    MentorshipRepository,
    MentorshipRequestRepository,
    MessageRepository,
    RateLimitRepository,
    TransactionManager,
)
from nyumba.persistence.database import create_engine, create_session_factory
from nyumba.persistence.repository import (
    PostgresAccountRepository,
    PostgresMentorshipRepository,
    PostgresMentorshipRequestRepository,
    PostgresMessageRepository,
    PostgresRateLimitRepository,
    PostgresTransactionManager,
)
from nyumba.util.di.base import ProviderBase
from nyumba.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The whole request is one transaction: committed at the end if no
        exception occurred, rolled back otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide savepoint-based transaction manager."""
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        """Provide Account repository."""
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_mentorship_request_repository(
        self, session: AsyncSession
    ) -> MentorshipRequestRepository:
        """Provide MentorshipRequest repository."""
        return PostgresMentorshipRequestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_mentorship_repository(self, session: AsyncSession) -> MentorshipRepository:
        """Provide Mentorship repository."""
        return PostgresMentorshipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, session: AsyncSession) -> MessageRepository:
        """Provide Message repository."""
        return PostgresMessageRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_rate_limit_repository(self, session: AsyncSession) -> RateLimitRepository:
        """Provide RateLimit repository."""
        return PostgresRateLimitRepository(session)
