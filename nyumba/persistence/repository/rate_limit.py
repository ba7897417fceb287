"""PostgreSQL implementation of RateLimit repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, func, insert, select

from nyumba.domain.repository import RateLimitRepository
from nyumba.domain.value import RateLimitKey
from nyumba.persistence.repository.base import PostgresRepository
from nyumba.persistence.tables import rate_limit_events_table

events = rate_limit_events_table


class PostgresRateLimitRepository(PostgresRepository, RateLimitRepository):
    """Sliding-window counters in ``rate_limit_events``.

    A transaction-scoped advisory lock on the key serializes concurrent
    callers for the same actor and action.
    """

    async def hit_if_under(
        self, key: RateLimitKey, limit: int, window_start: datetime, now: datetime
    ) -> bool:
        """Record an event unless the key is already at its limit."""
        await self._execute(
            select(func.pg_advisory_xact_lock(func.hashtext(str(key))))
        )

        # Expired events never count again
        await self._execute(
            delete(events).where(
                and_(events.c.key == str(key), events.c.occurred_at <= window_start)
            )
        )

        if await self.count_since(key, window_start) >= limit:
            return False

        await self._execute(insert(events).values(key=str(key), occurred_at=now))
        return True

    async def count_since(self, key: RateLimitKey, window_start: datetime) -> int:
        """Count events for a key after ``window_start``."""
        stmt = select(func.count(events.c.id)).where(
            and_(events.c.key == str(key), events.c.occurred_at > window_start)
        )
        result = await self._execute(stmt)
        return result.scalar_one()

    async def oldest_since(
        self, key: RateLimitKey, window_start: datetime
    ) -> Optional[datetime]:
        """Timestamp of the earliest event for a key after ``window_start``."""
        stmt = select(func.min(events.c.occurred_at)).where(
            and_(events.c.key == str(key), events.c.occurred_at > window_start)
        )
        result = await self._execute(stmt)
        return result.scalar_one()
