"""In-memory rate limit repository for testing."""

from datetime import datetime
from typing import Optional

from nyumba.domain.repository.rate_limit import RateLimitRepository
from nyumba.domain.value import RateLimitKey

from .store import InMemoryStore


class InMemoryRateLimitRepository(RateLimitRepository):
    """In-memory implementation of RateLimitRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def hit_if_under(
        self, key: RateLimitKey, limit: int, window_start: datetime, now: datetime
    ) -> bool:
        """Record an event unless the key is already at its limit."""
        if await self.count_since(key, window_start) >= limit:
            return False
        self.store.rate_limit_events.append((str(key), now))
        return True

    async def count_since(self, key: RateLimitKey, window_start: datetime) -> int:
        """Count events for a key after ``window_start``."""
        return sum(
            1
            for event_key, occurred_at in self.store.rate_limit_events
            if event_key == str(key) and occurred_at > window_start
        )

    async def oldest_since(
        self, key: RateLimitKey, window_start: datetime
    ) -> Optional[datetime]:
        """Timestamp of the earliest event for a key after ``window_start``."""
        return min(
            (
                occurred_at
                for event_key, occurred_at in self.store.rate_limit_events
                if event_key == str(key) and occurred_at > window_start
            ),
            default=None,
        )
