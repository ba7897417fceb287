"""Rate limit repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from nyumba.domain.value import RateLimitKey


class RateLimitRepository(ABC):
    """Shared sliding-window counter store.

    Counters live in the database so limits hold across processes.
    """

    @abstractmethod
    async def hit_if_under(
        self, key: RateLimitKey, limit: int, window_start: datetime, now: datetime
    ) -> bool:
        """Record an event unless the key is already at its limit.

        Counting and recording happen under a per-key lock so two
        concurrent callers cannot both take the last slot.

        Args:
            key: Counter key
            limit: Maximum events inside the window
            window_start: Events at or before this instant are ignored
            now: Timestamp for the new event

        Returns:
            True if the event was recorded, False if the limit was reached
        """
        pass

    @abstractmethod
    async def count_since(self, key: RateLimitKey, window_start: datetime) -> int:
        """Count events for a key after ``window_start``."""
        pass

    @abstractmethod
    async def oldest_since(
        self, key: RateLimitKey, window_start: datetime
    ) -> Optional[datetime]:
        """Timestamp of the earliest event for a key after ``window_start``."""
        pass
