"""Transaction manager interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups several repository calls into one atomic unit.

    Usage:
        async with transaction_manager.atomic():
            await request_repository.transition_pending(...)
            await mentorship_repository.create_active_if_absent(...)
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic unit; any exception inside rolls it back."""
        pass
