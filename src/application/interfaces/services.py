"""
Service interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod


class TransactionServiceInterface(ABC):
    """Unit of work boundary shared by the repositories of one use case."""

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the current transaction."""
        pass
