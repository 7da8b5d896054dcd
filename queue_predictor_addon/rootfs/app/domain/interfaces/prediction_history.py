"""Prediction history interface.

Contract for keeping a bounded log of past prediction runs.
"""

from abc import ABC, abstractmethod

from domain.value_objects import HistoryEntry


class IPredictionHistory(ABC):
    """Contract for prediction run history operations.

    The history keeps the most recent runs, newest first. When full,
    adding a run evicts the oldest one.
    """

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Maximum number of runs retained."""

    @abstractmethod
    async def add(self, entry: HistoryEntry) -> None:
        """Record a run at the front of the history.

        Args:
            entry: The run to record
        """
        pass

    @abstractmethod
    async def get_all(self, limit: int | None = None) -> tuple[HistoryEntry, ...]:
        """Get retained runs, newest first.

        Args:
            limit: If provided, return at most this many runs

        Returns:
            Tuple of history entries

        Raises:
            ValueError: If limit is negative
        """
        pass

    @abstractmethod
    async def size(self) -> int:
        """Get the number of retained runs.

        Returns:
            Number of history entries
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove all runs from the history."""
        pass
