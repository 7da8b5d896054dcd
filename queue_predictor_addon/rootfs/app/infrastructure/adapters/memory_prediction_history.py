"""In-memory implementation of prediction history.

Infrastructure adapter for keeping recent prediction runs in memory.
"""

import logging
from collections import deque

from domain.interfaces import IPredictionHistory
from domain.value_objects import HistoryEntry

_LOGGER = logging.getLogger(__name__)

DEFAULT_HISTORY_CAPACITY = 8


class MemoryPredictionHistory(IPredictionHistory):
    """In-memory implementation of prediction history.

    This adapter stores runs in a deque (double-ended queue) with a
    maximum length. New runs are inserted at the front; when the history
    is full the oldest run falls off the back.

    Attributes:
        capacity: Maximum number of runs to retain
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        """Initialize the prediction history.

        Args:
            capacity: Maximum number of runs to retain (default: 8)

        Raises:
            ValueError: If capacity is less than 1
        """
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")

        self._capacity = capacity
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)
        _LOGGER.info("Initialized MemoryPredictionHistory with capacity=%d", capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    async def add(self, entry: HistoryEntry) -> None:
        """Record a run at the front of the history.

        Args:
            entry: The run to record
        """
        if len(self._entries) == self._capacity:
            evicted = self._entries[-1]
            _LOGGER.debug(
                "History full, evicting run of %s from %s",
                evicted.submission.display_name,
                evicted.timestamp.isoformat(),
            )

        self._entries.appendleft(entry)

        _LOGGER.debug(
            "Recorded run of %s (history size: %d)",
            entry.submission.display_name,
            len(self._entries),
        )

    async def get_all(self, limit: int | None = None) -> tuple[HistoryEntry, ...]:
        """Get retained runs, newest first.

        Args:
            limit: If provided, return at most this many runs

        Returns:
            Tuple of history entries

        Raises:
            ValueError: If limit is negative
        """
        if limit is None:
            return tuple(self._entries)
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        return tuple(self._entries)[:limit]

    async def size(self) -> int:
        """Get the number of retained runs.

        Returns:
            Number of history entries
        """
        return len(self._entries)

    async def clear(self) -> None:
        """Remove all runs from the history."""
        count_before = len(self._entries)
        self._entries.clear()
        _LOGGER.info("Cleared prediction history (%d runs removed)", count_before)
