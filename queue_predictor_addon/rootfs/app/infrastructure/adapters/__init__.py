"""Infrastructure adapters for queue predictions.

These adapters implement domain interfaces on top of concrete storage.
"""

from .memory_prediction_history import DEFAULT_HISTORY_CAPACITY, MemoryPredictionHistory

__all__ = [
    "DEFAULT_HISTORY_CAPACITY",
    "MemoryPredictionHistory",
]
