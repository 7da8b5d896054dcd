"""Domain interfaces for queue predictions.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .prediction_history import IPredictionHistory

__all__ = [
    "IPredictionHistory",
]
