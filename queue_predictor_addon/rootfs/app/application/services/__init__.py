"""Application services for queue predictions.

These services orchestrate domain logic with infrastructure adapters
to fulfill use cases.
"""

from .queue_application_service import DEFAULT_FORM_VALUES, QueueApplicationService

__all__ = [
    "DEFAULT_FORM_VALUES",
    "QueueApplicationService",
]
