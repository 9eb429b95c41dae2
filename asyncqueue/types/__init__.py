from .types import QueueConfig, QueueStats

__all__ = [
    "QueueConfig",
    "QueueStats",
]
