__version__ = "0.1.0"

from .core.pending import PendingList
from .core.queue import AsyncQueue, throttle
from .core.task import Task
from .errors import InvariantViolation
from .runtime.batch import gather, submit_many
from .runtime.client import ThrottledClient
from .types.types import QueueConfig, QueueStats
from .utils.config import load_queue_config

__all__ = [
    "AsyncQueue",
    "throttle",
    "Task",
    "PendingList",
    "QueueConfig",
    "QueueStats",
    "load_queue_config",
    "InvariantViolation",
    "submit_many",
    "gather",
    "ThrottledClient",
]
