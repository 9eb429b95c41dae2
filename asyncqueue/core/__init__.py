from .pending import PendingList
from .queue import AsyncQueue, throttle
from .task import Task
from .wakeup import Wakeup

__all__ = [
    "AsyncQueue",
    "PendingList",
    "Task",
    "Wakeup",
    "throttle",
]
