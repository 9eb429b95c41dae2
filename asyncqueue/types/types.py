"""Type definitions for queue configuration and state snapshots."""

from pydantic import BaseModel, ConfigDict, Field


class QueueConfig(BaseModel):
    """Configuration for an AsyncQueue.

    Attributes:
        concurrency: Maximum number of tasks running at once
        busy_delay: Seconds to wait before retrying admission when saturated
        paused: Whether the queue starts paused
    """

    model_config = ConfigDict(validate_assignment=True)

    concurrency: int = Field(default=1, ge=1, description="Maximum concurrent executions")
    busy_delay: float = Field(
        default=0.0, ge=0, description="Backoff in seconds when the queue is saturated"
    )
    paused: bool = Field(default=False, description="Start without admitting tasks")


class QueueStats(BaseModel):
    """Point-in-time snapshot of a queue."""

    pending: int
    running: int
    concurrency: int
    busy_delay: float
    paused: bool
    saturated: bool
    submitted: int = 0
    completed: int = 0
    failed: int = 0
    cancelled: int = 0
