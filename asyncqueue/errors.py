"""Exceptions raised by asyncqueue itself."""


class InvariantViolation(AssertionError):
    """
    Exception raised when the scheduler's bookkeeping is inconsistent.

    This indicates a bug in the queue, not in a submitted task. Task failures
    are never raised from queue operations; they reject the task's future.
    """

    def __init__(self, reason: str, running: int | None = None, concurrency: int | None = None):
        self.reason = reason
        self.running = running
        self.concurrency = concurrency
        message = reason
        if running is not None:
            message += f" (running={running}, concurrency={concurrency})"
        super().__init__(message)
