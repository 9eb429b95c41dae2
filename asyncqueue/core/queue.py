"""Bounded-concurrency FIFO queue for asyncio."""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from collections.abc import Callable
from typing import Any

from ..errors import InvariantViolation
from ..types.types import QueueConfig, QueueStats
from ..utils.config import DEFAULT_ENV_PREFIX, load_queue_config
from .pending import PendingList
from .task import Task
from .wakeup import Wakeup

logger = logging.getLogger(__name__)


class AsyncQueue:
    """
    Runs submitted functions with at most ``concurrency`` in flight at once.

    Functions wait in submission order until a slot is free. Each submission
    returns an ``asyncio.Future`` that settles with the function's return
    value or the exception it raised. A failing function only rejects its own
    future; the queue keeps running.

    Usage:
        from asyncqueue import AsyncQueue

        queue = AsyncQueue(concurrency=2, busy_delay=0.2)

        async def fetch(url):
            ...

        results = await asyncio.gather(*(queue.submit(fetch, url) for url in urls))

    A paused queue accepts submissions but does not start them:

        queue = AsyncQueue(paused=True)
        future = queue.submit(fetch, url)
        queue.resume()
        await future
    """

    def __init__(self, concurrency: int = 1, busy_delay: float = 0.0, paused: bool = False):
        """
        Create a queue.

        Args:
            concurrency: Maximum number of functions running at once (>= 1)
            busy_delay: Seconds to wait before retrying admission while saturated
            paused: Start paused; nothing runs until resume() is called

        Raises:
            ValueError: If concurrency < 1 or busy_delay < 0
        """
        self._config = QueueConfig(concurrency=concurrency, busy_delay=busy_delay, paused=paused)
        self._paused = self._config.paused
        self._pending = PendingList()
        self._running_count = 0
        self._wakeup = Wakeup(self._poll)
        # Strong references so running executions are not garbage collected
        self._executions: set[asyncio.Task] = set()
        self._idle = asyncio.Event()
        self._idle.set()

        self._submitted = 0
        self._completed = 0
        self._failed = 0
        self._cancelled = 0

    @classmethod
    def from_config(cls, config: QueueConfig) -> AsyncQueue:
        return cls(
            concurrency=config.concurrency,
            busy_delay=config.busy_delay,
            paused=config.paused,
        )

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX, **overrides: Any) -> AsyncQueue:
        """Create a queue configured from ``<prefix>*`` environment variables.

        Keyword overrides (concurrency, busy_delay, paused) take precedence.
        """
        return cls.from_config(load_queue_config(prefix=prefix, **overrides))

    # -- Configuration -------------------------------------------------------

    @property
    def concurrency(self) -> int:
        return self._config.concurrency

    @concurrency.setter
    def concurrency(self, value: int) -> None:
        self._config.concurrency = value
        # Only future admissions are affected; raising the limit may free a slot now
        if not self._paused and self._pending and not self.is_saturated():
            self._wakeup.schedule(0)

    @property
    def busy_delay(self) -> float:
        return self._config.busy_delay

    @busy_delay.setter
    def busy_delay(self, value: float) -> None:
        self._config.busy_delay = value

    @property
    def paused(self) -> bool:
        return self._paused

    # -- Queries -------------------------------------------------------------

    @property
    def length(self) -> int:
        """Number of submitted tasks that have not been admitted yet."""
        return self._pending.length()

    @property
    def running(self) -> int:
        return self._running_count

    def is_saturated(self) -> bool:
        """Whether every concurrency slot is in use."""
        return self._running_count >= self._config.concurrency

    def stats(self) -> QueueStats:
        return QueueStats(
            pending=self._pending.length(),
            running=self._running_count,
            concurrency=self._config.concurrency,
            busy_delay=self._config.busy_delay,
            paused=self._paused,
            saturated=self.is_saturated(),
            submitted=self._submitted,
            completed=self._completed,
            failed=self._failed,
            cancelled=self._cancelled,
        )

    def __len__(self) -> int:
        return self._pending.length()

    def __repr__(self) -> str:
        return (
            f"AsyncQueue(concurrency={self.concurrency}, busy_delay={self.busy_delay}, "
            f"paused={self._paused}, running={self._running_count})"
        )

    # -- Operations ----------------------------------------------------------

    def submit(self, func: Callable[..., Any], /, *args: Any, **kwargs: Any) -> asyncio.Future:
        """Enqueue ``func(*args, **kwargs)`` to run when a slot is free.

        ``func`` may be a plain function or a coroutine function; awaitable
        return values are awaited. Must be called from a running event loop.

        Returns:
            Future resolving to the function's result, or raising its exception

        Raises:
            RuntimeError: If there is no running event loop
        """
        task = Task(func, args, kwargs)
        self._pending.append(task)
        self._submitted += 1
        self._idle.clear()

        if not self._paused:
            # Replaces a stale busy backoff so new work is looked at right away
            self._wakeup.schedule(0)

        return task.future

    def pause(self) -> None:
        """Stop admitting new tasks. Running tasks are not interrupted."""
        if not self._paused:
            logger.debug("Pausing queue with %d pending, %d running", len(self), self._running_count)
        self._paused = True
        self._wakeup.cancel()

    def resume(self, immediately: bool = True) -> None:
        """Start admitting tasks again.

        Args:
            immediately: Poll in this call if True, otherwise on the next loop turn
        """
        self._paused = False
        if not self._pending:
            return

        logger.debug("Resuming queue (immediately=%s)", immediately)
        if immediately:
            self._wakeup.cancel()
            self._poll()
        else:
            self._wakeup.schedule(0)

    async def join(self) -> None:
        """Wait until nothing is pending and nothing is running.

        A paused queue with pending tasks does not become idle until it is
        resumed and drained.
        """
        while self._pending or self._running_count:
            self._idle.clear()
            await self._idle.wait()

    # -- Scheduling ----------------------------------------------------------

    def _poll(self) -> None:
        """Admit the next pending task if the queue is running and not saturated."""
        if self._paused:
            return

        while True:
            if self.is_saturated():
                if self._config.busy_delay > 0 and self._pending:
                    logger.debug(
                        "Queue saturated (%d running), retrying in %ss",
                        self._running_count,
                        self._config.busy_delay,
                    )
                    self._wakeup.schedule(self._config.busy_delay)
                # Otherwise the next completion re-arms the poll
                return

            task = self._pending.pop_head()
            if task is None:
                self._notify_idle()
                return

            if task.cancelled:
                logger.debug("Dropping %r cancelled before admission", task)
                self._cancelled += 1
                continue
            break

        self._admit(task)
        self._reschedule()

    def _admit(self, task: Task) -> None:
        self._running_count += 1
        if self._running_count > self._config.concurrency:
            raise InvariantViolation(
                "Admitted past the concurrency limit",
                running=self._running_count,
                concurrency=self._config.concurrency,
            )

        logger.debug("Admitting %r (%d running)", task, self._running_count)
        execution = asyncio.create_task(self._execute(task))
        self._executions.add(execution)
        execution.add_done_callback(self._executions.discard)

    async def _execute(self, task: Task) -> None:
        try:
            try:
                result = task.func(*task.args, **task.kwargs)
                if inspect.isawaitable(result):
                    result = await result
            except asyncio.CancelledError:
                self._cancelled += 1
                task.cancel()
                raise
            except Exception as error:
                self._failed += 1
                task.reject(error)
            except BaseException as error:
                self._failed += 1
                task.reject(error)
                if isinstance(error, (KeyboardInterrupt, SystemExit)):
                    raise
            else:
                self._completed += 1
                task.resolve(result)
        finally:
            # Settled while still counted as running
            self._running_count -= 1
            self._check_invariants()
            self._reschedule()
            self._notify_idle()

    def _reschedule(self) -> None:
        """Arm another poll if a slot is free and work is waiting."""
        if self._paused or not self._pending or self.is_saturated():
            return
        self._wakeup.schedule(0)

    def _notify_idle(self) -> None:
        if not self._pending and self._running_count == 0:
            self._idle.set()

    def _check_invariants(self) -> None:
        if self._running_count < 0:
            raise InvariantViolation(
                "Running count went negative",
                running=self._running_count,
                concurrency=self._config.concurrency,
            )
        if not self._pending.is_consistent():
            raise InvariantViolation("Pending list head does not reach its tail")


def throttle(queue: AsyncQueue) -> Callable[[Callable[..., Any]], Callable[..., asyncio.Future]]:
    """Route every call of the decorated function through ``queue``.

    Example:
        api_queue = AsyncQueue(concurrency=4)

        @throttle(api_queue)
        async def fetch_user(user_id: str) -> dict:
            ...

        user = await fetch_user("u-1")
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., asyncio.Future]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> asyncio.Future:
            return queue.submit(func, *args, **kwargs)

        wrapper.queue = queue  # type: ignore[attr-defined]
        return wrapper

    return decorator
