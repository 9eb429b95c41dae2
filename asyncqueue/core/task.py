"""Task record for a single submitted unit of work."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any


class Task:
    """A submitted function, its bound arguments, and the future it settles.

    Tasks are linked intrusively through ``next`` while they sit in a
    PendingList. Once popped, ``next`` is cleared and the task belongs to the
    execution that runs it.
    """

    __slots__ = ("func", "args", "kwargs", "future", "next")

    def __init__(
        self,
        func: Callable[..., Any],
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
        future: asyncio.Future | None = None,
    ):
        self.func = func
        self.args = args
        self.kwargs = kwargs or {}
        self.future: asyncio.Future = (
            future if future is not None else asyncio.get_running_loop().create_future()
        )
        self.next: Task | None = None

    @property
    def cancelled(self) -> bool:
        return self.future.cancelled()

    def resolve(self, value: Any) -> None:
        """Settle the future with a result (no-op if already done)."""
        if not self.future.done():
            self.future.set_result(value)

    def reject(self, error: BaseException) -> None:
        """Settle the future with an exception (no-op if already done)."""
        if self.future.done():
            return
        if isinstance(error, StopIteration):
            # Futures refuse StopIteration
            wrapped = RuntimeError(f"{type(error).__name__} raised by task function")
            wrapped.__cause__ = error
            error = wrapped
        self.future.set_exception(error)

    def cancel(self) -> None:
        if not self.future.done():
            self.future.cancel()

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"Task(func={name}, done={self.future.done()})"
