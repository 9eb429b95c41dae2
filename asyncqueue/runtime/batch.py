"""Batch submission utilities."""

import asyncio
from collections.abc import Callable, Iterable
from typing import Any

from ..core.queue import AsyncQueue


def submit_many(
    queue: AsyncQueue,
    func: Callable[..., Any],
    items: Iterable[Any],
) -> list[asyncio.Future]:
    """Submit ``func(item)`` for every item, in iteration order.

    Args:
        queue: Queue to submit to
        func: Function called once per item
        items: Arguments, one per call. Tuples are unpacked as positional arguments.

    Returns:
        List of futures in the same order as ``items``

    Example:
        futures = submit_many(queue, fetch, ["a", "b", "c"])
        first = await futures[0]
    """
    futures: list[asyncio.Future] = []
    for item in items:
        args = item if isinstance(item, tuple) else (item,)
        futures.append(queue.submit(func, *args))
    return futures


async def gather(
    queue: AsyncQueue,
    func: Callable[..., Any],
    items: Iterable[Any],
    return_exceptions: bool = False,
) -> list[Any]:
    """Submit ``func(item)`` for every item and wait for all results.

    Results keep submission order regardless of completion order. With
    ``return_exceptions`` the exceptions are returned in place of results;
    otherwise the first failure is raised (the remaining tasks still run).
    """
    futures = submit_many(queue, func, items)
    return await asyncio.gather(*futures, return_exceptions=return_exceptions)
