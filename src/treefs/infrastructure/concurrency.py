"""Executor offloading and bounded fan-out for blocking filesystem calls."""

from __future__ import annotations

import asyncio
import functools
from typing import Any, Awaitable, Callable, Iterable, TypeVar

from treefs.infrastructure.config import MAX_CONCURRENT_IO

T = TypeVar("T")
R = TypeVar("R")


async def run_blocking(fn: Callable[..., R], *args: Any, **kwargs: Any) -> R:
    """Run a blocking OS call in the loop's default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(fn, *args, **kwargs))


async def gather_bounded(
    func: Callable[[T], Awaitable[R]],
    items: Iterable[T],
    limit: int | None = None,
) -> list[R]:
    """Run func over items concurrently, at most `limit` in flight at once.

    One task is spawned per item and all are joined before returning.
    Results keep the order of `items`. The first exception propagates.
    """
    semaphore = asyncio.Semaphore(limit or MAX_CONCURRENT_IO)

    async def run_one(item: T) -> R:
        async with semaphore:
            return await func(item)

    return list(await asyncio.gather(*(run_one(item) for item in items)))
