"""Path watcher: calls back with filesystem changes under a path."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Awaitable, Callable

from watchfiles import awatch

from treefs.infrastructure.logger import logger

ChangeList = list[tuple[str, str]]
OnChange = Callable[[ChangeList], Awaitable[None] | None]


class PathWatcher:
    """Watches a file or directory tree and reports batched changes.

    Each batch is a list of (change, path) pairs where change is one of
    "added", "modified" or "deleted". The callback may be sync or async.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path).absolute()
        self._running = False
        self._stop_event: asyncio.Event | None = None
        self._watch_task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self, on_change: OnChange) -> None:
        if self._running:
            logger.debug("Path watcher already running, skipping duplicate start", path=str(self._path))
            return
        self._running = True
        self._stop_event = asyncio.Event()
        self._watch_task = asyncio.create_task(self._watch_loop(on_change))
        logger.info("Path watcher started", path=str(self._path))

    def stop(self) -> None:
        self._running = False
        if self._stop_event:
            self._stop_event.set()
        if self._watch_task:
            self._watch_task.cancel()
            self._watch_task = None

    async def _watch_loop(self, on_change: OnChange) -> None:
        try:
            async for changes in awatch(self._path, stop_event=self._stop_event):
                if not self._running:
                    break
                batch = sorted((change.name, path) for change, path in changes)
                try:
                    result = on_change(batch)
                    if asyncio.iscoroutine(result):
                        await result
                except Exception:
                    logger.exception("Path watcher callback failed", path=str(self._path))
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("Path watcher error", path=str(self._path))
        finally:
            self._running = False
