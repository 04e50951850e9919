# link_crawler/crawler/pool.py
"""
Worker pool: runs crawl tasks concurrently on the event loop and shuts them down gracefully.
"""
from __future__ import annotations

import asyncio
from typing import Any, Coroutine, Set, TypeVar

from link_crawler.exceptions import PoolClosedError
from link_crawler.logger import logger

T = TypeVar("T")


class WorkerPool:
    """Growth-on-demand pool of asyncio tasks.

    Submission schedules the coroutine at once and never waits, so a task
    may submit children and then block on them without deadlocking.
    """

    def __init__(self, name: str = "crawl") -> None:
        self.name = name
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False
        self._shutdown_done = False
        self._submitted = 0
        self.logger = logger

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        return sum(1 for t in self._tasks if not t.done())

    @property
    def submitted(self) -> int:
        return self._submitted

    def submit(self, coro: Coroutine[Any, Any, T]) -> asyncio.Task[T]:
        """Schedule *coro* and return its task handle."""
        if self._closed:
            coro.close()
            raise PoolClosedError(f"pool {self.name!r} is shut down")
        self._submitted += 1
        task = asyncio.get_running_loop().create_task(coro, name=f"{self.name}-{self._submitted}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def shutdown(self, grace: float = 10.0) -> int:
        """
        Stop accepting work, wait up to *grace* seconds, then cancel what is left.

        Safe to call more than once; only the first call does anything.
        Returns the number of tasks that had to be cancelled.
        """
        self._closed = True
        if self._shutdown_done:
            return 0
        self._shutdown_done = True

        current = asyncio.current_task()
        outstanding = {t for t in self._tasks if t is not current and not t.done()}
        if not outstanding:
            return 0

        if grace > 0:
            _, outstanding = await asyncio.wait(outstanding, timeout=grace)
        if not outstanding:
            return 0

        self.logger.debug("Pool %s: cancelling %d unfinished task(s)", self.name, len(outstanding))
        for task in outstanding:
            task.cancel()
        await asyncio.gather(*outstanding, return_exceptions=True)
        return len(outstanding)
