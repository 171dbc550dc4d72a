"""
Fire-and-forget background tasks.

Tasks are tracked so shutdown can wait for them. A failing task is logged
and never reaches the request that started it.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Set

from src.app.services.background import BackgroundRunner

logger = logging.getLogger(__name__)


class BackgroundTaskRunner(BackgroundRunner):
    def __init__(self):
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def run(self, fn: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> asyncio.Task:
        task = asyncio.create_task(self._contain(fn, *args, **kwargs))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _contain(self, fn: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> None:
        try:
            await fn(*args, **kwargs)
        except Exception:
            logger.exception(f"Background task {getattr(fn, '__name__', fn)!r} failed")

    async def wait(self, timeout: float) -> bool:
        """
        Wait for outstanding tasks.

        Returns False when some tasks were still running at the deadline;
        those are left running, not cancelled.
        """
        if not self._tasks:
            return True

        logger.info(f"Completing {len(self._tasks)} background task(s)")
        _, still_running = await asyncio.wait(set(self._tasks), timeout=timeout)
        if still_running:
            logger.warning(f"Abandoning {len(still_running)} background task(s) after {timeout}s")
            return False
        return True
