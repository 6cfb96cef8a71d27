"""
asyncio implementation of the TaskScheduler port.

Delays are timer based (asyncio.sleep inside a task), so a pending deferred
task never occupies a worker thread. Failures of background tasks are logged
and counted; they never reach the request that scheduled them.
"""

import asyncio
import logging

from rtchat.domain.ports.scheduler import TaskFactory, TaskHandle, TaskScheduler
from rtchat.observability.metrics import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)


class AsyncioTaskHandle(TaskHandle):
    def __init__(self, task: asyncio.Task):
        self._task = task

    def cancel(self) -> bool:
        if self._task.done():
            return False
        return self._task.cancel()

    def done(self) -> bool:
        return self._task.done()


class AsyncioTaskScheduler(TaskScheduler):
    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def spawn(self, factory: TaskFactory, *, name: str) -> AsyncioTaskHandle:
        return self.schedule(0, factory, name=name)

    def schedule(
        self, delay: float, factory: TaskFactory, *, name: str
    ) -> AsyncioTaskHandle:
        if self._closed:
            raise RuntimeError("Scheduler is closed")
        task = asyncio.get_running_loop().create_task(
            self._run(delay, factory), name=name
        )
        # Keep a strong reference until the task finishes
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return AsyncioTaskHandle(task)

    async def aclose(self) -> None:
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("Task scheduler closed, cancelled %d pending task(s)", len(tasks))

    async def _run(self, delay: float, factory: TaskFactory) -> None:
        if delay > 0:
            await asyncio.sleep(delay)
        await factory()

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.debug("Background task %s cancelled", task.get_name())
            return
        exc = task.exception()
        if exc is not None:
            increment_error(MetricsErrorType.BACKGROUND_TASK_FAILED)
            logger.error(
                "Background task %s failed: %s",
                task.get_name(),
                exc,
                exc_info=(type(exc), exc, exc.__traceback__),
            )
