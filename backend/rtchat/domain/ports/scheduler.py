"""
Scheduler port - background and delayed task execution.

Callers hand over a zero-argument coroutine function and get back a handle
they may cancel. They never see the underlying task or timer.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable

TaskFactory = Callable[[], Awaitable[None]]


class TaskHandle(ABC):
    @abstractmethod
    def cancel(self) -> bool:
        """Cancel the task if it has not finished. Returns True if cancelled."""
        ...

    @abstractmethod
    def done(self) -> bool: ...


class TaskScheduler(ABC):
    @abstractmethod
    def spawn(self, factory: TaskFactory, *, name: str) -> TaskHandle:
        """Run factory() in the background, starting now."""
        ...

    @abstractmethod
    def schedule(self, delay: float, factory: TaskFactory, *, name: str) -> TaskHandle:
        """Run factory() in the background once delay seconds have elapsed."""
        ...

    @abstractmethod
    async def aclose(self) -> None:
        """Cancel every pending task and refuse new ones."""
        ...
