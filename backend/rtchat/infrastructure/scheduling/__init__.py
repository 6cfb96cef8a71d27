"""Background task execution on the running asyncio event loop."""

from rtchat.infrastructure.scheduling.asyncio_scheduler import (
    AsyncioTaskHandle,
    AsyncioTaskScheduler,
)

__all__ = ["AsyncioTaskHandle", "AsyncioTaskScheduler"]
