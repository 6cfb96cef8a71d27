"""Realtime infrastructure - single-process subscription registry."""

from rtchat.infrastructure.realtime.in_memory_subscription_registry import (
    InMemorySubscriptionRegistry,
)

__all__ = ["InMemorySubscriptionRegistry"]
