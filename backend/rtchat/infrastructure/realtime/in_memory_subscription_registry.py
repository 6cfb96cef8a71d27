"""
In-memory implementation of SubscriptionRegistry.

Single-process only. A lock-protected map of conversation id to the set of
live connections. Entries are removed as soon as their set becomes empty, so
conversations without subscribers hold no memory.
"""

import asyncio
import logging

from rtchat.domain.ports.realtime import SubscriberConnection, SubscriptionRegistry
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.observability.metrics import set_active_subscriptions

logger = logging.getLogger(__name__)


class InMemorySubscriptionRegistry(SubscriptionRegistry):
    def __init__(self) -> None:
        self._subscribers: dict[ConversationId, set[SubscriberConnection]] = {}
        self._lock = asyncio.Lock()

    async def subscribe(
        self, conversation_id: ConversationId, connection: SubscriberConnection
    ) -> None:
        async with self._lock:
            self._subscribers.setdefault(conversation_id, set()).add(connection)
            total = self._count()
        set_active_subscriptions(total)
        logger.debug("Subscribed connection to conversation %s", conversation_id)

    async def unsubscribe(
        self, conversation_id: ConversationId, connection: SubscriberConnection
    ) -> None:
        async with self._lock:
            connections = self._subscribers.get(conversation_id)
            if connections is None:
                return
            connections.discard(connection)
            if not connections:
                del self._subscribers[conversation_id]
            total = self._count()
        set_active_subscriptions(total)
        logger.debug("Unsubscribed connection from conversation %s", conversation_id)

    async def subscribers_of(
        self, conversation_id: ConversationId
    ) -> frozenset[SubscriberConnection]:
        # Snapshot without holding the lock during network sends
        async with self._lock:
            return frozenset(self._subscribers.get(conversation_id, ()))

    def _count(self) -> int:
        return sum(len(connections) for connections in self._subscribers.values())
