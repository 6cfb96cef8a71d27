"""
Broadcast Dispatcher - pushes message.created events to a conversation's
live subscribers.

Delivery is best effort: the payload is serialized once, the subscriber set
is snapshotted, and every subscriber gets one concurrent send bounded by a
timeout. Closed, failing or slow connections are skipped and stay registered;
only their own disconnect removes them.
"""

import asyncio
import logging

from rtchat.application.dto.message import MessageCreatedEvent, MessageResource
from rtchat.domain.entities.message import Message
from rtchat.domain.ports.realtime import SubscriberConnection, SubscriptionRegistry
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.observability.metrics import DeliveryOutcome, increment_broadcast_delivery

logger = logging.getLogger(__name__)


class BroadcastDispatcher:
    def __init__(self, registry: SubscriptionRegistry, send_timeout: float):
        self._registry = registry
        self._send_timeout = send_timeout

    @staticmethod
    def serialize(message: Message) -> str:
        return MessageCreatedEvent(
            data=MessageResource.from_entity(message)
        ).model_dump_json()

    async def broadcast(self, conversation_id: ConversationId, message: Message) -> int:
        """Returns the number of subscribers the event was delivered to."""
        payload = self.serialize(message)
        subscribers = await self._registry.subscribers_of(conversation_id)
        if not subscribers:
            return 0

        outcomes = await asyncio.gather(
            *(self._deliver(connection, payload) for connection in subscribers)
        )
        delivered = outcomes.count(DeliveryOutcome.DELIVERED)
        for outcome in (
            DeliveryOutcome.DELIVERED,
            DeliveryOutcome.SKIPPED,
            DeliveryOutcome.FAILED,
        ):
            increment_broadcast_delivery(outcome, outcomes.count(outcome))

        logger.debug(
            "Broadcast message %s to %d/%d subscriber(s) of conversation %s",
            message.id,
            delivered,
            len(subscribers),
            conversation_id,
        )
        return delivered

    async def _deliver(self, connection: SubscriberConnection, payload: str) -> str:
        if not connection.is_open:
            return DeliveryOutcome.SKIPPED
        try:
            await asyncio.wait_for(connection.send_text(payload), self._send_timeout)
        except Exception as e:
            logger.debug(f"Dropped delivery to subscriber: {type(e).__name__}: {e}")
            return DeliveryOutcome.FAILED
        return DeliveryOutcome.DELIVERED
