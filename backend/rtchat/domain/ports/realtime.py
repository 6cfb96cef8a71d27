"""
Realtime ports - live subscriber connections and the registry that maps
conversations to them.

Connections are owned by the transport layer. The registry only references
them; only the broadcast dispatcher writes to them.
"""

from abc import ABC, abstractmethod

from rtchat.domain.value_objects.conversation_id import ConversationId


class SubscriberConnection(ABC):
    """A handle to one open realtime connection."""

    @property
    @abstractmethod
    def is_open(self) -> bool: ...

    @abstractmethod
    async def send_text(self, payload: str) -> None: ...


class SubscriptionRegistry(ABC):
    @abstractmethod
    async def subscribe(
        self, conversation_id: ConversationId, connection: SubscriberConnection
    ) -> None:
        """Idempotently add connection to the conversation's subscriber set."""
        ...

    @abstractmethod
    async def unsubscribe(
        self, conversation_id: ConversationId, connection: SubscriberConnection
    ) -> None:
        """Remove connection; drop the conversation entry once it is empty."""
        ...

    @abstractmethod
    async def subscribers_of(
        self, conversation_id: ConversationId
    ) -> frozenset[SubscriberConnection]:
        """Snapshot of the current subscribers (empty if none)."""
        ...
