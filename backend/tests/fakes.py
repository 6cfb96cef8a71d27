"""Test doubles and builders shared by the unit tests."""

import asyncio

from rtchat.application.services import AutoReplyService, BroadcastDispatcher
from rtchat.domain.ports.realtime import SubscriberConnection
from rtchat.infrastructure.persistence import (
    InMemoryConversationRepository,
    InMemoryStore,
    InMemoryUserRepository,
    demo_conversations,
    demo_users,
)
from rtchat.infrastructure.realtime import InMemorySubscriptionRegistry
from rtchat.infrastructure.scheduling import AsyncioTaskScheduler
from rtchat.utils.keyed_lock import KeyedLock

REPLY_TEXT = "AI: I'm sorry, I don't understand. Can you please rephrase that?"


class FakeConnection(SubscriberConnection):
    """Records payloads; can be closed, failing, slow or stalled."""

    def __init__(
        self,
        open: bool = True,
        fail: bool = False,
        stall: bool = False,
        send_delay: float = 0,
    ):
        self.open = open
        self.fail = fail
        self.stall = stall
        self.send_delay = send_delay
        self.sent: list[str] = []

    @property
    def is_open(self) -> bool:
        return self.open

    async def send_text(self, payload: str) -> None:
        if self.fail:
            raise ConnectionResetError("peer went away")
        if self.stall:
            await asyncio.sleep(60)
        if self.send_delay:
            await asyncio.sleep(self.send_delay)
        self.sent.append(payload)


class FailingDispatcher(BroadcastDispatcher):
    """Dispatcher whose every broadcast blows up."""

    def __init__(self):
        super().__init__(InMemorySubscriptionRegistry(), send_timeout=0.1)

    async def broadcast(self, conversation_id, message) -> int:
        raise ConnectionError("fan-out unavailable")


class Pipeline:
    """Wires the realtime services the way the container does, minus HTTP."""

    def __init__(self, delay: float = 0.01, cancel_pending: bool = False, send_timeout: float = 0.2):
        self.store = InMemoryStore(users=demo_users(), conversations=demo_conversations())
        self.users = InMemoryUserRepository(self.store)
        self.conversations = InMemoryConversationRepository(self.store)
        self.registry = InMemorySubscriptionRegistry()
        self.dispatcher = BroadcastDispatcher(self.registry, send_timeout=send_timeout)
        self.scheduler = AsyncioTaskScheduler()
        self.locks = KeyedLock()
        self.auto_reply = AutoReplyService(
            conversation_repository=self.conversations,
            dispatcher=self.dispatcher,
            scheduler=self.scheduler,
            locks=self.locks,
            delay=delay,
            reply_text=REPLY_TEXT,
            cancel_pending=cancel_pending,
        )

    async def authors(self, conversation_id) -> list[str]:
        conversation = await self.conversations.get_by_id(conversation_id)
        return [message.author.value for message in conversation.messages]
