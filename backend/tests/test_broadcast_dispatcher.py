import asyncio
import json

from fakes import FakeConnection

from rtchat.application.services import BroadcastDispatcher
from rtchat.domain.entities.message import Message
from rtchat.domain.value_objects.author import Author
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.domain.value_objects.user_id import UserId
from rtchat.infrastructure.realtime import InMemorySubscriptionRegistry

CONVERSATION = ConversationId("d259d0be-a4cd-41f8-a19b-e333eab1fe21")
OTHER = ConversationId("c6b3b2c2-2f7f-4d3e-8b0e-1b5d0b7b3f8d")
USER = UserId("c89ee220-37fc-4781-ae07-24fcaf91281a")


def test_event_shape():
    message = Message.create("hi", Author.of_user(USER))

    event = json.loads(BroadcastDispatcher.serialize(message))

    assert event == {
        "event": "message.created",
        "data": {
            "type": "messages",
            "id": message.id.value,
            "attributes": {"text": "hi", "author": USER.value},
        },
    }


def test_broadcast_reaches_only_the_conversations_subscribers():
    async def scenario():
        registry = InMemorySubscriptionRegistry()
        dispatcher = BroadcastDispatcher(registry, send_timeout=0.2)
        mine, theirs = FakeConnection(), FakeConnection()
        await registry.subscribe(CONVERSATION, mine)
        await registry.subscribe(OTHER, theirs)

        delivered = await dispatcher.broadcast(
            CONVERSATION, Message.create("hi", Author.of_user(USER))
        )
        return delivered, mine, theirs

    delivered, mine, theirs = asyncio.run(scenario())

    assert delivered == 1
    assert len(mine.sent) == 1
    assert json.loads(mine.sent[0])["data"]["attributes"]["text"] == "hi"
    assert theirs.sent == []


def test_no_subscribers_is_a_no_op():
    async def scenario():
        dispatcher = BroadcastDispatcher(InMemorySubscriptionRegistry(), send_timeout=0.2)
        return await dispatcher.broadcast(CONVERSATION, Message.create("hi", Author.synthetic()))

    assert asyncio.run(scenario()) == 0


def test_bad_connections_do_not_block_healthy_ones():
    async def scenario():
        registry = InMemorySubscriptionRegistry()
        dispatcher = BroadcastDispatcher(registry, send_timeout=0.1)
        healthy = FakeConnection()
        closed = FakeConnection(open=False)
        failing = FakeConnection(fail=True)
        stalled = FakeConnection(stall=True)
        for connection in (healthy, closed, failing, stalled):
            await registry.subscribe(CONVERSATION, connection)

        delivered = await dispatcher.broadcast(
            CONVERSATION, Message.create("hi", Author.of_user(USER))
        )
        return delivered, healthy, closed, await registry.subscribers_of(CONVERSATION)

    delivered, healthy, closed, still_registered = asyncio.run(scenario())

    assert delivered == 1
    assert len(healthy.sent) == 1
    assert closed.sent == []
    # Delivery failures never unsubscribe
    assert len(still_registered) == 4
