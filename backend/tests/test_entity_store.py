import asyncio

import pytest

from rtchat.domain.entities.message import Message
from rtchat.domain.exceptions import DomainValidationError, EntityNotFoundError
from rtchat.domain.value_objects.author import Author
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.infrastructure.persistence import (
    InMemoryConversationRepository,
    InMemoryStore,
    InMemoryUserRepository,
    demo_conversations,
    demo_users,
)
from rtchat.infrastructure.persistence.seed import (
    CONVERSATION1_ID,
    USER1_ID,
    USER2_ID,
)


@pytest.fixture()
def store():
    return InMemoryStore(users=demo_users(), conversations=demo_conversations())


def test_find_user_by_credentials_requires_exact_match(store):
    users = InMemoryUserRepository(store)

    user = asyncio.run(users.get_by_credentials("user1", "password1"))
    assert user is not None and user.id == USER1_ID

    assert asyncio.run(users.get_by_credentials("user1", "password2")) is None
    assert asyncio.run(users.get_by_credentials("User1", "password1")) is None
    assert asyncio.run(users.get_by_credentials("nobody", "password1")) is None


def test_conversations_owned_by_in_creation_order(store):
    conversations = InMemoryConversationRepository(store)
    seed = Message.create("Hello, how can I help you?", Author.synthetic())

    async def scenario():
        first = await conversations.create(USER1_ID, "first", seed)
        second = await conversations.create(
            USER1_ID, "second", Message.create("again", Author.synthetic())
        )
        return first, second, await conversations.get_by_owner(USER1_ID)

    first, second, owned = asyncio.run(scenario())

    assert [c.id for c in owned] == [CONVERSATION1_ID, first.id, second.id]
    assert all(c.owner_id == USER1_ID for c in owned)
    assert USER2_ID not in {c.owner_id for c in owned}


def test_reads_are_snapshots(store):
    conversations = InMemoryConversationRepository(store)

    async def scenario():
        before = await conversations.get_by_id(CONVERSATION1_ID)
        before.messages.clear()
        await conversations.append_message(
            CONVERSATION1_ID, Message.create("hi", Author.of_user(USER1_ID))
        )
        return before, await conversations.get_by_id(CONVERSATION1_ID)

    before, after = asyncio.run(scenario())

    assert before.messages == []
    assert [m.text for m in after.messages] == ["Hello, World!", "hi"]


def test_appends_keep_prior_order(store):
    conversations = InMemoryConversationRepository(store)
    texts = [f"message {i}" for i in range(5)]

    async def scenario():
        for text in texts:
            await conversations.append_message(
                CONVERSATION1_ID, Message.create(text, Author.of_user(USER1_ID))
            )
        first = await conversations.get_by_id(CONVERSATION1_ID)
        second = await conversations.get_by_id(CONVERSATION1_ID)
        return first, second

    first, second = asyncio.run(scenario())

    assert [m.text for m in first.messages] == ["Hello, World!", *texts]
    assert first.messages == second.messages


def test_append_to_unknown_conversation_raises(store):
    with pytest.raises(EntityNotFoundError):
        store.append_message(
            ConversationId.generate(), Message.create("hi", Author.synthetic())
        )


def test_append_rejects_duplicate_message_id(store):
    message = Message.create("hi", Author.of_user(USER1_ID))
    store.append_message(CONVERSATION1_ID, message)

    with pytest.raises(DomainValidationError):
        store.append_message(CONVERSATION1_ID, message)
    assert len(store.find_conversation(CONVERSATION1_ID).messages) == 2
