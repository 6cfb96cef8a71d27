import pytest

from rtchat.domain.entities.conversation import Conversation
from rtchat.domain.entities.message import Message
from rtchat.domain.exceptions import DomainValidationError
from rtchat.domain.value_objects.author import AI_AUTHOR, Author
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.domain.value_objects.user_id import UserId

USER = UserId("c89ee220-37fc-4781-ae07-24fcaf91281a")


def test_ids_reject_non_uuid_values():
    with pytest.raises(ValueError):
        ConversationId("not-a-uuid")
    with pytest.raises(ValueError):
        UserId("")


def test_author_is_user_id_or_ai_marker():
    assert Author.synthetic().value == AI_AUTHOR
    assert Author.synthetic().is_synthetic
    assert Author.of_user(USER).value == USER.value
    assert not Author.of_user(USER).is_synthetic
    with pytest.raises(ValueError):
        Author("someone")


def test_start_conversation_holds_one_seed_message():
    seed = Message.create("Hello, how can I help you?", Author.synthetic())
    conversation = Conversation.start(owner_id=USER, name="Test", seed_message=seed)

    assert conversation.messages == [seed]
    assert conversation.last_message is seed
    assert conversation.is_owned_by(USER)


def test_append_rejects_duplicate_message():
    seed = Message.create("seed", Author.synthetic())
    conversation = Conversation.start(owner_id=USER, name="Test", seed_message=seed)

    with pytest.raises(DomainValidationError):
        conversation.append(seed)
    assert len(conversation.messages) == 1


def test_snapshot_does_not_see_later_appends():
    conversation = Conversation.start(
        owner_id=USER, name="Test", seed_message=Message.create("seed", Author.synthetic())
    )
    snapshot = conversation.snapshot()

    conversation.append(Message.create("hi", Author.of_user(USER)))

    assert len(snapshot.messages) == 1
    assert len(conversation.messages) == 2
