"""
Demo seed data loaded at startup when SEED_DEMO_DATA is on.

Two users, each owning one conversation:
- user1 / password1 owns "Conversation #1"
- user2 / password2 owns "Conversation #2"
"""

from rtchat.domain.entities.conversation import Conversation
from rtchat.domain.entities.message import Message
from rtchat.domain.entities.user import User
from rtchat.domain.value_objects.author import Author
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.domain.value_objects.message_id import MessageId
from rtchat.domain.value_objects.user_id import UserId

USER1_ID = UserId("c89ee220-37fc-4781-ae07-24fcaf91281a")
USER2_ID = UserId("f5a2d4e7-3b8f-4c7d-8e7e-3f1b4f7e8f7d")

CONVERSATION1_ID = ConversationId("d259d0be-a4cd-41f8-a19b-e333eab1fe21")
CONVERSATION2_ID = ConversationId("c6b3b2c2-2f7f-4d3e-8b0e-1b5d0b7b3f8d")


def demo_users() -> list[User]:
    return [
        User(
            id=USER1_ID,
            username="user1",
            password="password1",
            email="user1@example.com",
        ),
        User(
            id=USER2_ID,
            username="user2",
            password="password2",
            email="user2@example.com",
        ),
    ]


def demo_conversations() -> list[Conversation]:
    return [
        Conversation(
            id=CONVERSATION1_ID,
            name="Conversation #1",
            owner_id=USER1_ID,
            messages=[
                Message(
                    id=MessageId("12f22418-4b56-44ad-9404-cf9231aad3d4"),
                    text="Hello, World!",
                    author=Author.of_user(USER1_ID),
                )
            ],
        ),
        Conversation(
            id=CONVERSATION2_ID,
            name="Conversation #2",
            owner_id=USER2_ID,
            messages=[
                Message(
                    id=MessageId("d0d8f7e8-7b3f-4b0e-8d3e-2c2f7f6b3b2c"),
                    text="Hi, there!",
                    author=Author.synthetic(),
                )
            ],
        ),
    ]
