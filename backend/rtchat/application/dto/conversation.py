"""Conversation DTOs for API responses."""

from __future__ import annotations
from typing import Literal

from pydantic import BaseModel

from rtchat.domain.entities.conversation import Conversation


class MessageRecord(BaseModel):
    """Message as embedded in a conversation's attributes."""

    id: str
    text: str
    author: str


class ConversationAttributes(BaseModel):
    name: str
    author: str  # owner user id
    messages: list[MessageRecord]


class ConversationResource(BaseModel):
    """
    JSON:API resource for a conversation.

    {
        "type": "conversations",
        "id": "uuid",
        "attributes": {
            "name": "...",
            "author": "<owner user id>",
            "messages": [{"id": "uuid", "text": "...", "author": "..."}, ...]
        }
    }
    """

    type: Literal["conversations"] = "conversations"
    id: str
    attributes: ConversationAttributes

    @classmethod
    def from_entity(cls, conversation: Conversation) -> ConversationResource:
        return cls(
            id=conversation.id.value,
            attributes=ConversationAttributes(
                name=conversation.name,
                author=conversation.owner_id.value,
                messages=[
                    MessageRecord(
                        id=message.id.value,
                        text=message.text,
                        author=message.author.value,
                    )
                    for message in conversation.messages
                ],
            ),
        )
