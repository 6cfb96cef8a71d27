"""Message DTOs for API responses and realtime events."""

from __future__ import annotations
from typing import Literal

from pydantic import BaseModel

from rtchat.domain.entities.message import Message

MESSAGE_CREATED_EVENT = "message.created"


class MessageAttributes(BaseModel):
    text: str
    author: str


class MessageResource(BaseModel):
    """
    JSON:API resource for a message.

    {
        "type": "messages",
        "id": "uuid",
        "attributes": {"text": "...", "author": "<user id> | AI"}
    }
    """

    type: Literal["messages"] = "messages"
    id: str
    attributes: MessageAttributes

    @classmethod
    def from_entity(cls, message: Message) -> MessageResource:
        return cls(
            id=message.id.value,
            attributes=MessageAttributes(
                text=message.text, author=message.author.value
            ),
        )


class MessageCreatedEvent(BaseModel):
    """Event pushed to realtime subscribers when a message is appended."""

    event: Literal["message.created"] = MESSAGE_CREATED_EVENT
    data: MessageResource
