"""
Message Entity - A single message in a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass

from rtchat.domain.value_objects.author import Author
from rtchat.domain.value_objects.message_id import MessageId


@dataclass(frozen=True)
class Message:
    id: MessageId
    text: str
    author: Author

    @classmethod
    def create(cls, text: str, author: Author) -> Message:
        """Factory method to create a new Message with a generated ID."""
        return cls(id=MessageId.generate(), text=text, author=author)

    @property
    def is_synthetic(self) -> bool:
        return self.author.is_synthetic
