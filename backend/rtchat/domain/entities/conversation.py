"""
Conversation Entity - An append-only thread of messages owned by one user.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from rtchat.domain.entities.message import Message
from rtchat.domain.exceptions.validation_error import DomainValidationError
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.domain.value_objects.user_id import UserId


@dataclass
class Conversation:
    id: ConversationId
    name: str
    owner_id: UserId
    messages: list[Message] = field(default_factory=list)

    @classmethod
    def start(
        cls, owner_id: UserId, name: str, seed_message: Message
    ) -> Conversation:
        """Create a new conversation holding exactly one seed message."""
        return cls(
            id=ConversationId.generate(),
            name=name,
            owner_id=owner_id,
            messages=[seed_message],
        )

    @property
    def last_message(self) -> Optional[Message]:
        return self.messages[-1] if self.messages else None

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def append(self, message: Message) -> None:
        if any(existing.id == message.id for existing in self.messages):
            raise DomainValidationError(
                f"Message {message.id.value} already belongs to conversation {self.id.value}"
            )
        self.messages.append(message)

    def snapshot(self) -> Conversation:
        """Copy whose message list can be read without seeing later appends."""
        return Conversation(
            id=self.id,
            name=self.name,
            owner_id=self.owner_id,
            messages=list(self.messages),
        )
