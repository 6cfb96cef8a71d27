"""
Conversation Repository Port - Interface for conversation persistence.
Implementation: rtchat/infrastructure/persistence/in_memory_conversation_repository.py

Returned conversations are snapshots: mutating them does not change what is
stored. The only mutators are create() and append_message().
"""

from abc import ABC, abstractmethod
from typing import Optional
from rtchat.domain.entities.conversation import Conversation
from rtchat.domain.entities.message import Message
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def get_by_owner(self, owner_id: UserId) -> list[Conversation]: ...

    @abstractmethod
    async def create(
        self, owner_id: UserId, name: str, seed_message: Message
    ) -> Conversation: ...

    @abstractmethod
    async def append_message(
        self, conversation_id: ConversationId, message: Message
    ) -> None:
        """Raises EntityNotFoundError if the conversation does not exist."""
        ...
