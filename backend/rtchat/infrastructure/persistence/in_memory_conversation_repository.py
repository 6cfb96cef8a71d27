"""
In-memory Conversation Repository Implementation.

Guidelines:
- Implements ConversationRepository port from domain layer
- Delegates storage to the process-scoped InMemoryStore
- Returns snapshots so callers never hold the stored message list
- All methods are async to match durable implementations of the port
"""

from typing import Optional

from rtchat.domain.entities.conversation import Conversation
from rtchat.domain.entities.message import Message
from rtchat.domain.ports.repositories import ConversationRepository
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.domain.value_objects.user_id import UserId
from rtchat.infrastructure.persistence.in_memory_store import InMemoryStore


class InMemoryConversationRepository(ConversationRepository):
    _store: InMemoryStore

    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        """Get conversation by ID."""
        return self._store.find_conversation(conversation_id)

    async def get_by_owner(self, owner_id: UserId) -> list[Conversation]:
        """Get conversations owned by user, in creation order."""
        return self._store.conversations_owned_by(owner_id)

    async def create(
        self, owner_id: UserId, name: str, seed_message: Message
    ) -> Conversation:
        return self._store.create_conversation(owner_id, name, seed_message)

    async def append_message(
        self, conversation_id: ConversationId, message: Message
    ) -> None:
        self._store.append_message(conversation_id, message)
