"""
In-memory entity store.

Process-scoped state shared by the in-memory repositories. Every read and
write takes the store lock, so the store is safe to use from the event loop
and from worker threads alike. Conversations keep insertion order, which is
also the order returned for an owner.
"""

import hmac
import logging
import threading
from typing import Iterable, Optional

from rtchat.domain.entities.conversation import Conversation
from rtchat.domain.entities.message import Message
from rtchat.domain.entities.user import User
from rtchat.domain.exceptions import EntityNotFoundError
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class InMemoryStore:
    def __init__(
        self,
        users: Iterable[User] = (),
        conversations: Iterable[Conversation] = (),
    ):
        self._lock = threading.Lock()
        self._users: dict[UserId, User] = {user.id: user for user in users}
        self._conversations: dict[ConversationId, Conversation] = {
            conversation.id: conversation.snapshot() for conversation in conversations
        }

    # ==================== USERS ====================

    def find_user(self, user_id: UserId) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def find_user_by_credentials(self, username: str, password: str) -> Optional[User]:
        with self._lock:
            candidates = list(self._users.values())
        for user in candidates:
            if user.username == username and _same_secret(user.password, password):
                return user
        return None

    # ==================== CONVERSATIONS ====================

    def find_conversation(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        with self._lock:
            conversation = self._conversations.get(conversation_id)
            return conversation.snapshot() if conversation else None

    def conversations_owned_by(self, owner_id: UserId) -> list[Conversation]:
        with self._lock:
            return [
                conversation.snapshot()
                for conversation in self._conversations.values()
                if conversation.is_owned_by(owner_id)
            ]

    def create_conversation(
        self, owner_id: UserId, name: str, seed_message: Message
    ) -> Conversation:
        conversation = Conversation.start(
            owner_id=owner_id, name=name, seed_message=seed_message
        )
        with self._lock:
            self._conversations[conversation.id] = conversation
            logger.debug(
                "Created conversation %s for owner %s", conversation.id, owner_id
            )
            return conversation.snapshot()

    def append_message(self, conversation_id: ConversationId, message: Message) -> None:
        with self._lock:
            conversation = self._conversations.get(conversation_id)
            if conversation is None:
                raise EntityNotFoundError(
                    f"Conversation {conversation_id.value} not found"
                )
            conversation.append(message)


def _same_secret(stored: str, supplied: str) -> bool:
    return hmac.compare_digest(stored.encode("utf-8"), supplied.encode("utf-8"))
