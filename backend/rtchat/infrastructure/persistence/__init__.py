"""
Persistence Layer - Storage implementations.

Contains the in-memory store and the repository implementations of the
domain ports built on it.
"""

from rtchat.infrastructure.persistence.in_memory_store import InMemoryStore
from rtchat.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)
from rtchat.infrastructure.persistence.in_memory_conversation_repository import (
    InMemoryConversationRepository,
)
from rtchat.infrastructure.persistence.seed import demo_conversations, demo_users

__all__ = [
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryConversationRepository",
    "demo_users",
    "demo_conversations",
]
