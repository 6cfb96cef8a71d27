"""
In-memory User Repository Implementation.

Implements UserRepository over the process-scoped InMemoryStore.
"""

from typing import Optional

from rtchat.domain.entities.user import User
from rtchat.domain.ports.repositories import UserRepository
from rtchat.domain.value_objects.user_id import UserId
from rtchat.infrastructure.persistence.in_memory_store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    _store: InMemoryStore

    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        return self._store.find_user(user_id)

    async def get_by_credentials(self, username: str, password: str) -> Optional[User]:
        """Exact username match and constant-time password comparison."""
        return self._store.find_user_by_credentials(username, password)
