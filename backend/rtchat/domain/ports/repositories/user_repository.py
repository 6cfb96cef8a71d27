"""
User Repository Port - Interface for user lookup.
Implementation: rtchat/infrastructure/persistence/in_memory_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from rtchat.domain.entities.user import User
from rtchat.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_credentials(
        self, username: str, password: str
    ) -> Optional[User]: ...
