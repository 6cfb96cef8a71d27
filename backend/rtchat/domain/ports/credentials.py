"""
Credential port - issues and resolves bearer credentials.

Implementations: rtchat/infrastructure/security/
"""

from abc import ABC, abstractmethod
from typing import Optional

from rtchat.domain.value_objects.user_id import UserId


class CredentialCodec(ABC):
    @abstractmethod
    def issue(self, user_id: UserId) -> str: ...

    @abstractmethod
    def resolve(self, credential: str) -> Optional[UserId]:
        """Return the user id the credential stands for, or None if invalid."""
        ...
